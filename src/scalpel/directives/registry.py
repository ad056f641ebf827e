"""Line-suppression registry built from a file's directives.

This mirrors what a host linter does with the same comments, and is what
the diagnostic sink consults before recording anything.
"""

from collections import defaultdict
from typing import Iterable

from scalpel.directives.types import WILDCARD, Directive, DirectiveKind


def build_line_suppressions(
    directives: Iterable[Directive], line_count: int
) -> dict[int, frozenset[str]]:
    """Compute suppressed rule patterns per line.

    - Every directive line suppresses everything.
    - ``lint:ignore`` covers its own line when trailing code, else the next.
    - ``lint:disable`` covers following lines until a matching enable.
    - ``lint:ignore-file`` covers every line.

    Args:
        directives: Classified directives in document order.
        line_count: Number of lines in the file.

    Returns:
        Mapping of 1-indexed line -> frozenset of patterns.
    """
    lines: dict[int, set[str]] = defaultdict(set)
    open_regions: dict[str, int] = {}
    whole_file = False

    for directive in directives:
        kind = directive.kind
        if kind is DirectiveKind.LEGACY:
            continue

        lines[directive.line].add(WILDCARD)
        patterns = directive.targets or (WILDCARD,)

        if kind is DirectiveKind.IGNORE:
            target = directive.line if directive.annotation.trailing else directive.line + 1
            lines[target].update(patterns)
        elif kind is DirectiveKind.DISABLE:
            for pattern in patterns:
                open_regions.setdefault(pattern, directive.line)
        elif kind is DirectiveKind.ENABLE:
            closing = list(open_regions) if directive.is_bare else list(patterns)
            for pattern in closing:
                start = open_regions.pop(pattern, None)
                if start is None:
                    continue
                for line in range(start + 1, directive.line):
                    lines[line].add(pattern)
        elif kind is DirectiveKind.IGNORE_FILE:
            whole_file = True

    for pattern, start in open_regions.items():
        for line in range(start + 1, line_count + 1):
            lines[line].add(pattern)

    if whole_file:
        for line in range(1, line_count + 1):
            lines[line].add(WILDCARD)

    return {line: frozenset(patterns) for line, patterns in lines.items()}
