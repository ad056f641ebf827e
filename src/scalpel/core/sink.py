"""Diagnostic sink with line-level suppression for Scalpel.

The sink owns a registry mapping line numbers to the rule patterns that
are suppressed on that line. Records on a suppressed line are dropped.
"""

import fnmatch
from contextlib import contextmanager
from typing import Iterator, Optional

from scalpel.core.types import Diagnostic, Fix, Location, Severity

WILDCARD = "*"


def rule_matches(rule: str, pattern: str) -> bool:
    """Check if a dotted rule code matches a suppression pattern.

    Args:
        rule: Full rule code like "Scalpel.Directives.BareIgnore".
        pattern: Exact code, dotted prefix ("Scalpel.Directives"), or a
            glob such as "Scalpel.*".

    Returns:
        True if the rule matches the pattern.
    """
    if pattern == WILDCARD or rule == pattern:
        return True

    if rule.startswith(pattern + "."):
        return True

    if "*" in pattern:
        return fnmatch.fnmatch(rule, pattern)

    return False


class DiagnosticSink:
    """Collects diagnostics for one file."""

    def __init__(
        self,
        path: str,
        suppressed_lines: Optional[dict[int, frozenset[str]]] = None,
    ) -> None:
        """Initialize the sink.

        Args:
            path: File the diagnostics belong to.
            suppressed_lines: Registry of line -> suppressed rule patterns.
        """
        self.path = path
        self.suppressed_lines: dict[int, frozenset[str]] = dict(suppressed_lines or {})
        self.suppressed_count = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    def is_suppressed(self, line: int, rule: str) -> bool:
        """Check if a rule is suppressed on a line."""
        patterns = self.suppressed_lines.get(line)
        if not patterns:
            return False
        return any(rule_matches(rule, pattern) for pattern in patterns)

    def record(
        self,
        line: int,
        rule: str,
        severity: Severity,
        message: str,
        fix: Optional[Fix] = None,
        *,
        check: str = "",
        column: Optional[int] = None,
    ) -> bool:
        """Record a diagnostic unless its line suppresses the rule.

        Returns:
            True if the diagnostic was recorded.
        """
        if self.is_suppressed(line, rule):
            self.suppressed_count += 1
            return False

        self._diagnostics.append(
            Diagnostic(
                check=check,
                rule=rule,
                location=Location(file=self.path, line=line, column=column),
                severity=severity,
                message=message,
                fix=fix,
            )
        )
        return True

    @contextmanager
    def unsuppressed(self, line: int) -> Iterator[None]:
        """Temporarily remove a line's registry entry.

        The original entry is restored on exit, including when the body
        raises.
        """
        saved = self.suppressed_lines.pop(line, None)
        try:
            yield
        finally:
            if saved is not None:
                self.suppressed_lines[line] = saved
