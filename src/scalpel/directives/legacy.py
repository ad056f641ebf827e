"""Migration of deprecated directive spellings.

Three legacy markers map one-to-one onto modern directives:

- ``@legacy-ignore-line``  -> ``lint:ignore``
- ``@legacy-ignore-start`` -> ``lint:disable``
- ``@legacy-ignore-end``   -> ``lint:enable``
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from scalpel.directives.codes import DiagnosticCode
from scalpel.directives.types import Annotation, CommentForm, DirectiveKind

_DOC_OPEN = re.compile(r"^/\*\*+")
_DOC_CLOSE = re.compile(r"\*+/$")
_DOC_LINE_PREFIX = re.compile(r"^\s*\*?\s?")


@dataclass(frozen=True)
class LegacyMarker:
    """A deprecated spelling and its modern equivalent."""

    marker: str
    kind: DirectiveKind
    code: DiagnosticCode

    @property
    def modern(self) -> str:
        return self.kind.keyword


# Order matters: first match wins.
LEGACY_MARKERS: tuple[LegacyMarker, ...] = (
    LegacyMarker("@legacy-ignore-line", DirectiveKind.IGNORE, DiagnosticCode.DEPRECATED_IGNORE_LINE),
    LegacyMarker("@legacy-ignore-start", DirectiveKind.DISABLE, DiagnosticCode.DEPRECATED_IGNORE_START),
    LegacyMarker("@legacy-ignore-end", DirectiveKind.ENABLE, DiagnosticCode.DEPRECATED_IGNORE_END),
)


@dataclass(frozen=True)
class Migration:
    """Replacement text for a comment carrying a legacy marker."""

    legacy: LegacyMarker
    replacement: str


def find_legacy_marker(text: str) -> Optional[LegacyMarker]:
    """Return the first legacy marker contained in ``text``."""
    for legacy in LEGACY_MARKERS:
        if legacy.marker in text:
            return legacy
    return None


def doc_comment_lines(raw_text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_offset, content)`` for each line of a doc comment.

    Delimiters and the leading ``*`` gutter are stripped from the content.
    """
    for offset, line in enumerate(raw_text.split("\n")):
        content = line.strip()
        if offset == 0:
            content = _DOC_OPEN.sub("", content, count=1)
        content = _DOC_CLOSE.sub("", content, count=1)
        content = _DOC_LINE_PREFIX.sub("", content, count=1).strip()
        yield offset, content


def _doc_tag_line(raw_text: str) -> Optional[tuple[int, str, LegacyMarker]]:
    for offset, content in doc_comment_lines(raw_text):
        if not content.startswith("@"):
            continue
        legacy = find_legacy_marker(content)
        if legacy is not None:
            return offset, content, legacy
    return None


def find_doc_tag_marker(raw_text: str) -> Optional[tuple[int, LegacyMarker]]:
    """Find the first legacy marker on a doc comment tag line.

    Returns:
        ``(line_offset, marker)`` or None.
    """
    found = _doc_tag_line(raw_text)
    if found is None:
        return None
    return found[0], found[2]


def migrate(annotation: Annotation) -> Optional[Migration]:
    """Compute the modern replacement for a legacy annotation.

    Doc comments are never read as directives, so the whole doc comment
    is replaced by a block comment built from the marker and the rest of
    its tag line.

    Args:
        annotation: Annotation whose raw text may contain a legacy marker.

    Returns:
        Migration, or None when no marker is present.
    """
    if annotation.form is CommentForm.DOC:
        found = _doc_tag_line(annotation.raw_text)
        if found is None:
            return None
        _, content, legacy = found
        rest = content[content.index(legacy.marker) + len(legacy.marker):]
        directive = f"{legacy.modern}{rest}".strip()
        return Migration(legacy=legacy, replacement=f"/* {directive} */")

    legacy = find_legacy_marker(annotation.raw_text)
    if legacy is None:
        return None

    return Migration(
        legacy=legacy,
        replacement=annotation.raw_text.replace(legacy.marker, legacy.modern),
    )
