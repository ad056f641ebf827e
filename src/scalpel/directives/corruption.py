"""Detection and repair of notes glued onto rule codes.

A note is only split off a directive when ``--`` follows whitespace. When
the author writes ``Foo.Bar reason`` or ``Foo.Bar--reason`` the note ends up
inside the code, and the suppression silently stops matching anything.
"""

import re

from scalpel.directives.types import (
    CANONICAL_SEPARATOR,
    NOTE_SEPARATOR,
    WILDCARD,
    CorruptionKind,
    CorruptionRecord,
    Directive,
)

_WHITESPACE = re.compile(r"[ \t]")
_SEPARATOR_SPACING = re.compile(r"\s*--\s*")


def find_corruptions(directive: Directive) -> list[CorruptionRecord]:
    """Classify each corrupted code of a targeted directive.

    A literal ``--`` is checked before whitespace, since ``Code--note text``
    has both.

    Args:
        directive: A classified, targeted directive.

    Returns:
        Corruption records in code order.
    """
    records: list[CorruptionRecord] = []

    for code in directive.codes:
        if code == WILDCARD:
            continue

        if NOTE_SEPARATOR in code:
            records.append(CorruptionRecord(code_text=code, kind=CorruptionKind.MALFORMED))
            continue

        if _WHITESPACE.search(code):
            records.append(CorruptionRecord(code_text=code, kind=CorruptionKind.MISSING))

    return records


def repair_code(record: CorruptionRecord) -> str:
    """Rewrite a single corrupted code with a canonical separator."""
    if record.kind is CorruptionKind.MALFORMED:
        return _SEPARATOR_SPACING.sub(CANONICAL_SEPARATOR, record.code_text, count=1)
    return f"{record.clean_code}{CANONICAL_SEPARATOR}{record.note_text}"


def repair(raw_text: str, record: CorruptionRecord) -> str:
    """Apply :func:`repair_code` inside the directive's raw text."""
    return raw_text.replace(record.code_text, repair_code(record), 1)
