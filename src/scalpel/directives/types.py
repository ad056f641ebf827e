"""Data types for suppression directives."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from scalpel.core.sink import WILDCARD

# Separator between the code list and a free-text note.
NOTE_SEPARATOR = "--"
CANONICAL_SEPARATOR = " -- "

DIRECTIVE_PREFIX = "lint:"

_MALFORMED_SPLIT = re.compile(r"\s*--")
_WHITESPACE_RUN = re.compile(r"\s+")


class DirectiveKind(Enum):
    """Kinds of recognized directive annotations."""

    IGNORE = "ignore"
    DISABLE = "disable"
    ENABLE = "enable"
    IGNORE_FILE = "ignore-file"
    LEGACY = "legacy"

    @property
    def keyword(self) -> str:
        """Modern spelling, e.g. ``lint:disable``."""
        return f"{DIRECTIVE_PREFIX}{self.value}"


class CommentForm(Enum):
    """Syntactic form of the comment carrying an annotation."""

    LINE = "line"
    BLOCK = "block"
    DOC = "doc"


@dataclass(frozen=True)
class Annotation:
    """One recognized directive occurrence.

    ``codes`` is ``None`` when the producer did not populate a code list,
    which is distinct from an explicitly empty one.
    """

    kind: DirectiveKind
    line: int
    column: int
    index: int
    raw_text: str
    codes: Optional[tuple[str, ...]] = None
    note: Optional[str] = None
    form: CommentForm = CommentForm.LINE
    trailing: bool = False
    start_byte: int = 0

    @property
    def end_byte(self) -> int:
        return self.start_byte + len(self.raw_text.encode("utf-8"))


@dataclass(frozen=True)
class Directive:
    """An annotation after classification, with bareness resolved once."""

    annotation: Annotation
    is_bare: bool
    codes: tuple[str, ...]

    @property
    def kind(self) -> DirectiveKind:
        return self.annotation.kind

    @property
    def line(self) -> int:
        return self.annotation.line

    @property
    def targets(self) -> tuple[str, ...]:
        """Codes excluding the wildcard marker."""
        return tuple(code for code in self.codes if code != WILDCARD)


class CorruptionKind(Enum):
    """How note text ended up inside a rule code."""

    MALFORMED = "malformed"  # '--' present without a preceding space
    MISSING = "missing"  # no '--' at all, whitespace inside the code


@dataclass(frozen=True)
class CorruptionRecord:
    """A code entry suspected to contain glued note text."""

    code_text: str
    kind: CorruptionKind

    @property
    def clean_code(self) -> str:
        """The rule code portion before the corruption."""
        if self.kind is CorruptionKind.MALFORMED:
            return _MALFORMED_SPLIT.split(self.code_text, maxsplit=1)[0]
        return _WHITESPACE_RUN.split(self.code_text, maxsplit=1)[0]

    @property
    def note_text(self) -> str:
        """The glued note text after the corruption point."""
        if self.kind is CorruptionKind.MALFORMED:
            parts = re.split(r"\s*--\s*", self.code_text, maxsplit=1)
        else:
            parts = _WHITESPACE_RUN.split(self.code_text, maxsplit=1)
        return parts[1] if len(parts) > 1 else ""
