"""Diagnostic codes emitted by the directive check."""

from enum import Enum

from scalpel.core.types import Severity


class DiagnosticCode(Enum):
    """Closed set of directive diagnostics.

    Values are the short codes written to reports.
    """

    BARE_IGNORE = "BareIgnore"
    BARE_DISABLE = "BareDisable"
    IGNORE_FILE = "IgnoreFile"
    UNMATCHED_DISABLE = "UnmatchedDisable"
    UNMATCHED_ENABLE = "UnmatchedEnable"
    DEPRECATED_IGNORE_LINE = "DeprecatedIgnoreLine"
    DEPRECATED_IGNORE_START = "DeprecatedIgnoreStart"
    DEPRECATED_IGNORE_END = "DeprecatedIgnoreEnd"
    MISSING_NOTE_SEPARATOR = "MissingNoteSeparator"
    MALFORMED_NOTE_SEPARATOR = "MalformedNoteSeparator"

    @property
    def severity(self) -> Severity:
        if self in (DiagnosticCode.UNMATCHED_DISABLE, DiagnosticCode.UNMATCHED_ENABLE):
            return Severity.WARNING
        return Severity.ERROR


MESSAGES = {
    DiagnosticCode.BARE_IGNORE: (
        "lint:ignore directive must specify rule code(s). "
        "Use lint:ignore Rule.Code.Here instead."
    ),
    DiagnosticCode.BARE_DISABLE: (
        "lint:disable directive must specify rule code(s). "
        "Use lint:disable Rule.Code.Here instead."
    ),
    DiagnosticCode.IGNORE_FILE: (
        "lint:ignore-file is not allowed. "
        "Suppress specific rules on specific lines instead."
    ),
    DiagnosticCode.UNMATCHED_DISABLE: (
        "lint:disable for '{code}' has no matching lint:enable before end of file. "
        "Consider adding a lint:enable before EOF, or moving the exclusion to "
        "project-level configuration scoped to this file."
    ),
    DiagnosticCode.UNMATCHED_ENABLE: (
        "lint:enable for '{code}' has no matching lint:disable. "
        "This enable may be stale or misplaced."
    ),
    DiagnosticCode.DEPRECATED_IGNORE_LINE: "Deprecated '{legacy}' directive. Use '{modern}' instead.",
    DiagnosticCode.DEPRECATED_IGNORE_START: "Deprecated '{legacy}' directive. Use '{modern}' instead.",
    DiagnosticCode.DEPRECATED_IGNORE_END: "Deprecated '{legacy}' directive. Use '{modern}' instead.",
    DiagnosticCode.MALFORMED_NOTE_SEPARATOR: (
        "Directive note separator for '{code}' is malformed. "
        "The '--' requires a space before it to be recognized."
    ),
}

MISSING_SEPARATOR_FIXABLE = (
    "Directive note for '{code}' is missing the '--' separator. "
    "Use '-- {note}' to separate the note from rule codes."
)
MISSING_SEPARATOR_AMBIGUOUS = (
    "Directive note for '{code}' is missing the '--' separator. "
    "Add '--' between rule codes and note text."
)
