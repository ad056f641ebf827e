"""Single-pass matching of disable/enable directives.

The tracker walks a file's directives in document order. Its only state is
the map of open suppressions (code -> directive that disabled it), which
lives for one scan.
"""

from typing import Iterable

from scalpel.core.types import Fix
from scalpel.directives.codes import (
    MESSAGES,
    MISSING_SEPARATOR_AMBIGUOUS,
    MISSING_SEPARATOR_FIXABLE,
    DiagnosticCode,
)
from scalpel.directives.corruption import find_corruptions, repair
from scalpel.directives.legacy import migrate
from scalpel.directives.reporter import SelfProtectingReporter
from scalpel.directives.types import (
    CorruptionKind,
    Directive,
    DirectiveKind,
)


class SuppressionTracker:
    """Validate a file's directives and report through a reporter."""

    def __init__(self, reporter: SelfProtectingReporter) -> None:
        self._reporter = reporter

    def scan(self, directives: Iterable[Directive]) -> None:
        """Process directives in order, then report unmatched disables.

        Args:
            directives: Classified directives in document order.
        """
        open_suppressions: dict[str, Directive] = {}

        for directive in directives:
            kind = directive.kind

            if kind is DirectiveKind.LEGACY:
                self._check_legacy(directive)
            elif kind is DirectiveKind.IGNORE:
                if directive.is_bare:
                    self._report(DiagnosticCode.BARE_IGNORE, directive)
                else:
                    self._check_note_separator(directive)
            elif kind is DirectiveKind.DISABLE:
                if directive.is_bare:
                    # Nothing concrete to match later, so nothing is opened.
                    self._report(DiagnosticCode.BARE_DISABLE, directive)
                else:
                    self._check_note_separator(directive)
                    for code in directive.targets:
                        open_suppressions[code] = directive
            elif kind is DirectiveKind.ENABLE:
                if directive.is_bare:
                    open_suppressions.clear()
                else:
                    self._check_note_separator(directive)
                    self._match_enable(directive, open_suppressions)
            elif kind is DirectiveKind.IGNORE_FILE:
                self._report(DiagnosticCode.IGNORE_FILE, directive)

        for code, opener in open_suppressions.items():
            self._report(DiagnosticCode.UNMATCHED_DISABLE, opener, code=code)

    def _match_enable(
        self, directive: Directive, open_suppressions: dict[str, Directive]
    ) -> None:
        for code in directive.targets:
            if code in open_suppressions:
                del open_suppressions[code]
            else:
                self._report(DiagnosticCode.UNMATCHED_ENABLE, directive, code=code)

    def _check_note_separator(self, directive: Directive) -> None:
        """Report codes that absorbed note text.

        Only a single corrupted code is auto-fixed; with several, commas
        may belong to the note and the split is ambiguous.
        """
        corruptions = find_corruptions(directive)
        if not corruptions:
            return

        annotation = directive.annotation

        if len(corruptions) > 1:
            self._reporter.report(
                DiagnosticCode.MISSING_NOTE_SEPARATOR,
                annotation.line,
                MISSING_SEPARATOR_AMBIGUOUS.format(code=corruptions[0].clean_code),
                column=annotation.column,
            )
            return

        record = corruptions[0]
        fix = Fix(
            start_byte=annotation.start_byte,
            end_byte=annotation.end_byte,
            replacement=repair(annotation.raw_text, record),
        )

        if record.kind is CorruptionKind.MALFORMED:
            code = DiagnosticCode.MALFORMED_NOTE_SEPARATOR
            message = MESSAGES[code].format(code=record.clean_code)
        else:
            code = DiagnosticCode.MISSING_NOTE_SEPARATOR
            message = MISSING_SEPARATOR_FIXABLE.format(
                code=record.clean_code, note=record.note_text
            )

        self._reporter.report(code, annotation.line, message, fix=fix, column=annotation.column)

    def _check_legacy(self, directive: Directive) -> None:
        annotation = directive.annotation
        migration = migrate(annotation)
        if migration is None:
            return

        legacy = migration.legacy
        self._reporter.report(
            legacy.code,
            annotation.line,
            MESSAGES[legacy.code].format(legacy=legacy.marker, modern=legacy.modern),
            fix=Fix(
                start_byte=annotation.start_byte,
                end_byte=annotation.end_byte,
                replacement=migration.replacement,
            ),
            column=annotation.column,
        )

    def _report(self, diagnostic: DiagnosticCode, directive: Directive, **data: str) -> None:
        self._reporter.report(
            diagnostic,
            directive.line,
            MESSAGES[diagnostic].format(**data),
            column=directive.annotation.column,
        )

