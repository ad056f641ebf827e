"""Reporting that cannot be silenced by the directives being checked."""

from typing import Optional

from scalpel.core.sink import DiagnosticSink
from scalpel.core.types import Fix
from scalpel.directives.codes import DiagnosticCode


class SelfProtectingReporter:
    """Records directive diagnostics past same-line suppressions.

    Every directive line is suppressed for all rules by the host registry,
    and an author could also target our codes directly. Each emission
    clears the line's registry entry, records, and restores it.
    """

    def __init__(self, sink: DiagnosticSink, check: str, namespace: str) -> None:
        """Initialize the reporter.

        Args:
            sink: Diagnostic sink for the current file.
            check: Name of the reporting check.
            namespace: Dotted prefix for rule codes, e.g. "Scalpel.Directives".
        """
        self._sink = sink
        self._check = check
        self._namespace = namespace

    def rule_for(self, code: DiagnosticCode) -> str:
        return f"{self._namespace}.{code.value}"

    def report(
        self,
        code: DiagnosticCode,
        line: int,
        message: str,
        fix: Optional[Fix] = None,
        column: Optional[int] = None,
    ) -> None:
        """Record one diagnostic with the line's suppressions lifted."""
        with self._sink.unsuppressed(line):
            self._sink.record(
                line,
                self.rule_for(code),
                code.severity,
                message,
                fix,
                check=self._check,
                column=column,
            )
