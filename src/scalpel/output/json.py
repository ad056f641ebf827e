"""JSON report for scripts and editor integrations."""

import json

from scalpel import __version__
from scalpel.core.types import AnalysisResult, Diagnostic
from scalpel.output.base import Formatter


class JSONFormatter(Formatter):
    """One JSON document per run, diagnostics in report order."""

    @property
    def name(self) -> str:
        return "json"

    def format(self, result: AnalysisResult, include_fixes: bool = True) -> str:
        """Render a result as an indented JSON document.

        Top-level keys are ``tool``, ``target``, ``summary``,
        ``diagnostics`` and ``errors``.

        Args:
            result: The analysis result to render.
            include_fixes: When False, diagnostics carry no ``fix`` key.

        Returns:
            JSON string.
        """
        document = {
            "tool": {"name": "scalpel", "version": __version__},
            "target": result.target,
            "summary": result.summary,
            "diagnostics": [_entry(d, include_fixes) for d in result.diagnostics],
            "errors": list(result.errors),
        }
        return json.dumps(document, indent=2)


def _entry(diagnostic: Diagnostic, include_fixes: bool) -> dict:
    entry = diagnostic.to_dict()
    entry["fixable"] = diagnostic.is_fixable
    if not include_fixes:
        del entry["fix"]
    return entry
