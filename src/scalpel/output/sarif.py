"""SARIF output formatter for Scalpel.

SARIF (Static Analysis Results Interchange Format) is a standard format
for the output of static analysis tools, designed for CI/CD integration.
Proposed fixes are emitted as byte-offset replacements.
"""

import json
from typing import Any

from scalpel import __version__
from scalpel.core.types import AnalysisResult, Diagnostic, Severity
from scalpel.output.base import Formatter

SARIF_LEVELS = {
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
}


class SARIFFormatter(Formatter):
    """SARIF v2.1.0 formatter for CI integration."""

    @property
    def name(self) -> str:
        return "sarif"

    def format(
        self,
        result: AnalysisResult,
        include_fixes: bool = True,
    ) -> str:
        sarif: dict[str, Any] = {
            "$schema": "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json",
            "version": "2.1.0",
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": "Scalpel",
                            "version": __version__,
                            "rules": self._build_rules(result.diagnostics),
                        }
                    },
                    "results": self._build_results(result.diagnostics, include_fixes),
                }
            ],
        }

        if result.errors:
            sarif["runs"][0]["invocations"] = [
                {
                    "executionSuccessful": False,
                    "toolExecutionNotifications": [
                        {"level": "error", "message": {"text": error}}
                        for error in result.errors
                    ],
                }
            ]

        return json.dumps(sarif, indent=2)

    def _build_rules(self, diagnostics: list[Diagnostic]) -> list[dict[str, Any]]:
        """Build SARIF rules array, one entry per distinct rule."""
        seen_rules: dict[str, dict[str, Any]] = {}

        for diagnostic in diagnostics:
            if diagnostic.rule in seen_rules:
                continue
            seen_rules[diagnostic.rule] = {
                "id": diagnostic.rule,
                "name": diagnostic.code,
                "defaultConfiguration": {
                    "level": SARIF_LEVELS.get(diagnostic.severity, "warning")
                },
            }

        return list(seen_rules.values())

    def _build_results(
        self, diagnostics: list[Diagnostic], include_fixes: bool
    ) -> list[dict[str, Any]]:
        results = []

        for diagnostic in diagnostics:
            loc = diagnostic.location
            region: dict[str, Any] = {"startLine": loc.line}
            if loc.column is not None:
                region["startColumn"] = loc.column

            result: dict[str, Any] = {
                "ruleId": diagnostic.rule,
                "level": SARIF_LEVELS.get(diagnostic.severity, "warning"),
                "message": {"text": diagnostic.message},
                "locations": [
                    {
                        "physicalLocation": {
                            "artifactLocation": {"uri": loc.file},
                            "region": region,
                        }
                    }
                ],
            }

            if include_fixes and diagnostic.fix is not None:
                fix = diagnostic.fix
                result["fixes"] = [
                    {
                        "description": {"text": f"Rewrite as {fix.replacement!r}"},
                        "artifactChanges": [
                            {
                                "artifactLocation": {"uri": loc.file},
                                "replacements": [
                                    {
                                        "deletedRegion": {
                                            "byteOffset": fix.start_byte,
                                            "byteLength": fix.end_byte - fix.start_byte,
                                        },
                                        "insertedContent": {"text": fix.replacement},
                                    }
                                ],
                            }
                        ],
                    }
                ]

            results.append(result)

        return results
