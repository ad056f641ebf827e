"""Text output formatter for Scalpel."""

from scalpel.core.types import AnalysisResult, Diagnostic, Severity
from scalpel.output.base import Formatter

# ANSI color codes
COLORS = {
    Severity.ERROR: "\033[91m",  # Red
    Severity.WARNING: "\033[93m",  # Yellow
}
RESET = "\033[0m"
BOLD = "\033[1m"


class TextFormatter(Formatter):
    """Human-readable text formatter for terminal output."""

    @property
    def name(self) -> str:
        return "text"

    def format(
        self,
        result: AnalysisResult,
        include_fixes: bool = True,
    ) -> str:
        """Format analysis results as human-readable text.

        Args:
            result: The analysis result to format.
            include_fixes: Whether to show proposed replacements.

        Returns:
            Formatted text output.
        """
        lines: list[str] = []

        lines.append(f"{BOLD}Scalpel{RESET}")
        lines.append(f"Target: {result.target}")
        lines.append("")

        summary = result.summary

        if result.fixes_applied:
            lines.append(f"Applied {summary['fixes_applied']} fix(es).")
            lines.append("")

        if not result.diagnostics:
            lines.append(f"No problems found in {summary['files']} file(s).")
        else:
            lines.append(f"Found {summary['total']} problem(s) in {summary['files']} file(s):")

            by_sev = summary["by_severity"]
            sev_parts = []
            for sev in [Severity.ERROR, Severity.WARNING]:
                count = by_sev.get(sev.value, 0)
                if count > 0:
                    sev_parts.append(f"{COLORS[sev]}{count} {sev.value}{RESET}")
            lines.append("  " + ", ".join(sev_parts))
            if summary["fixable"]:
                lines.append(f"  {summary['fixable']} fixable with `scalpel fix`")
            lines.append("")

            by_file: dict[str, list[Diagnostic]] = {}
            for diagnostic in result.diagnostics:
                by_file.setdefault(diagnostic.location.file, []).append(diagnostic)

            for path in sorted(by_file):
                lines.append(f"{BOLD}{path}{RESET}")
                for diagnostic in by_file[path]:
                    lines.append(self._format_diagnostic(diagnostic, include_fixes))
                lines.append("")

        if result.errors:
            lines.append(f"{COLORS[Severity.ERROR]}Errors:{RESET}")
            for error in result.errors:
                lines.append(f"  - {error}")

        return "\n".join(lines).rstrip("\n")

    def _format_diagnostic(self, diagnostic: Diagnostic, include_fixes: bool) -> str:
        lines: list[str] = []

        color = COLORS.get(diagnostic.severity, "")
        loc = diagnostic.location
        location_str = f"{loc.line}"
        if loc.column is not None:
            location_str += f":{loc.column}"

        lines.append(
            f"  {location_str} {color}[{diagnostic.severity.value.upper()}]{RESET} "
            f"{diagnostic.rule}"
        )
        lines.append(f"    {diagnostic.message}")

        if include_fixes and diagnostic.fix is not None:
            lines.append(f"    {BOLD}Fix:{RESET} {diagnostic.fix.replacement!r}")

        return "\n".join(lines)
