"""Tests for core data types."""

import pytest

from scalpel.core.types import AnalysisResult, Diagnostic, Fix, Location, Severity


def make_diagnostic(
    code: str = "BareIgnore",
    severity: Severity = Severity.ERROR,
    fix: Fix | None = None,
    line: int = 1,
) -> Diagnostic:
    return Diagnostic(
        check="directives",
        rule=f"Scalpel.Directives.{code}",
        location=Location(file="app.py", line=line, column=1),
        severity=severity,
        message="message",
        fix=fix,
    )


class TestSeverity:
    """Tests for Severity ordering."""

    def test_error_above_warning(self):
        """Errors rank above warnings."""
        assert Severity.ERROR > Severity.WARNING
        assert Severity.WARNING < Severity.ERROR

    def test_ge_le_with_equal(self):
        """Equal severities compare as both >= and <=."""
        assert Severity.ERROR >= Severity.ERROR
        assert Severity.WARNING <= Severity.WARNING

    def test_values(self):
        """Values are the serialized names."""
        assert Severity("error") is Severity.ERROR
        assert Severity("warning") is Severity.WARNING


class TestLocation:
    """Tests for Location."""

    def test_str_with_column(self):
        assert str(Location(file="a.py", line=3, column=5)) == "a.py:3:5"

    def test_str_without_column(self):
        assert str(Location(file="a.py", line=3)) == "a.py:3"


class TestFix:
    """Tests for Fix."""

    def test_invalid_range_rejected(self):
        """End before start is rejected."""
        with pytest.raises(ValueError):
            Fix(start_byte=5, end_byte=2, replacement="")

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError):
            Fix(start_byte=-1, end_byte=2, replacement="")

    def test_overlaps(self):
        """Ranges sharing bytes overlap; adjacent ranges do not."""
        a = Fix(0, 5, "x")
        assert a.overlaps(Fix(4, 8, "y"))
        assert not a.overlaps(Fix(5, 8, "y"))

    def test_to_dict(self):
        assert Fix(1, 3, "ab").to_dict() == {
            "start_byte": 1,
            "end_byte": 3,
            "replacement": "ab",
        }


class TestDiagnostic:
    """Tests for Diagnostic."""

    def test_code_is_last_segment(self):
        """The short code drops the namespace."""
        assert make_diagnostic("UnmatchedEnable").code == "UnmatchedEnable"

    def test_is_fixable(self):
        assert make_diagnostic(fix=Fix(0, 1, "x")).is_fixable
        assert not make_diagnostic().is_fixable

    def test_to_dict(self):
        """Serialized form carries the rule, code and location."""
        data = make_diagnostic(fix=Fix(0, 1, "x")).to_dict()
        assert data["rule"] == "Scalpel.Directives.BareIgnore"
        assert data["code"] == "BareIgnore"
        assert data["severity"] == "error"
        assert data["location"] == {"file": "app.py", "line": 1, "column": 1}
        assert data["fix"]["replacement"] == "x"


class TestAnalysisResult:
    """Tests for AnalysisResult."""

    def test_empty_summary(self):
        result = AnalysisResult(target=".")
        assert result.summary["total"] == 0
        assert result.summary["fixable"] == 0
        assert result.summary["by_severity"] == {}

    def test_summary_counts(self):
        """Summary groups diagnostics by severity and code."""
        result = AnalysisResult(
            target=".",
            diagnostics=[
                make_diagnostic("BareIgnore"),
                make_diagnostic("BareIgnore", line=2),
                make_diagnostic("UnmatchedDisable", Severity.WARNING),
                make_diagnostic("MissingNoteSeparator", fix=Fix(0, 1, "x")),
            ],
            files_checked=2,
            fixes_applied=1,
        )
        summary = result.summary
        assert summary["total"] == 4
        assert summary["fixable"] == 1
        assert summary["files"] == 2
        assert summary["fixes_applied"] == 1
        assert summary["by_severity"] == {"error": 3, "warning": 1}
        assert summary["by_code"]["BareIgnore"] == 2
