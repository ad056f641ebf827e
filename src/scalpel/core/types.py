"""Core data types for Scalpel."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Severity(Enum):
    """Severity levels for diagnostics."""

    ERROR = "error"
    WARNING = "warning"

    def __lt__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        order = [Severity.WARNING, Severity.ERROR]
        return order.index(self) < order.index(other)

    def __le__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return not self < other


@dataclass(frozen=True)
class Location:
    """Location of a diagnostic in source code."""

    file: str
    line: int
    column: Optional[int] = None

    def __str__(self) -> str:
        if self.column is not None:
            return f"{self.file}:{self.line}:{self.column}"
        return f"{self.file}:{self.line}"


@dataclass(frozen=True)
class Fix:
    """A proposed replacement of a byte range in a file."""

    start_byte: int
    end_byte: int
    replacement: str

    def __post_init__(self) -> None:
        if self.start_byte < 0 or self.end_byte < self.start_byte:
            raise ValueError(
                f"Invalid fix range: {self.start_byte}..{self.end_byte}"
            )

    def overlaps(self, other: "Fix") -> bool:
        """Check whether two fixes touch the same bytes."""
        return self.start_byte < other.end_byte and other.start_byte < self.end_byte

    def to_dict(self) -> dict:
        return {
            "start_byte": self.start_byte,
            "end_byte": self.end_byte,
            "replacement": self.replacement,
        }


@dataclass(frozen=True)
class Diagnostic:
    """A single finding from a check.

    ``rule`` is the fully qualified dotted code, e.g.
    ``Scalpel.Directives.BareIgnore``.
    """

    check: str
    rule: str
    location: Location
    severity: Severity
    message: str
    fix: Optional[Fix] = None

    @property
    def code(self) -> str:
        """Short code without the check namespace."""
        return self.rule.rsplit(".", 1)[-1]

    @property
    def is_fixable(self) -> bool:
        return self.fix is not None

    def to_dict(self) -> dict:
        """Convert diagnostic to dictionary."""
        return {
            "check": self.check,
            "rule": self.rule,
            "code": self.code,
            "location": {
                "file": self.location.file,
                "line": self.location.line,
                "column": self.location.column,
            },
            "severity": self.severity.value,
            "message": self.message,
            "fix": self.fix.to_dict() if self.fix else None,
        }


@dataclass
class AnalysisResult:
    """Result of analyzing one or more files."""

    target: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    files_checked: int = 0
    fixes_applied: int = 0

    @property
    def fixable(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_fixable]

    @property
    def summary(self) -> dict:
        """Generate summary statistics."""
        by_severity: dict[str, int] = {}
        by_code: dict[str, int] = {}

        for diagnostic in self.diagnostics:
            sev = diagnostic.severity.value
            by_severity[sev] = by_severity.get(sev, 0) + 1

            code = diagnostic.code
            by_code[code] = by_code.get(code, 0) + 1

        return {
            "total": len(self.diagnostics),
            "fixable": len(self.fixable),
            "files": self.files_checked,
            "fixes_applied": self.fixes_applied,
            "by_severity": by_severity,
            "by_code": by_code,
        }
