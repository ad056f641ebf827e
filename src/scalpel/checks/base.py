"""Check base class and registry for Scalpel."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from scalpel.core.config import CheckConfig
from scalpel.core.sink import DiagnosticSink
from scalpel.directives.types import Directive
from scalpel.lang.base import FileAST


@dataclass
class CheckContext:
    """Context passed to checks for one file.

    Contains the parsed file, its classified directives and the sink
    diagnostics are recorded into.
    """

    ast: FileAST
    directives: list[Directive]
    sink: DiagnosticSink
    config: CheckConfig

    @property
    def path(self) -> str:
        return self.ast.path


class Check(ABC):
    """Abstract base class for checks.

    A check inspects one file at a time and records diagnostics into the
    context's sink.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this check."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this check enforces."""
        pass

    @property
    def namespace(self) -> str:
        """Dotted prefix of this check's rule codes."""
        return f"Scalpel.{self.name.title()}"

    @abstractmethod
    def run(self, context: CheckContext) -> None:
        """Check one file.

        Args:
            context: The check context with AST, directives and sink.
        """
        pass


class CheckRegistry:
    """Registry of available checks.

    Checks register themselves using the @CheckRegistry.register decorator.
    """

    _checks: dict[str, type[Check]] = {}

    @classmethod
    def register(cls, check_class: type[Check]) -> type[Check]:
        """Register a check class.

        Use as a decorator:
            @CheckRegistry.register
            class MyCheck(Check):
                ...

        Args:
            check_class: The check class to register.

        Returns:
            The check class (unchanged).
        """
        instance = check_class()
        cls._checks[instance.name] = check_class
        return check_class

    @classmethod
    def get(cls, name: str) -> type[Check] | None:
        """Get a check class by name."""
        return cls._checks.get(name)

    @classmethod
    def all(cls) -> list[type[Check]]:
        """Get all registered check classes."""
        return list(cls._checks.values())

    @classmethod
    def names(cls) -> list[str]:
        """Get all registered check names."""
        return list(cls._checks.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registered checks.

        Primarily for testing.
        """
        cls._checks.clear()
