"""Language analyzer module for Scalpel."""

from typing import Optional

from scalpel.lang.base import FileAST, LanguageAnalyzer
from scalpel.lang.go import GoAnalyzer
from scalpel.lang.javascript import JavaScriptAnalyzer, TypeScriptAnalyzer
from scalpel.lang.python import PythonAnalyzer

_ANALYZER_CLASSES: tuple[type[LanguageAnalyzer], ...] = (
    PythonAnalyzer,
    JavaScriptAnalyzer,
    TypeScriptAnalyzer,
    GoAnalyzer,
)

_analyzers: Optional[list[LanguageAnalyzer]] = None


def get_analyzers() -> list[LanguageAnalyzer]:
    """Get one shared instance of every language analyzer."""
    global _analyzers
    if _analyzers is None:
        _analyzers = [cls() for cls in _ANALYZER_CLASSES]
    return _analyzers


def get_analyzer_for(path: str) -> Optional[LanguageAnalyzer]:
    """Get the analyzer that handles a file, or None if unsupported.

    Args:
        path: File path.

    Returns:
        LanguageAnalyzer instance or None.
    """
    for analyzer in get_analyzers():
        if analyzer.supports_file(path):
            return analyzer
    return None


__all__ = [
    "FileAST",
    "LanguageAnalyzer",
    "PythonAnalyzer",
    "JavaScriptAnalyzer",
    "TypeScriptAnalyzer",
    "GoAnalyzer",
    "get_analyzers",
    "get_analyzer_for",
]
