"""Python language analyzer for Scalpel."""

import tree_sitter
import tree_sitter_python

from scalpel.lang.base import LanguageAnalyzer


class PythonAnalyzer(LanguageAnalyzer):
    """Python language analyzer using tree-sitter.

    Python only has ``#`` line comments; docstrings are string literals and
    never carry directives.
    """

    def __init__(self) -> None:
        """Initialize the Python analyzer."""
        self._language = tree_sitter.Language(tree_sitter_python.language())
        self._parser = tree_sitter.Parser(self._language)

    @property
    def name(self) -> str:
        return "python"

    @property
    def extensions(self) -> set[str]:
        return {".py", ".pyi"}

    @property
    def language(self) -> tree_sitter.Language:
        """Get the tree-sitter language object."""
        return self._language

    def _get_parser(self, path: str) -> tree_sitter.Parser:
        return self._parser
