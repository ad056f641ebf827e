"""Go language analyzer for Scalpel."""

import tree_sitter
import tree_sitter_go

from scalpel.lang.base import LanguageAnalyzer


class GoAnalyzer(LanguageAnalyzer):
    """Go language analyzer using tree-sitter.

    Go doc comments are ordinary ``//`` comments, so ``/** */`` is treated
    as a plain block comment.
    """

    def __init__(self) -> None:
        """Initialize the Go analyzer."""
        self._language = tree_sitter.Language(tree_sitter_go.language())
        self._parser = tree_sitter.Parser(self._language)

    @property
    def name(self) -> str:
        return "go"

    @property
    def extensions(self) -> set[str]:
        return {".go"}

    @property
    def language(self) -> tree_sitter.Language:
        """Get the tree-sitter language object."""
        return self._language

    def _get_parser(self, path: str) -> tree_sitter.Parser:
        return self._parser
