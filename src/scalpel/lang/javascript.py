"""JavaScript/TypeScript language analyzers for Scalpel."""

import tree_sitter
import tree_sitter_javascript
import tree_sitter_typescript

from scalpel.lang.base import LanguageAnalyzer


class JavaScriptAnalyzer(LanguageAnalyzer):
    """JavaScript language analyzer using tree-sitter."""

    def __init__(self) -> None:
        """Initialize the JavaScript analyzer."""
        self._language = tree_sitter.Language(tree_sitter_javascript.language())
        self._parser = tree_sitter.Parser(self._language)

    @property
    def name(self) -> str:
        return "javascript"

    @property
    def extensions(self) -> set[str]:
        return {".js", ".jsx", ".mjs", ".cjs"}

    @property
    def supports_doc_comments(self) -> bool:
        return True

    @property
    def language(self) -> tree_sitter.Language:
        """Get the tree-sitter language object."""
        return self._language

    def _get_parser(self, path: str) -> tree_sitter.Parser:
        return self._parser


class TypeScriptAnalyzer(LanguageAnalyzer):
    """TypeScript language analyzer using tree-sitter."""

    def __init__(self) -> None:
        """Initialize the TypeScript analyzer."""
        self._language = tree_sitter.Language(tree_sitter_typescript.language_typescript())
        self._tsx_language = tree_sitter.Language(tree_sitter_typescript.language_tsx())
        self._parser = tree_sitter.Parser(self._language)
        self._tsx_parser = tree_sitter.Parser(self._tsx_language)

    @property
    def name(self) -> str:
        return "typescript"

    @property
    def extensions(self) -> set[str]:
        return {".ts", ".tsx", ".mts", ".cts"}

    @property
    def supports_doc_comments(self) -> bool:
        return True

    @property
    def language(self) -> tree_sitter.Language:
        """Get the tree-sitter language object."""
        return self._language

    def _get_parser(self, path: str) -> tree_sitter.Parser:
        """Get appropriate parser based on file extension."""
        if path.endswith(".tsx"):
            return self._tsx_parser
        return self._parser
