"""Base language analyzer interface for Scalpel."""

import os
from abc import ABC, abstractmethod
from pathlib import Path

import tree_sitter

from scalpel.directives.types import CommentForm


class FileAST:
    """Wrapper around tree-sitter Tree for a parsed file."""

    def __init__(self, path: str, tree: tree_sitter.Tree, source: bytes):
        """Initialize FileAST.

        Args:
            path: File path.
            tree: Parsed tree-sitter tree.
            source: Original source code as bytes.
        """
        self.path = path
        self.tree = tree
        self.source = source

    @property
    def root(self) -> tree_sitter.Node:
        """Get the root node of the AST."""
        return self.tree.root_node

    @property
    def line_count(self) -> int:
        """Number of lines in the source."""
        if not self.source:
            return 0
        return self.source.count(b"\n") + (0 if self.source.endswith(b"\n") else 1)

    def text_at(self, node: tree_sitter.Node) -> str:
        """Get source text for a node.

        Args:
            node: Tree-sitter node.

        Returns:
            The source text corresponding to the node.
        """
        return self.source[node.start_byte:node.end_byte].decode("utf-8")

    def find_nodes_by_type(self, *node_types: str) -> list[tree_sitter.Node]:
        """Find all nodes of the given types, in document order.

        Args:
            node_types: Node type names (e.g. 'comment').

        Returns:
            List of matching nodes.
        """
        wanted = set(node_types)
        results: list[tree_sitter.Node] = []

        def visit(node: tree_sitter.Node) -> None:
            if node.type in wanted:
                results.append(node)
            for child in node.children:
                visit(child)

        visit(self.root)
        return results

    def is_trailing(self, node: tree_sitter.Node) -> bool:
        """Check whether code precedes the node on its first line."""
        line_start = self.source.rfind(b"\n", 0, node.start_byte) + 1
        return bool(self.source[line_start:node.start_byte].strip())


class LanguageAnalyzer(ABC):
    """Abstract base class for language analyzers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this language."""
        pass

    @property
    @abstractmethod
    def extensions(self) -> set[str]:
        """File extensions this analyzer handles (e.g., {'.py', '.pyi'})."""
        pass

    @property
    def comment_node_types(self) -> set[str]:
        """Tree-sitter node types that hold comments."""
        return {"comment"}

    @property
    def supports_doc_comments(self) -> bool:
        """Whether ``/** ... */`` is a distinct documentation comment form."""
        return False

    @abstractmethod
    def _get_parser(self, path: str) -> tree_sitter.Parser:
        """Get the parser to use for a path."""
        pass

    def parse_file(self, path: str) -> FileAST:
        """Parse a file and return its AST.

        Args:
            path: Path to the file.

        Returns:
            FileAST for the parsed file.

        Raises:
            FileNotFoundError: If file doesn't exist.
        """
        filepath = Path(path)
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {path}")

        return self.parse_bytes(filepath.read_bytes(), path)

    def parse_source(self, source: str, path: str = "<string>") -> FileAST:
        """Parse source code string and return its AST.

        Args:
            source: Source code as string.
            path: Virtual path for the source (for error messages).

        Returns:
            FileAST for the parsed source.
        """
        return self.parse_bytes(source.encode("utf-8"), path)

    def parse_bytes(self, source: bytes, path: str = "<bytes>") -> FileAST:
        """Parse raw source bytes and return its AST."""
        tree = self._get_parser(path).parse(source)
        return FileAST(path=path, tree=tree, source=source)

    def find_comments(self, ast: FileAST) -> list[tree_sitter.Node]:
        """All comment nodes of a file in document order."""
        return ast.find_nodes_by_type(*self.comment_node_types)

    def comment_form(self, text: str) -> CommentForm:
        """Classify a comment's syntactic form from its text."""
        if text.startswith("/**") and not text.startswith("/**/") and self.supports_doc_comments:
            return CommentForm.DOC
        if text.startswith("/*"):
            return CommentForm.BLOCK
        return CommentForm.LINE

    def supports_file(self, path: str) -> bool:
        """Check if this analyzer can handle the given file.

        Args:
            path: File path.

        Returns:
            True if the file extension is supported.
        """
        ext = os.path.splitext(path)[1]
        return ext in self.extensions
