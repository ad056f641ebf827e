"""Annotation extraction from parsed source files.

Every comment node is inspected. Comments starting with ``lint:<subcommand>``
become directive annotations; other comments carrying a legacy marker
become legacy annotations.
"""

import re
from typing import Optional

import tree_sitter

from scalpel.directives.legacy import find_doc_tag_marker, find_legacy_marker
from scalpel.directives.types import (
    WILDCARD,
    Annotation,
    CommentForm,
    DirectiveKind,
)
from scalpel.lang.base import FileAST, LanguageAnalyzer


class ExtractionError(Exception):
    """Error extracting annotations from a file."""

    pass


# ignore-file must come before ignore in the alternation.
DIRECTIVE_PATTERN = re.compile(
    r"^lint:(ignore-file|ignore|disable|enable)(?=\s|$)(.*)$", re.DOTALL
)

# The host only recognizes a note separator when whitespace precedes it.
NOTE_SPLIT = re.compile(r"(?:^|\s+)--")

_LINE_OPEN = re.compile(r"^(?://|#)")
_BLOCK_OPEN = re.compile(r"^/\*+")
_BLOCK_CLOSE = re.compile(r"\*+/$")


def comment_body(text: str, form: CommentForm) -> str:
    """Strip comment delimiters from a comment's text."""
    if form is CommentForm.LINE:
        return _LINE_OPEN.sub("", text, count=1).strip()
    body = _BLOCK_OPEN.sub("", text, count=1)
    return _BLOCK_CLOSE.sub("", body, count=1).strip()


def parse_directive(
    body: str,
) -> Optional[tuple[DirectiveKind, tuple[str, ...], Optional[str]]]:
    """Parse a comment body as a directive.

    Args:
        body: Comment content without delimiters.

    Returns:
        ``(kind, codes, note)`` or None if the body is not a directive.
        A bare ``lint:ignore`` yields the wildcard code set.
        Lines after the first never contribute codes or a note.
    """
    match = DIRECTIVE_PATTERN.match(body)
    if match is None:
        return None

    kind = DirectiveKind(match.group(1))
    # Codes and note live on the first line of a multi-line block comment.
    rest = match.group(2).partition("\n")[0].strip()

    note: Optional[str] = None
    parts = NOTE_SPLIT.split(rest, maxsplit=1)
    code_part = parts[0]
    if len(parts) == 2:
        note = parts[1].strip()

    codes = tuple(code.strip() for code in code_part.split(",") if code.strip())
    if not codes and kind is DirectiveKind.IGNORE:
        codes = (WILDCARD,)

    return kind, codes, note


class AnnotationExtractor:
    """Produce the ordered annotation stream for one file."""

    def __init__(self, analyzer: LanguageAnalyzer) -> None:
        self.analyzer = analyzer

    def extract(self, ast: FileAST) -> list[Annotation]:
        """Extract all directive and legacy annotations in document order.

        Args:
            ast: Parsed file.

        Returns:
            Annotations with stable, increasing indexes.

        Raises:
            ExtractionError: If a comment is not valid UTF-8.
        """
        annotations: list[Annotation] = []

        for node in self.analyzer.find_comments(ast):
            try:
                text = ast.text_at(node)
            except UnicodeDecodeError as e:
                raise ExtractionError(
                    f"{ast.path}:{node.start_point[0] + 1}: undecodable comment"
                ) from e

            annotation = self._annotate(ast, node, text, len(annotations))
            if annotation is not None:
                annotations.append(annotation)

        return annotations

    def _annotate(
        self, ast: FileAST, node: tree_sitter.Node, text: str, index: int
    ) -> Optional[Annotation]:
        form = self.analyzer.comment_form(text)
        line = node.start_point[0] + 1
        column = node.start_point[1] + 1
        trailing = ast.is_trailing(node)

        if form is not CommentForm.DOC:
            parsed = parse_directive(comment_body(text, form))
            if parsed is not None:
                kind, codes, note = parsed
                return Annotation(
                    kind=kind,
                    line=line,
                    column=column,
                    index=index,
                    raw_text=text,
                    codes=codes,
                    note=note,
                    form=form,
                    trailing=trailing,
                    start_byte=node.start_byte,
                )

            if find_legacy_marker(text) is None:
                return None
        else:
            found = find_doc_tag_marker(text)
            if found is None:
                return None
            # Report on the tag line, replace the whole doc comment.
            line += found[0]

        return Annotation(
            kind=DirectiveKind.LEGACY,
            line=line,
            column=column,
            index=index,
            raw_text=text,
            form=form,
            trailing=trailing,
            start_byte=node.start_byte,
        )
