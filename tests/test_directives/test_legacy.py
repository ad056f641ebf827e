"""Tests for legacy marker migration."""

from scalpel.directives.codes import DiagnosticCode
from scalpel.directives.legacy import (
    find_doc_tag_marker,
    find_legacy_marker,
    migrate,
)
from scalpel.directives.types import Annotation, CommentForm, DirectiveKind


def legacy_annotation(raw_text: str, form: CommentForm = CommentForm.LINE) -> Annotation:
    return Annotation(
        kind=DirectiveKind.LEGACY, line=1, column=1, index=0, raw_text=raw_text, form=form
    )


class TestFindLegacyMarker:
    """Tests for marker lookup."""

    def test_each_marker(self):
        assert find_legacy_marker("# @legacy-ignore-line").code is DiagnosticCode.DEPRECATED_IGNORE_LINE
        assert find_legacy_marker("# @legacy-ignore-start").code is DiagnosticCode.DEPRECATED_IGNORE_START
        assert find_legacy_marker("# @legacy-ignore-end").code is DiagnosticCode.DEPRECATED_IGNORE_END

    def test_first_match_wins(self):
        """With several markers, the first in table order is used."""
        legacy = find_legacy_marker("# @legacy-ignore-end @legacy-ignore-line")
        assert legacy.code is DiagnosticCode.DEPRECATED_IGNORE_LINE

    def test_no_marker(self):
        assert find_legacy_marker("# nothing here") is None

    def test_modern_spelling(self):
        assert find_legacy_marker("@legacy-ignore-start").modern == "lint:disable"


class TestDocComments:
    """Tests for doc comment helpers."""

    def test_tag_line_offset(self):
        raw = "/**\n * Text.\n * @legacy-ignore-start\n */"
        offset, legacy = find_doc_tag_marker(raw)
        assert offset == 2
        assert legacy.modern == "lint:disable"

    def test_single_line_tag(self):
        offset, _ = find_doc_tag_marker("/** @legacy-ignore-line */")
        assert offset == 0

    def test_prose_is_ignored(self):
        assert find_doc_tag_marker("/** Mentions @legacy-ignore-line inline. */") is None


class TestMigrate:
    """Tests for computing replacements."""

    def test_line_comment(self):
        migration = migrate(legacy_annotation("// @legacy-ignore-line"))
        assert migration.replacement == "// lint:ignore"

    def test_line_comment_keeps_surrounding_text(self):
        migration = migrate(legacy_annotation("# @legacy-ignore-start A.B -- reason"))
        assert migration.replacement == "# lint:disable A.B -- reason"

    def test_sole_doc_marker_becomes_block_comment(self):
        """A doc comment holding only the marker is rewritten as a block comment."""
        migration = migrate(legacy_annotation("/**\n * @legacy-ignore-end\n */", CommentForm.DOC))
        assert migration.replacement == "/* lint:enable */"

    def test_doc_marker_with_prose_becomes_block_comment(self):
        """Prose is dropped so the result is a directive the extractor reads."""
        raw = "/**\n * Helper.\n * @legacy-ignore-line\n */"
        migration = migrate(legacy_annotation(raw, CommentForm.DOC))
        assert migration.replacement == "/* lint:ignore */"

    def test_doc_marker_keeps_codes(self):
        """Codes and notes after the marker carry over."""
        raw = "/** @legacy-ignore-start Foo.Bar -- generated */"
        migration = migrate(legacy_annotation(raw, CommentForm.DOC))
        assert migration.replacement == "/* lint:disable Foo.Bar -- generated */"

    def test_no_marker(self):
        assert migrate(legacy_annotation("# plain")) is None
