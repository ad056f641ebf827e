"""Tests for annotation extraction."""

import pytest

from scalpel.directives.extractor import (
    AnnotationExtractor,
    comment_body,
    parse_directive,
)
from scalpel.directives.types import Annotation, CommentForm, DirectiveKind
from scalpel.lang import GoAnalyzer, JavaScriptAnalyzer, PythonAnalyzer


def extract_python(source: str) -> list[Annotation]:
    analyzer = PythonAnalyzer()
    return AnnotationExtractor(analyzer).extract(analyzer.parse_source(source, "app.py"))


def extract_js(source: str) -> list[Annotation]:
    analyzer = JavaScriptAnalyzer()
    return AnnotationExtractor(analyzer).extract(analyzer.parse_source(source, "app.js"))


class TestCommentBody:
    """Tests for stripping comment delimiters."""

    @pytest.mark.parametrize(
        "text,form,expected",
        [
            ("# lint:ignore A", CommentForm.LINE, "lint:ignore A"),
            ("// lint:ignore A", CommentForm.LINE, "lint:ignore A"),
            ("/* lint:disable A */", CommentForm.BLOCK, "lint:disable A"),
            ("/*lint:enable*/", CommentForm.BLOCK, "lint:enable"),
        ],
    )
    def test_strip(self, text: str, form: CommentForm, expected: str):
        assert comment_body(text, form) == expected


class TestParseDirective:
    """Tests for parsing a directive body."""

    def test_not_a_directive(self):
        assert parse_directive("just a comment") is None
        assert parse_directive("lint:ignored A") is None
        assert parse_directive("see lint:ignore A") is None

    def test_targeted(self):
        assert parse_directive("lint:disable A.B, C") == (
            DirectiveKind.DISABLE,
            ("A.B", "C"),
            None,
        )

    def test_bare_ignore_is_wildcard(self):
        """A bare ignore suppresses everything."""
        assert parse_directive("lint:ignore") == (DirectiveKind.IGNORE, ("*",), None)

    def test_bare_disable_and_enable_are_empty(self):
        assert parse_directive("lint:disable") == (DirectiveKind.DISABLE, (), None)
        assert parse_directive("lint:enable -- done") == (DirectiveKind.ENABLE, (), "done")

    def test_ignore_file(self):
        kind, codes, _ = parse_directive("lint:ignore-file")
        assert kind is DirectiveKind.IGNORE_FILE
        assert codes == ()

    def test_note(self):
        """A spaced separator splits the note off."""
        assert parse_directive("lint:ignore A.B -- flaky, see #12") == (
            DirectiveKind.IGNORE,
            ("A.B",),
            "flaky, see #12",
        )

    def test_glued_separator_stays_in_code(self):
        """'--' without preceding whitespace is not a separator."""
        _, codes, note = parse_directive("lint:ignore A.B--reason")
        assert codes == ("A.B--reason",)
        assert note is None

    def test_missing_separator_stays_in_code(self):
        _, codes, _ = parse_directive("lint:ignore A.B reason text")
        assert codes == ("A.B reason text",)

    def test_codes_stop_at_first_line(self):
        """Continuation lines of a block comment are plain prose."""
        kind, codes, note = parse_directive("lint:disable Foo.Bar\n   still disabled")
        assert kind is DirectiveKind.DISABLE
        assert codes == ("Foo.Bar",)
        assert note is None

    def test_note_stops_at_first_line(self):
        _, codes, note = parse_directive("lint:ignore A -- flaky\n   see issue 12")
        assert codes == ("A",)
        assert note == "flaky"

    def test_codes_on_second_line_are_ignored(self):
        _, codes, _ = parse_directive("lint:ignore\n   A")
        assert codes == ("*",)


class TestAnnotationExtractor:
    """Tests for extracting annotations from parsed files."""

    def test_python_directives(self):
        """Directives are extracted in order with positions."""
        annotations = extract_python(
            "x = 1  # lint:ignore A\n"
            "# lint:disable B -- noisy\n"
            "y = 2\n"
            "# lint:enable B\n"
            "# plain comment\n"
        )
        assert [a.kind for a in annotations] == [
            DirectiveKind.IGNORE,
            DirectiveKind.DISABLE,
            DirectiveKind.ENABLE,
        ]
        assert [a.index for a in annotations] == [0, 1, 2]
        assert [a.line for a in annotations] == [1, 2, 4]
        assert annotations[0].column == 8
        assert annotations[0].trailing
        assert not annotations[1].trailing
        assert annotations[1].note == "noisy"

    def test_byte_range_covers_comment(self):
        source = "x = 1  # lint:ignore A\n"
        [annotation] = extract_python(source)
        data = source.encode("utf-8")
        assert data[annotation.start_byte:annotation.end_byte] == b"# lint:ignore A"

    def test_byte_range_with_multibyte_prefix(self):
        """Offsets are byte offsets, not character offsets."""
        source = 's = "héllo"  # lint:ignore A\n'
        [annotation] = extract_python(source)
        data = source.encode("utf-8")
        assert data[annotation.start_byte:annotation.end_byte] == b"# lint:ignore A"

    def test_legacy_line_comment(self):
        [annotation] = extract_python("x = 1  # @legacy-ignore-line\n")
        assert annotation.kind is DirectiveKind.LEGACY
        assert annotation.codes is None

    def test_block_comment(self):
        [annotation] = extract_js("/* lint:disable A */\nlet x = 1;\n")
        assert annotation.kind is DirectiveKind.DISABLE
        assert annotation.form is CommentForm.BLOCK
        assert annotation.codes == ("A",)

    def test_multiline_block_comment(self):
        [annotation] = extract_js("/* lint:disable A\n   still disabled */\nlet x = 1;\n")
        assert annotation.codes == ("A",)
        assert annotation.line == 1

    def test_doc_comment_is_never_a_directive(self):
        """Doc comments only ever produce legacy annotations."""
        assert extract_js("/** lint:ignore A */\nlet x = 1;\n") == []

    def test_doc_comment_legacy_on_tag_line(self):
        """Doc legacy markers are reported on the tag line."""
        source = "/**\n * Helper.\n * @legacy-ignore-line\n */\nlet x = 1;\n"
        [annotation] = extract_js(source)
        assert annotation.kind is DirectiveKind.LEGACY
        assert annotation.form is CommentForm.DOC
        assert annotation.line == 3
        assert annotation.raw_text == source[: source.index("*/") + 2]

    def test_doc_comment_marker_outside_tag_line(self):
        """Markers in doc prose are ignored."""
        assert extract_js("/** Do not use @legacy-ignore-line here. */\nlet x;\n") == []

    def test_go(self):
        analyzer = GoAnalyzer()
        ast = analyzer.parse_source("package main\n\nvar x = 1 // lint:ignore A\n", "m.go")
        [annotation] = AnnotationExtractor(analyzer).extract(ast)
        assert annotation.line == 3
        assert annotation.trailing
