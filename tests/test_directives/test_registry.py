"""Tests for the line-suppression registry."""

from scalpel.directives.registry import build_line_suppressions
from scalpel.directives.types import Annotation, Directive, DirectiveKind


def directive(kind: DirectiveKind, line: int, *codes: str, trailing: bool = False) -> Directive:
    annotation = Annotation(
        kind=kind, line=line, column=1, index=0, raw_text="", codes=codes, trailing=trailing
    )
    bare = not codes or codes == ("*",)
    return Directive(annotation=annotation, is_bare=bare, codes=codes)


class TestBuildLineSuppressions:
    """Tests for build_line_suppressions."""

    def test_directive_lines_suppress_everything(self):
        registry = build_line_suppressions([directive(DirectiveKind.DISABLE, 2, "A")], 5)
        assert registry[2] == frozenset({"*"})

    def test_ignore_own_line_covers_next(self):
        registry = build_line_suppressions([directive(DirectiveKind.IGNORE, 2, "A")], 5)
        assert registry[3] == frozenset({"A"})

    def test_trailing_ignore_covers_own_line(self):
        registry = build_line_suppressions(
            [directive(DirectiveKind.IGNORE, 2, "A", trailing=True)], 5
        )
        assert "A" in registry[2]
        assert 3 not in registry

    def test_bare_ignore_covers_next_line_fully(self):
        registry = build_line_suppressions([directive(DirectiveKind.IGNORE, 1, "*")], 3)
        assert registry[2] == frozenset({"*"})

    def test_disable_region(self):
        """A region covers the lines between disable and enable."""
        registry = build_line_suppressions(
            [directive(DirectiveKind.DISABLE, 1, "A"), directive(DirectiveKind.ENABLE, 4, "A")],
            6,
        )
        assert registry[2] == frozenset({"A"})
        assert registry[3] == frozenset({"A"})
        assert 5 not in registry

    def test_unclosed_region_runs_to_eof(self):
        registry = build_line_suppressions([directive(DirectiveKind.DISABLE, 1, "A")], 4)
        assert all("A" in registry[line] for line in (2, 3, 4))

    def test_bare_enable_closes_all(self):
        registry = build_line_suppressions(
            [
                directive(DirectiveKind.DISABLE, 1, "A", "B"),
                directive(DirectiveKind.ENABLE, 3),
            ],
            5,
        )
        assert registry[2] == frozenset({"A", "B"})
        assert 4 not in registry

    def test_ignore_file(self):
        registry = build_line_suppressions([directive(DirectiveKind.IGNORE_FILE, 1)], 3)
        assert all(registry[line] == frozenset({"*"}) for line in (1, 2, 3))

    def test_legacy_is_not_honored(self):
        registry = build_line_suppressions([directive(DirectiveKind.LEGACY, 1, "A")], 3)
        assert registry == {}
