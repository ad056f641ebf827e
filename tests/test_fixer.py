"""Tests for fix application."""

import pytest

from scalpel.core.fixer import FixConflictError, apply_fixes
from scalpel.core.types import Fix


class TestApplyFixes:
    """Tests for apply_fixes."""

    def test_no_fixes(self):
        assert apply_fixes(b"abc", []) == b"abc"

    def test_single_fix(self):
        assert apply_fixes(b"hello world", [Fix(6, 11, "there")]) == b"hello there"

    def test_multiple_fixes_any_order(self):
        """Fixes are applied by position regardless of input order."""
        source = b"aaa bbb ccc"
        fixes = [Fix(8, 11, "C"), Fix(0, 3, "A")]
        assert apply_fixes(source, fixes) == b"A bbb C"

    def test_length_changing_fixes(self):
        """Earlier fixes do not shift the ranges of later ones."""
        source = b"x = 1  # a\ny = 2  # b\n"
        fixes = [Fix(7, 10, "# longer comment"), Fix(18, 21, "#")]
        assert apply_fixes(source, fixes) == b"x = 1  # longer comment\ny = 2  #\n"

    def test_duplicate_fixes_collapse(self):
        assert apply_fixes(b"abc", [Fix(0, 1, "z"), Fix(0, 1, "z")]) == b"zbc"

    def test_overlap_rejected(self):
        """Overlapping fixes raise and nothing is applied."""
        with pytest.raises(FixConflictError, match="Overlapping"):
            apply_fixes(b"abcdef", [Fix(0, 3, "x"), Fix(2, 5, "y")])

    def test_out_of_range_rejected(self):
        with pytest.raises(FixConflictError, match="exceeds"):
            apply_fixes(b"abc", [Fix(1, 10, "x")])

    def test_multibyte_replacement(self):
        """Replacements are encoded as UTF-8."""
        assert apply_fixes("é = 1".encode("utf-8"), [Fix(0, 2, "ü")]) == "ü = 1".encode("utf-8")
