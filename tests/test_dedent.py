"""Tests for tab-aware indentation measurement and removal.

Tests verify:
- indentation() column arithmetic for spaces and tabs
- unindent() cutting, clamping, interior tab expansion and end-of-input flush
- common_indentation() and dedent()
- Validation of tabwidth
"""

import pytest
from hypothesis import given

from printkit import dedent, indentation, unindent
from printkit.syntax import Indentation, common_indentation
from tests.strategies import indent_lines, indented_blocks, tabwidths


class TestIndentation:
    """Test leading whitespace measurement."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("", (0, True)),
            ("foo", (0, False)),
            ("  foo", (2, False)),
            ("\tfoo", (8, False)),
            ("   \tfoo", (8, False)),
            ("\t  foo", (10, False)),
            ("        \tx", (16, False)),
            ("   ", (3, True)),
            ("\t\t", (16, True)),
            ("  \n  x", (2, False)),
        ],
    )
    def test_widths(self, line: str, expected: tuple[int, bool]) -> None:
        """Spaces add one column, tabs advance to the next stop."""
        assert indentation(line) == expected

    def test_custom_tabwidth(self) -> None:
        """Tab stops follow tabwidth."""
        assert indentation(" \tx", tabwidth=4) == Indentation(4, False)
        assert indentation("\t\t", tabwidth=2) == Indentation(4, True)

    def test_returns_named_tuple(self) -> None:
        """Results expose width and blank by name."""
        result = indentation("\tfoo\n\tbar\n")
        assert result.width == 8
        assert result.blank is False

    @pytest.mark.parametrize("tabwidth", [0, -1])
    def test_invalid_tabwidth(self, tabwidth: int) -> None:
        """tabwidth below 1 raises ValueError."""
        with pytest.raises(ValueError, match="tabwidth must be a positive integer"):
            indentation("x", tabwidth=tabwidth)

    @given(line=indent_lines, tabwidth=tabwidths)
    def test_blank_means_all_whitespace(self, line: str, tabwidth: int) -> None:
        """blank is true exactly for whitespace-only lines."""
        assert indentation(line, tabwidth=tabwidth).blank == (line.strip(" \t") == "")


class TestUnindent:
    """Test indentation removal."""

    def test_zero_indent_is_identity(self) -> None:
        """indent 0 returns the input unchanged."""
        text = "\t  a\n b\t c\n"
        assert unindent(text, 0) == text

    def test_tab_indented_block(self) -> None:
        """Tabs count as columns up to the next tab stop."""
        assert unindent("\tfoo\n\tbar\n", 8) == "foo\nbar\n"

    def test_relative_indent_kept(self) -> None:
        """Deeper lines keep the indentation beyond the cut."""
        assert unindent("    a\n      b\n    c", 4) == "a\n  b\nc"

    def test_mixed_tabs_and_spaces(self) -> None:
        """A tab and eight spaces cut equally."""
        assert unindent("\ta\n        b\n", 8) == "a\nb\n"

    def test_partial_tab_becomes_spaces(self) -> None:
        """Leading columns beyond the cut are written as spaces."""
        assert unindent("\tx", 4) == "    x"

    def test_short_lines_clamp_to_zero(self) -> None:
        """Lines indented less than the cut lose all indentation."""
        assert unindent("  a\n    b", 4) == "a\nb"

    def test_short_blank_lines_become_empty(self) -> None:
        """Blank lines shorter than the cut become empty lines."""
        assert unindent("    a\n  \n\n    b\n", 4) == "a\n\n\nb\n"

    def test_long_blank_line_keeps_excess(self) -> None:
        """Blank lines keep the whitespace beyond the cut."""
        assert unindent("  a\n      \n  b", 2) == "a\n    \nb"

    def test_trailing_whitespace_line_flushed(self) -> None:
        """A final whitespace-only line without newline is flushed."""
        assert unindent("  a\n     ", 2) == "a\n   "
        assert unindent("  a\n  ", 4) == "a\n"

    def test_interior_tabs_expand_at_original_column(self) -> None:
        """Interior tabs become the spaces they occupied before the cut."""
        # "    ab\tc": the tab at column 6 reaches column 8
        assert unindent("    ab\tc", 4) == "ab  c"

    def test_interior_tabs_after_tab_indent(self) -> None:
        """Expansion uses columns measured from the original line start."""
        assert unindent("\ta\tb", 8) == "a" + " " * 7 + "b"

    def test_no_newline_at_end(self) -> None:
        """Text without a final newline keeps none."""
        assert unindent("  x", 2) == "x"

    def test_empty_text(self) -> None:
        """Empty input gives empty output."""
        assert unindent("", 4) == ""

    def test_custom_tabwidth(self) -> None:
        """Cutting respects tabwidth."""
        assert unindent("\tx\n\t\ty", 4, tabwidth=4) == "x\n    y"

    def test_invalid_tabwidth(self) -> None:
        """tabwidth below 1 raises ValueError."""
        with pytest.raises(ValueError, match="tabwidth"):
            unindent("  x", 2, tabwidth=0)

    def test_unicode_content(self) -> None:
        """Non-ASCII text survives the buffer round trip."""
        assert unindent("  héllo\n  wörld", 2) == "héllo\nwörld"

    @given(text=indented_blocks(), tabwidth=tabwidths)
    def test_zero_indent_identity_property(self, text: str, tabwidth: int) -> None:
        """unindent(text, 0) == text for any text."""
        assert unindent(text, 0, tabwidth=tabwidth) == text

    @given(text=indented_blocks(), tabwidth=tabwidths)
    def test_line_count_preserved(self, text: str, tabwidth: int) -> None:
        """Cutting never adds or removes lines."""
        result = unindent(text, 3, tabwidth=tabwidth)
        assert result.count("\n") == text.count("\n")

    @given(text=indented_blocks(), tabwidth=tabwidths)
    def test_output_has_no_tabs(self, text: str, tabwidth: int) -> None:
        """Every tab is expanded when indent is non-zero."""
        assert "\t" not in unindent(text, 1, tabwidth=tabwidth)

    @given(text=indented_blocks(), tabwidth=tabwidths)
    def test_content_preserved(self, text: str, tabwidth: int) -> None:
        """Non-whitespace characters survive in order."""
        result = unindent(text, 2, tabwidth=tabwidth)
        strip = str.maketrans("", "", " \t")
        assert result.translate(strip) == text.translate(strip)


class TestCommonIndentation:
    """Test the common indentation of a block."""

    def test_minimum_of_non_blank_lines(self) -> None:
        """The smallest non-blank indentation wins."""
        assert common_indentation("    a\n  b\n      c") == 2

    def test_blank_lines_ignored(self) -> None:
        """Whitespace-only lines do not lower the minimum."""
        assert common_indentation("    a\n\n \n    b\n  ") == 4

    def test_all_blank(self) -> None:
        """All-blank text has no indentation."""
        assert common_indentation("  \n\t\n") == 0
        assert common_indentation("") == 0

    def test_tabs(self) -> None:
        """Tabs are measured in columns."""
        assert common_indentation("\ta\n\t\tb") == 8


class TestDedent:
    """Test stripping the common indentation."""

    def test_block(self) -> None:
        """The common prefix is removed from every line."""
        assert dedent("    if x:\n        y\n") == "if x:\n    y\n"

    def test_already_flush(self) -> None:
        """Unindented text is returned unchanged."""
        text = "a\n  b\n"
        assert dedent(text) == text

    def test_tab_block(self) -> None:
        """Tab-indented blocks dedent by whole tab stops."""
        assert dedent("\tfoo\n\tbar\n") == "foo\nbar\n"

    @given(text=indented_blocks(), tabwidth=tabwidths)
    def test_result_has_no_common_indentation(self, text: str, tabwidth: int) -> None:
        """After dedent, the common indentation is zero."""
        result = dedent(text, tabwidth=tabwidth)
        assert common_indentation(result, tabwidth=tabwidth) == 0

    @given(text=indented_blocks(), tabwidth=tabwidths)
    def test_idempotent(self, text: str, tabwidth: int) -> None:
        """Dedenting twice equals dedenting once."""
        once = dedent(text, tabwidth=tabwidth)
        assert dedent(once, tabwidth=tabwidth) == once
