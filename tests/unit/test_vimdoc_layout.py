#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_vimdoc_layout.py
"""Unit tests for the vimdoc output buffer and line layout helpers."""

import pytest

from md2vim.renderers._layout import OutputBuffer, indent_block, rule, split_line, strip_fence_indentation


@pytest.mark.unit
class TestOutputBuffer:
    """Tests for mark/truncate/take on the output buffer."""

    def test_write_and_getvalue(self) -> None:
        buffer = OutputBuffer()
        buffer.write("abc")
        buffer.write("def")
        assert buffer.getvalue() == "abcdef"
        assert len(buffer) == 6

    def test_empty_write_is_not_output(self) -> None:
        buffer = OutputBuffer()
        mark = buffer.mark()
        buffer.write("")
        assert not buffer.has_output_since(mark)

    def test_truncate_rolls_back_to_mark(self) -> None:
        buffer = OutputBuffer()
        buffer.write("keep ")
        mark = buffer.mark()
        buffer.write("drop")
        buffer.write(" this")
        buffer.truncate(mark)
        assert buffer.getvalue() == "keep "

    def test_take_returns_and_removes(self) -> None:
        buffer = OutputBuffer()
        buffer.write("head:")
        mark = buffer.mark()
        buffer.write("child")
        assert buffer.take(mark) == "child"
        assert buffer.getvalue() == "head:"

    def test_nested_marks(self) -> None:
        buffer = OutputBuffer()
        outer = buffer.mark()
        buffer.write("a")
        inner = buffer.mark()
        buffer.write("b")
        assert buffer.take(inner) == "b"
        assert buffer.text_since(outer) == "a"


@pytest.mark.unit
class TestRule:
    def test_rule_spans_width(self) -> None:
        assert rule("=", 10) == "==========\n"


@pytest.mark.unit
class TestSplitLine:
    """Tests for two-part line layout."""

    def test_pads_to_width(self) -> None:
        line = split_line("ab", "cd", ".", 10)
        assert line == "ab......cd"
        assert len(line) == 10

    def test_negative_trim_reserves_columns(self) -> None:
        line = split_line("ab", "cd", " ", 10, trim=-2)
        assert line == "ab    cd"
        assert len(line + " ~") == 10

    def test_overflow_keeps_one_fill_character(self) -> None:
        assert split_line("abcdef", "ghijkl", ".", 5) == "abcdef.ghijkl"

    def test_exact_fit_keeps_one_fill_character(self) -> None:
        assert split_line("abcde", "fghij", " ", 10) == "abcde fghij"

    @pytest.mark.parametrize("width", [1, 20, 40])
    def test_never_joins_parts_directly(self, width: int) -> None:
        line = split_line("left" * 3, "right" * 3, "-", width, trim=-2)
        assert "left-" in line and line.endswith("right")


@pytest.mark.unit
class TestIndentBlock:
    """Tests for block indentation."""

    def test_indents_every_line(self) -> None:
        assert indent_block("one\ntwo", 4) == "    one\n    two\n"

    def test_drops_empty_lines(self) -> None:
        assert indent_block("one\n\n\ntwo\n", 2) == "  one\n  two\n"

    def test_trim_applies_to_first_line_only(self) -> None:
        assert indent_block("one\n\ntwo\n", 4, trim=2) == "  one\n    two\n"

    def test_trim_larger_than_indent_clamps_to_zero(self) -> None:
        assert indent_block("one\ntwo", 4, trim=5) == "one\n    two\n"

    def test_empty_text(self) -> None:
        assert indent_block("", 4) == ""
        assert indent_block("\n\n", 4) == ""

    def test_zero_indent(self) -> None:
        assert indent_block("a\nb", 0) == "a\nb\n"


@pytest.mark.unit
class TestStripFenceIndentation:
    """Tests for the fence repair pass."""

    def test_moves_open_and_close_fences_to_column_zero(self) -> None:
        text = "* item\n    >\n        code\n    <\n"
        assert strip_fence_indentation(text) == "* item\n>\n        code\n<\n"

    def test_tabs_and_trailing_whitespace(self) -> None:
        assert strip_fence_indentation("\t>  \n\t<\t\n") == ">\n<\n"

    def test_unindented_fences_untouched(self) -> None:
        assert strip_fence_indentation(">\n    x\n<\n") == ">\n    x\n<\n"

    def test_lines_with_other_content_untouched(self) -> None:
        text = "    > quoted text\n    a < b\n"
        assert strip_fence_indentation(text) == text
