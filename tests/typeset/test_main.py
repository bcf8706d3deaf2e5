from __future__ import annotations

import pytest

from pixwrap import TEST_FONT_ID, UnknownFontID, format_text

from ..common import DIALOG, EMPTY, unwrap, words


class TestFormatText:
    def test_overflow_with_first_line_marker(self):
        assert format_text("ab cd", 25, TEST_FONT_ID, EMPTY) == "ab\\n\ncd"

    def test_paragraph_break_passthrough(self):
        assert format_text("hello\\p world", 1000, TEST_FONT_ID, EMPTY) == (
            "hello\\p\nworld"
        )

    def test_paragraph_break_resets_marker(self):
        assert format_text("aa bb cc\\p dd ee", 45, TEST_FONT_ID, EMPTY) == (
            "aa\\n\nbb\\l\ncc\\p\ndd\\n\nee"
        )

    def test_line_break_keeps_continuation_marker(self):
        assert format_text("aa\\l bb cc", 45, TEST_FONT_ID, EMPTY) == (
            "aa\\l\nbb\\l\ncc"
        )

    def test_first_line_break_at_start(self):
        assert format_text("\\n aa", 100, TEST_FONT_ID, EMPTY) == "\\n\naa"

    def test_control_codes_kept_verbatim(self):
        # the control code counts as 100, the letters 10 each
        assert format_text("{COLOR RED}hi", 120, TEST_FONT_ID, EMPTY) == (
            "{COLOR RED}hi"
        )
        assert format_text(
            "{COLOR RED}hi there", 125, TEST_FONT_ID, EMPTY
        ) == ("{COLOR RED}hi\\n\nthere")

    def test_newlines_are_spaces(self):
        assert format_text("ab\ncd\n", 100, TEST_FONT_ID, EMPTY) == "ab cd"

    def test_collapses_spaces(self):
        assert format_text("  ab    cd  ", 100, TEST_FONT_ID, EMPTY) == (
            "ab cd"
        )

    @pytest.mark.parametrize("text", ["", "   ", "\n\n"])
    def test_blank(self, text):
        assert format_text(text, 100, TEST_FONT_ID, EMPTY) == ""

    def test_trailing_break(self):
        assert format_text("aa\\p", 100, TEST_FONT_ID, EMPTY) == "aa\\p\n"

    def test_no_font_never_wraps(self, table):
        assert format_text("aa bb cc", 0, "", table) == "aa bb cc"

    def test_unknown_font(self, table):
        with pytest.raises(UnknownFontID, match="1_latin_rse"):
            format_text("aa bb", 100, "foo", table)

    def test_configured_font(self, table):
        assert format_text(
            "Hello there, {PLAYER}! How are you today?",
            60,
            "1_latin_rse",
            table,
        ) == ("Hello there,\\n\n{PLAYER}!\\l\nHow are\\l\nyou today?")

    def test_monospace_font(self, table):
        assert format_text("aaa bbb ccc ddd", 40, "1_latin_frlg", table) == (
            "aaa\\n\nbbb\\l\nccc\\l\nddd"
        )

    def test_bound_to_table(self, table):
        assert table.format_text("ab cd", 25, TEST_FONT_ID) == "ab\\n\ncd"


@pytest.mark.parametrize("max_width", [0, 30, 60, 100, 150, 208, 1000])
@pytest.mark.parametrize("font_id", ["1_latin_rse", "1_latin_frlg"])
class TestProperties:
    def test_words_are_never_split(self, table, max_width, font_id):
        result = format_text(DIALOG, max_width, font_id, table)
        assert words(unwrap(result)) == words(DIALOG)

    def test_rewrap_is_identical(self, table, max_width, font_id):
        result = format_text(DIALOG, max_width, font_id, table)
        assert format_text(unwrap(result), max_width, font_id, table) == (
            result
        )

    def test_lines_fit(self, table, max_width, font_id):
        result = format_text(DIALOG, max_width, font_id, table)
        for line in result.split("\n"):
            line = line.removesuffix("\\n").removesuffix("\\l")
            if " " in line:
                # only single words may exceed the width
                assert table.format_text(line, max_width, font_id) == line
