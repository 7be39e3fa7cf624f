"""Tests for swarm.tui.utils -- terminal text utilities."""

from __future__ import annotations

from swarm.tui.utils import RESET, strip_ansi, truncate_to_width, visible_width


class TestVisibleWidth:
    """Measure the visible terminal width of text."""

    def test_plain_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_empty_string(self) -> None:
        assert visible_width("") == 0

    def test_ansi_codes_do_not_count(self) -> None:
        assert visible_width("\x1b[1mhi\x1b[0m") == 2

    def test_truecolor_codes_do_not_count(self) -> None:
        assert visible_width("\x1b[38;2;255;0;0mred\x1b[0m") == 3

    def test_wide_cjk_characters_count_as_two(self) -> None:
        assert visible_width("世") == 2

    def test_mixed_ascii_and_wide(self) -> None:
        assert visible_width("A世B") == 4

    def test_box_drawing_is_single_width(self) -> None:
        assert visible_width("─── │") == 5

    def test_tab_counts_as_three_spaces(self) -> None:
        assert visible_width("\t") == 3

    def test_combining_mark_is_zero_width(self) -> None:
        assert visible_width("e\u0301") == 1

    def test_osc8_hyperlink_does_not_count(self) -> None:
        text = "\x1b]8;;https://example.com\x07link\x1b]8;;\x07"
        assert visible_width(text) == 4


class TestStripAnsi:
    def test_removes_sgr(self) -> None:
        assert strip_ansi("\x1b[1m\x1b[31mabc\x1b[0m") == "abc"

    def test_plain_text_unchanged(self) -> None:
        assert strip_ansi("abc") == "abc"


class TestTruncateToWidth:
    """Truncate text to a visible width, appending an ellipsis."""

    def test_fits_unchanged(self) -> None:
        assert truncate_to_width("hello", 10) == "hello"

    def test_exact_fit_unchanged(self) -> None:
        assert truncate_to_width("hello", 5) == "hello"

    def test_truncates_with_ellipsis(self) -> None:
        assert truncate_to_width("hello world", 8) == "hello..."

    def test_custom_ellipsis(self) -> None:
        assert truncate_to_width("hello world", 6, "~") == "hello~"

    def test_zero_width(self) -> None:
        assert truncate_to_width("hello", 0) == ""

    def test_narrower_than_ellipsis(self) -> None:
        assert truncate_to_width("hello world", 2) == ".."

    def test_wide_characters_not_split(self) -> None:
        result = truncate_to_width("世世世世", 6)
        assert result == "世..."
        assert visible_width(result) == 5

    def test_styled_text_keeps_codes_and_resets(self) -> None:
        text = "\x1b[31m" + "x" * 20 + "\x1b[0m"
        result = truncate_to_width(text, 10)
        assert result == "\x1b[31m" + "x" * 7 + RESET + "..."
        assert visible_width(result) == 10

    def test_tab_counts_as_three_when_cutting(self) -> None:
        assert truncate_to_width("a\tbcdefgh", 7) == "a\t..."

    def test_plain_text_gets_no_reset(self) -> None:
        assert RESET not in truncate_to_width("x" * 20, 10)
