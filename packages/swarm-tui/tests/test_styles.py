"""Tests for theme tokens, palettes and styling functions."""

from __future__ import annotations

import dataclasses

import pytest

from swarm.tui.styles import (
    DEFAULT_THEME,
    HIGH_CONTRAST_THEME,
    THEMES,
    build_styles,
    default_styles,
    get_theme,
    make_style,
    plain_styles,
)
from swarm.tui.utils import strip_ansi


class TestPalettes:
    """Built-in palettes are registered by name."""

    def test_registry(self) -> None:
        assert THEMES["default"] is DEFAULT_THEME
        assert THEMES["high-contrast"] is HIGH_CONTRAST_THEME

    def test_get_theme_falls_back(self) -> None:
        assert get_theme("nope") is DEFAULT_THEME
        assert get_theme(None) is DEFAULT_THEME
        assert get_theme("high-contrast") is HIGH_CONTRAST_THEME

    def test_tokens_are_hex(self) -> None:
        for theme in THEMES.values():
            for value in dataclasses.asdict(theme.tokens).values():
                assert value.startswith("#")
                assert len(value) == 7

    def test_theme_is_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_THEME.name = "changed"  # type: ignore[misc]


class TestMakeStyle:
    """make_style wraps text in truecolor SGR codes."""

    def test_foreground(self) -> None:
        style = make_style("#FF0000")
        assert style("x") == "\x1b[38;2;255;0;0mx\x1b[0m"

    def test_background_and_bold(self) -> None:
        style = make_style("#000000", "#FFD700", bold=True)
        assert style("x") == "\x1b[1m\x1b[38;2;0;0;0m\x1b[48;2;255;215;0mx\x1b[0m"

    def test_short_hex(self) -> None:
        assert make_style("#fff")("x") == "\x1b[38;2;255;255;255mx\x1b[0m"

    def test_empty_text_has_no_codes(self) -> None:
        assert make_style("#FF0000")("") == ""

    def test_no_attributes_is_identity(self) -> None:
        assert make_style()("x") == "x"


class TestBuildStyles:
    """Styles derive from theme tokens."""

    def test_error_uses_error_token(self) -> None:
        styles = build_styles(DEFAULT_THEME)
        assert styles.error("x") == make_style(DEFAULT_THEME.tokens.error)("x")

    def test_title_is_bold_accent(self) -> None:
        styles = build_styles(DEFAULT_THEME)
        assert styles.title("x") == make_style(DEFAULT_THEME.tokens.accent, bold=True)("x")

    def test_current_hit_is_inverted(self) -> None:
        styles = build_styles(DEFAULT_THEME)
        assert "\x1b[48;2;" in styles.search_current("x")
        assert "\x1b[48;2;" not in styles.search_match("x")

    def test_text_preserved(self) -> None:
        styles = default_styles()
        assert strip_ansi(styles.muted("hello")) == "hello"
        assert styles.theme_name == "default"

    def test_plain_styles_identity(self) -> None:
        styles = plain_styles()
        for field in dataclasses.fields(styles):
            if field.name == "theme_name":
                continue
            assert getattr(styles, field.name)("abc") == "abc"
