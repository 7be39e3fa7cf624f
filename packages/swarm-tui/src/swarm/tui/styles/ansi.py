"""ANSI styling functions derived from theme tokens.

A ``Styles`` value is immutable and holds one ``str -> str`` function per
semantic role. Components receive it on every render call instead of
reading global theming state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from swarm.tui.styles.palettes import DEFAULT_THEME
from swarm.tui.styles.tokens import Theme

StyleFn = Callable[[str], str]

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def fg(color: str) -> str:
    r, g, b = _hex_to_rgb(color)
    return f"\x1b[38;2;{r};{g};{b}m"


def bg(color: str) -> str:
    r, g, b = _hex_to_rgb(color)
    return f"\x1b[48;2;{r};{g};{b}m"


def make_style(
    foreground: str | None = None,
    background: str | None = None,
    bold: bool = False,
) -> StyleFn:
    """Build a styling function that wraps text in the given SGR codes."""
    prefix = ""
    if bold:
        prefix += _BOLD
    if foreground:
        prefix += fg(foreground)
    if background:
        prefix += bg(background)

    def apply(text: str) -> str:
        if not text or not prefix:
            return text
        return f"{prefix}{text}{_RESET}"

    return apply


def _identity(text: str) -> str:
    return text


@dataclass(frozen=True)
class Styles:
    """Per-role styling functions for one theme."""

    theme_name: str
    title: StyleFn
    text: StyleFn
    muted: StyleFn
    accent: StyleFn
    focus: StyleFn
    success: StyleFn
    warning: StyleFn
    error: StyleFn
    info: StyleFn
    search_match: StyleFn
    search_current: StyleFn


def build_styles(theme: Theme = DEFAULT_THEME) -> Styles:
    """Convert theme tokens into styling functions."""
    tokens = theme.tokens
    return Styles(
        theme_name=theme.name,
        title=make_style(tokens.accent, bold=True),
        text=make_style(tokens.text),
        muted=make_style(tokens.text_muted),
        accent=make_style(tokens.accent),
        focus=make_style(tokens.focus, bold=True),
        success=make_style(tokens.success),
        warning=make_style(tokens.warning),
        error=make_style(tokens.error),
        info=make_style(tokens.info),
        search_match=make_style(tokens.warning),
        search_current=make_style(tokens.highlight_text, tokens.highlight, bold=True),
    )


def default_styles() -> Styles:
    return build_styles(DEFAULT_THEME)


def plain_styles() -> Styles:
    """Styles that leave text untouched, for piping and for tests."""
    return Styles(
        theme_name="plain",
        title=_identity,
        text=_identity,
        muted=_identity,
        accent=_identity,
        focus=_identity,
        success=_identity,
        warning=_identity,
        error=_identity,
        info=_identity,
        search_match=_identity,
        search_current=_identity,
    )
