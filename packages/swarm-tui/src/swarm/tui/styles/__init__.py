"""Theme tokens, palettes and the styling functions built from them."""

from swarm.tui.styles.ansi import (
    StyleFn,
    Styles,
    build_styles,
    default_styles,
    make_style,
    plain_styles,
)
from swarm.tui.styles.palettes import (
    DEFAULT_THEME,
    HIGH_CONTRAST_THEME,
    THEMES,
    get_theme,
)
from swarm.tui.styles.tokens import Theme, ThemeTokens

__all__ = [
    "DEFAULT_THEME",
    "HIGH_CONTRAST_THEME",
    "THEMES",
    "StyleFn",
    "Styles",
    "Theme",
    "ThemeTokens",
    "build_styles",
    "default_styles",
    "get_theme",
    "make_style",
    "plain_styles",
]
