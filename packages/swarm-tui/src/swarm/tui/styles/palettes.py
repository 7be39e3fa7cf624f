"""Built-in palettes."""

from __future__ import annotations

from swarm.tui.styles.tokens import Theme, ThemeTokens

DEFAULT_THEME = Theme(
    name="default",
    tokens=ThemeTokens(
        background="#0B0F14",
        panel="#121821",
        text="#E6EDF3",
        text_muted="#8B9AAE",
        border="#223043",
        accent="#5B8DEF",
        focus="#7AA2F7",
        success="#3FB950",
        warning="#D29922",
        error="#F85149",
        info="#58A6FF",
    ),
)

# Favours visibility on low-contrast terminals
HIGH_CONTRAST_THEME = Theme(
    name="high-contrast",
    tokens=ThemeTokens(
        background="#000000",
        panel="#0A0A0A",
        text="#FFFFFF",
        text_muted="#C0C0C0",
        border="#FFFFFF",
        accent="#00A2FF",
        focus="#FFD400",
        success="#00FF5A",
        warning="#FFB000",
        error="#FF4040",
        info="#66CCFF",
        highlight="#FFD400",
    ),
)

THEMES: dict[str, Theme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    HIGH_CONTRAST_THEME.name: HIGH_CONTRAST_THEME,
}


def get_theme(name: str | None) -> Theme:
    """Look up a palette by name, falling back to the default one."""
    if not name:
        return DEFAULT_THEME
    return THEMES.get(name, DEFAULT_THEME)
