"""Semantic colour roles shared by every dashboard palette."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    """Hex colours (``#RRGGBB``) for each semantic role."""

    background: str
    panel: str
    text: str
    text_muted: str
    border: str
    accent: str
    focus: str
    success: str
    warning: str
    error: str
    info: str
    # Selected search hit is drawn inverted: dark text on this colour
    highlight: str = "#FFD700"
    highlight_text: str = "#000000"


@dataclass(frozen=True)
class Theme:
    """A palette with a name."""

    name: str
    tokens: ThemeTokens
