"""swarm-tui: transcript viewport for the swarm operator dashboard."""

# Components
from swarm.tui.components import (
    HighlightClass,
    TranscriptPanel,
    TranscriptViewer,
    classify_line,
)

# Keybindings
from swarm.tui.keybindings import (
    DEFAULT_TRANSCRIPT_KEYBINDINGS,
    TranscriptAction,
    TranscriptKeybindingsManager,
    get_transcript_keybindings,
    set_transcript_keybindings,
)

# Keyboard input handling
from swarm.tui.keys import Key, KeyId, matches_key

# Settings
from swarm.tui.settings import SettingsManager, TranscriptSettings

# Theming
from swarm.tui.styles import (
    Styles,
    Theme,
    ThemeTokens,
    build_styles,
    default_styles,
    get_theme,
    plain_styles,
)

# Transcript files
from swarm.tui.transcript_file import Transcript, TranscriptFileError, load_transcript

# Utilities
from swarm.tui.utils import strip_ansi, truncate_to_width, visible_width

__all__ = [
    # Components
    "HighlightClass",
    "TranscriptPanel",
    "TranscriptViewer",
    "classify_line",
    # Keybindings
    "DEFAULT_TRANSCRIPT_KEYBINDINGS",
    "TranscriptAction",
    "TranscriptKeybindingsManager",
    "get_transcript_keybindings",
    "set_transcript_keybindings",
    # Keys
    "Key",
    "KeyId",
    "matches_key",
    # Settings
    "SettingsManager",
    "TranscriptSettings",
    # Theming
    "Styles",
    "Theme",
    "ThemeTokens",
    "build_styles",
    "default_styles",
    "get_theme",
    "plain_styles",
    # Transcript files
    "Transcript",
    "TranscriptFileError",
    "load_transcript",
    # Utilities
    "strip_ansi",
    "truncate_to_width",
    "visible_width",
]
