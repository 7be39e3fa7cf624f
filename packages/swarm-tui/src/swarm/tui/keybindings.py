"""Transcript keybindings manager."""

from __future__ import annotations

from typing import Literal

from swarm.tui.keys import KeyId, matches_key

TranscriptAction = Literal[
    # Scrolling
    "scrollUp",
    "scrollDown",
    "pageUp",
    "pageDown",
    "scrollTop",
    "scrollBottom",
    # Search
    "searchStart",
    "searchNext",
    "searchPrev",
    "searchClear",
    # Search entry
    "searchConfirm",
    "searchCancel",
    "searchDeleteChar",
]

TranscriptKeybindingsConfig = dict[TranscriptAction, KeyId | list[KeyId]]

DEFAULT_TRANSCRIPT_KEYBINDINGS: dict[TranscriptAction, KeyId | list[KeyId]] = {
    # Scrolling
    "scrollUp": ["up", "k"],
    "scrollDown": ["down", "j"],
    "pageUp": ["pageUp", "ctrl+b"],
    "pageDown": ["pageDown", "ctrl+f", "space"],
    "scrollTop": ["home", "g"],
    "scrollBottom": ["end", "G"],
    # Search
    "searchStart": "/",
    "searchNext": "n",
    "searchPrev": "N",
    "searchClear": "escape",
    # Search entry
    "searchConfirm": "enter",
    "searchCancel": ["escape", "ctrl+c"],
    "searchDeleteChar": "backspace",
}


class TranscriptKeybindingsManager:
    """Manages keybindings for the transcript panel."""

    def __init__(self, config: TranscriptKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[TranscriptAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: TranscriptKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        for action, keys in DEFAULT_TRANSCRIPT_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # User config replaces the defaults action by action
        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, data: str, action: TranscriptAction) -> bool:
        """Check if input matches a specific action."""
        return any(matches_key(data, key) for key in self._action_to_keys.get(action, []))

    def get_keys(self, action: TranscriptAction) -> list[KeyId]:
        return self._action_to_keys.get(action, [])

    def set_config(self, config: TranscriptKeybindingsConfig) -> None:
        self._build_maps(config)


_global_transcript_keybindings: TranscriptKeybindingsManager | None = None


def get_transcript_keybindings() -> TranscriptKeybindingsManager:
    global _global_transcript_keybindings
    if _global_transcript_keybindings is None:
        _global_transcript_keybindings = TranscriptKeybindingsManager()
    return _global_transcript_keybindings


def set_transcript_keybindings(manager: TranscriptKeybindingsManager) -> None:
    global _global_transcript_keybindings
    _global_transcript_keybindings = manager
