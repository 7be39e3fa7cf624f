"""Keyboard input matching for the dashboard.

Maps raw terminal input (legacy xterm/VT sequences) onto named key
identifiers such as ``"up"``, ``"pageDown"``, ``"ctrl+u"`` or ``"G"`` so
components can compare keystrokes against configurable bindings.
"""

from __future__ import annotations

KeyId = str


class Key:
    """Named key constants and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"
    slash = "/"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"


# ---------------------------------------------------------------------------
# Legacy escape sequences
# ---------------------------------------------------------------------------

LEGACY_SEQUENCES: dict[str, tuple[str, ...]] = {
    "up": ("\x1b[A", "\x1bOA"),
    "down": ("\x1b[B", "\x1bOB"),
    "right": ("\x1b[C", "\x1bOC"),
    "left": ("\x1b[D", "\x1bOD"),
    "home": ("\x1b[H", "\x1bOH", "\x1b[1~", "\x1b[7~"),
    "end": ("\x1b[F", "\x1bOF", "\x1b[4~", "\x1b[8~"),
    "pageUp": ("\x1b[5~",),
    "pageDown": ("\x1b[6~",),
    "escape": ("\x1b",),
    "enter": ("\r", "\n"),
    "tab": ("\t",),
    "space": (" ",),
    "backspace": ("\x7f", "\x08"),
}

_KEY_ALIASES: dict[str, str] = {
    "esc": "escape",
    "return": "enter",
    "pageup": "pageUp",
    "pagedown": "pageDown",
}


def raw_ctrl_char(key: str) -> str | None:
    """Return the control character for ``ctrl+<key>``, or ``None``.

    For example, ``raw_ctrl_char("u")`` returns ``"\\x15"``.
    """
    if len(key) != 1:
        return None
    code = ord(key.lower())
    if ord("a") <= code <= ord("z"):
        return chr(code & 0x1F)
    return None


def matches_key(data: str, key_id: KeyId) -> bool:
    """Return ``True`` if *data* (raw terminal input) matches *key_id*.

    *key_id* examples: ``"up"``, ``"pageDown"``, ``"ctrl+d"``, ``"n"``,
    ``"N"`` (same as ``"shift+n"``).
    """
    if not key_id or not data:
        return False

    parts = key_id.split("+")
    modifiers = {p.lower() for p in parts[:-1]}
    key = _KEY_ALIASES.get(parts[-1].lower(), parts[-1])

    if modifiers - {"ctrl", "shift"}:
        return False

    if "ctrl" in modifiers:
        if "shift" in modifiers:
            return False
        ctrl_char = raw_ctrl_char(key)
        return ctrl_char is not None and data == ctrl_char

    if key in LEGACY_SEQUENCES:
        if "shift" in modifiers:
            return False
        return data in LEGACY_SEQUENCES[key]

    if len(key) == 1:
        if "shift" in modifiers:
            return data == key.upper() and key.upper() != key.lower()
        return data == key

    return False


def is_printable(data: str) -> bool:
    """True for a single printable character (typed text, not a control key)."""
    return len(data) == 1 and data.isprintable()
