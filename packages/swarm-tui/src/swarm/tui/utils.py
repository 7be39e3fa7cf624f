"""Terminal text utilities: ANSI stripping, width measurement, truncation.

Widths are measured per grapheme cluster so that combining marks, emoji
sequences and wide CJK characters line up the way a terminal draws them.
Escape sequences never count towards the width.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

RESET = "\x1b[0m"

# CSI (SGR and cursor codes), OSC 8 hyperlinks, APC payloads
_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"
    r"|\x1b\]8;;[^\x07]*\x07"
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"
)

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def strip_ansi(text: str) -> str:
    """Remove every escape sequence from *text*."""
    return _STRIP_RE.sub("", text)


def _grapheme_width(g: str) -> int:
    """Return the cell width of a single grapheme cluster.

    Control characters and lone marks are zero width, emoji sequences are
    two cells, everything else is whatever wcwidth reports for the first
    codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        # VS16, ZWJ, skin tone modifiers, regional indicators
        if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first_cp = ord(g[0])
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(g[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(g[0]), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    Escape sequences are ignored and tabs count as three cells. Pure
    printable ASCII takes a fast path; other strings are cached.
    """
    if not text:
        return 0

    stripped = strip_ansi(text).replace("\t", "   ")
    if not stripped:
        return 0

    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[stripped] = total
    return total


def _escape_length(text: str, pos: int) -> int:
    """Length of the escape sequence starting at *pos*, or 0 if there is none."""
    match = _STRIP_RE.match(text, pos)
    if match is None:
        return 0
    return match.end() - pos


def _take_columns(text: str, max_cols: int) -> str:
    """Return the longest prefix of *text* that fits in *max_cols* cells.

    Escape sequences are copied through untouched and the cut always lands
    on a grapheme boundary.
    """
    result: list[str] = []
    cols = 0
    pos = 0

    while pos < len(text):
        length = _escape_length(text, pos)
        if length:
            result.append(text[pos : pos + length])
            pos += length
            continue

        # Next grapheme, stopping short of the next escape sequence
        next_escape = text.find("\x1b", pos + 1)
        chunk = text[pos:] if next_escape == -1 else text[pos:next_escape]
        g = next(grapheme.graphemes(chunk))
        w = 3 if g == "\t" else _grapheme_width(g)
        if cols + w > max_cols:
            break
        result.append(g)
        cols += w
        pos += len(g)

    return "".join(result)


def truncate_to_width(text: str, max_width: int, ellipsis: str = "...") -> str:
    """Truncate *text* to fit within *max_width* visible columns.

    Text that already fits is returned unchanged. Otherwise the text is cut
    so that the kept part plus *ellipsis* is exactly as wide as allowed. If
    the kept part carries styling, a reset is emitted before the ellipsis so
    an open style does not bleed into it.
    """
    if max_width <= 0:
        return ""

    if visible_width(text) <= max_width:
        return text

    target_width = max_width - visible_width(ellipsis)
    if target_width <= 0:
        return _take_columns(ellipsis, max_width)

    kept = _take_columns(text, target_width)
    if "\x1b[" in kept:
        kept += RESET
    return kept + ellipsis
