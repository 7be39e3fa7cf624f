"""Line classification and segment styling for transcript lines.

Every line gets exactly one ``HighlightClass``. Classes are tried in a fixed
priority order (``CLASS_PRIORITY``); the first one whose pattern matches
wins. Styling works on segments so a search match can be restyled without
disturbing the base style of the rest of the line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from swarm.tui.styles import StyleFn, Styles

CODE_FENCE = "```"


class HighlightClass(Enum):
    CODE_FENCE = "code_fence"
    PROMPT = "prompt"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    PLAIN = "plain"


PROMPT_RE = re.compile(r"^[$#>»] ")
ERROR_RE = re.compile(r"^(error|err|fatal|exception|panic|failed)", re.IGNORECASE)
WARNING_RE = re.compile(r"^(warning|warn|caution)", re.IGNORECASE)
INFO_RE = re.compile(r"^(info|note|hint|\[.*\])", re.IGNORECASE)

CLASS_PRIORITY: tuple[HighlightClass, ...] = (
    HighlightClass.CODE_FENCE,
    HighlightClass.PROMPT,
    HighlightClass.ERROR,
    HighlightClass.WARNING,
    HighlightClass.INFO,
)


def _matches(cls: HighlightClass, line: str) -> bool:
    if cls is HighlightClass.CODE_FENCE:
        return line.strip().startswith(CODE_FENCE)
    if cls is HighlightClass.PROMPT:
        return PROMPT_RE.match(line) is not None
    if cls is HighlightClass.ERROR:
        return ERROR_RE.match(line) is not None
    if cls is HighlightClass.WARNING:
        return WARNING_RE.match(line) is not None
    if cls is HighlightClass.INFO:
        return INFO_RE.match(line) is not None
    return False


def classify_line(line: str) -> HighlightClass:
    for cls in CLASS_PRIORITY:
        if _matches(cls, line):
            return cls
    return HighlightClass.PLAIN


@dataclass(frozen=True)
class Segment:
    """A run of text drawn with a single style."""

    text: str
    style: StyleFn


def _class_style(cls: HighlightClass, styles: Styles) -> StyleFn:
    if cls is HighlightClass.CODE_FENCE:
        return styles.accent
    if cls is HighlightClass.ERROR:
        return styles.error
    if cls is HighlightClass.WARNING:
        return styles.warning
    if cls is HighlightClass.INFO:
        return styles.info
    return styles.text


def base_segments(line: str, cls: HighlightClass, styles: Styles) -> list[Segment]:
    """Split *line* into styled segments for its highlight class."""
    if cls is HighlightClass.PROMPT:
        match = PROMPT_RE.match(line)
        if match is not None:
            end = match.end()
            return [Segment(line[:end], styles.success), Segment(line[end:], styles.text)]
    return [Segment(line, _class_style(cls, styles))]


def find_match(line: str, query: str) -> tuple[int, int] | None:
    """Span of the first case-insensitive occurrence of *query* in *line*.

    Matching runs on ``str.lower()`` of both strings; the span is mapped
    back onto *line* when lowering changes its length.
    """
    if not query:
        return None
    lowered = line.lower()
    needle = query.lower()
    idx = lowered.find(needle)
    if idx < 0:
        return None
    if len(lowered) == len(line):
        return idx, idx + len(needle)

    # Original index of every character of the lowered line
    origin = [i for i, ch in enumerate(line) for _ in ch.lower()]
    return origin[idx], origin[idx + len(needle) - 1] + 1


def overlay(segments: list[Segment], start: int, end: int, style: StyleFn) -> list[Segment]:
    """Restyle the character range ``[start, end)`` across *segments*.

    Parts of segments outside the range keep their own style.
    """
    result: list[Segment] = []
    pos = 0
    for seg in segments:
        seg_start = pos
        seg_end = pos + len(seg.text)
        pos = seg_end

        lo = max(seg_start, start)
        hi = min(seg_end, end)
        if lo >= hi:
            result.append(seg)
            continue

        before = seg.text[: lo - seg_start]
        inside = seg.text[lo - seg_start : hi - seg_start]
        after = seg.text[hi - seg_start :]
        if before:
            result.append(Segment(before, seg.style))
        result.append(Segment(inside, style))
        if after:
            result.append(Segment(after, seg.style))
    return result


def render_segments(segments: list[Segment]) -> str:
    return "".join(seg.style(seg.text) for seg in segments)
