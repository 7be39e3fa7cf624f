"""TranscriptViewer - scrollable, searchable view over an agent transcript.

The viewer owns a bounded list of lines (optionally with one timestamp per
line), a scroll offset, and a case-insensitive substring search. Callers push
whole buffers and navigation commands in; ``render`` turns the current state
into a block of text. No operation raises: out-of-range input is clamped.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from swarm.tui.components.highlight import (
    base_segments,
    classify_line,
    find_match,
    overlay,
    render_segments,
)
from swarm.tui.styles import Styles, default_styles
from swarm.tui.utils import truncate_to_width, visible_width

logger = logging.getLogger(__name__)

DEFAULT_HEIGHT = 20
DEFAULT_WIDTH = 60
EMPTY_PLACEHOLDER = "No transcript data."
SEPARATOR = " │ "
ELLIPSIS = "..."
TIMESTAMP_FORMAT = "%H:%M:%S"


class TranscriptViewer:
    """Scrollable transcript buffer with search and syntax highlighting."""

    def __init__(
        self,
        *,
        height: int = DEFAULT_HEIGHT,
        width: int = DEFAULT_WIDTH,
        max_lines: int = 0,
        show_timestamps: bool = False,
    ) -> None:
        self._lines: list[str] = []
        self._line_timestamps: list[datetime] = []
        self._max_lines = max(0, max_lines)
        self._scroll_offset = 0
        self._height = height
        self._width = width
        self._show_timestamps = show_timestamps

        self._search_query = ""
        self._search_hits: list[int] = []
        self._search_index = 0

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def line_timestamps(self) -> list[datetime]:
        return list(self._line_timestamps)

    @property
    def max_lines(self) -> int:
        return self._max_lines

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def search_hits(self) -> list[int]:
        return list(self._search_hits)

    @property
    def search_index(self) -> int:
        return self._search_index

    @property
    def show_timestamps(self) -> bool:
        return self._show_timestamps

    def line_count(self) -> int:
        return len(self._lines)

    def search_hit_count(self) -> int:
        return len(self._search_hits)

    def visible_height(self) -> int:
        """Rows available for transcript lines (header and footer reserved)."""
        return max(1, self._height - 2)

    def max_scroll_offset(self) -> int:
        return max(0, len(self._lines) - self.visible_height())

    # ------------------------------------------------------------------
    # Buffer
    # ------------------------------------------------------------------

    def _trim(self, lines: list[str]) -> tuple[list[str], int]:
        """Keep the newest ``max_lines`` entries; return them and the drop count."""
        if self._max_lines > 0 and len(lines) > self._max_lines:
            dropped = len(lines) - self._max_lines
            return lines[dropped:], dropped
        return lines, 0

    def set_lines(self, lines: Sequence[str]) -> None:
        """Replace the buffer. Previously stored timestamps are discarded."""
        self._line_timestamps = []
        self._replace(list(lines))

    def set_lines_with_timestamps(
        self, lines: Sequence[str], timestamps: Sequence[datetime]
    ) -> None:
        """Replace the buffer together with one timestamp per line.

        Timestamps are kept only when there is exactly one per line;
        otherwise none are stored.
        """
        new_lines = list(lines)
        stamps = list(timestamps)
        dropped = self._replace(new_lines)
        if len(stamps) == len(new_lines):
            self._line_timestamps = stamps[dropped:]
        else:
            logger.debug(
                "Discarding %d timestamps for %d lines", len(stamps), len(new_lines)
            )
            self._line_timestamps = []

    def set_content(self, content: str) -> None:
        """Replace the buffer from a single newline-separated string."""
        self.set_lines(content.split("\n") if content else [])

    def _replace(self, lines: list[str]) -> int:
        trimmed, dropped = self._trim(lines)
        if dropped:
            logger.debug("Evicted %d lines over max_lines=%d", dropped, self._max_lines)
        self._lines = trimmed
        self._clamp_scroll()
        self._update_search_hits()
        return dropped

    def set_max_lines(self, max_lines: int) -> None:
        """Set the capacity bound (0 or less means unbounded).

        Lines already over the new bound are evicted from the top and the
        scroll offset moves up by the same amount, so the lines on screen
        stay on screen.
        """
        self._max_lines = max(0, max_lines)
        trimmed, dropped = self._trim(self._lines)
        if not dropped:
            return

        logger.debug("Evicted %d lines over max_lines=%d", dropped, self._max_lines)
        self._lines = trimmed
        if self._line_timestamps:
            self._line_timestamps = self._line_timestamps[dropped:]
        self._scroll_offset = max(0, self._scroll_offset - dropped)
        self._clamp_scroll()
        self._update_search_hits()

    def set_size(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._clamp_scroll()

    def set_show_timestamps(self, show: bool) -> None:
        self._show_timestamps = show

    # ------------------------------------------------------------------
    # Scrolling
    # ------------------------------------------------------------------

    def _clamp_scroll(self) -> None:
        self._scroll_offset = max(0, min(self._scroll_offset, self.max_scroll_offset()))

    def scroll_up(self, n: int = 1) -> None:
        self._scroll_offset -= n
        self._clamp_scroll()

    def scroll_down(self, n: int = 1) -> None:
        self._scroll_offset += n
        self._clamp_scroll()

    def page_up(self) -> None:
        self.scroll_up(self.visible_height())

    def page_down(self) -> None:
        self.scroll_down(self.visible_height())

    def scroll_to_top(self) -> None:
        self._scroll_offset = 0

    def scroll_to_bottom(self) -> None:
        self._scroll_offset = self.max_scroll_offset()

    def scroll_to_line(self, index: int) -> None:
        """Scroll the minimum distance needed to bring line *index* into view."""
        visible = self.visible_height()
        if index < self._scroll_offset:
            self._scroll_offset = index
        elif index >= self._scroll_offset + visible:
            self._scroll_offset = index - visible + 1
        self._clamp_scroll()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _update_search_hits(self) -> None:
        if not self._search_query:
            self._search_hits = []
            self._search_index = 0
            return

        query = self._search_query
        self._search_hits = [
            i for i, line in enumerate(self._lines) if find_match(line, query) is not None
        ]
        if self._search_index >= len(self._search_hits):
            self._search_index = 0

    def set_search(self, query: str) -> None:
        self._search_query = query
        self._search_index = 0
        self._update_search_hits()
        if self._search_hits:
            self.scroll_to_line(self._search_hits[0])

    def clear_search(self) -> None:
        self._search_query = ""
        self._search_hits = []
        self._search_index = 0

    def next_search_hit(self) -> None:
        if not self._search_hits:
            return
        self._search_index = (self._search_index + 1) % len(self._search_hits)
        self.scroll_to_line(self._search_hits[self._search_index])

    def prev_search_hit(self) -> None:
        if not self._search_hits:
            return
        self._search_index = (self._search_index - 1) % len(self._search_hits)
        self.scroll_to_line(self._search_hits[self._search_index])

    def current_hit_line(self) -> int | None:
        """Line index of the selected hit, or ``None`` without hits."""
        if not self._search_hits:
            return None
        return self._search_hits[self._search_index]

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, styles: Styles | None = None) -> str:
        return "\n".join(self.render_lines(styles))

    def render_lines(self, styles: Styles | None = None) -> list[str]:
        """Render the visible window, one string per row, footer last."""
        styles = styles or default_styles()

        if not self._lines:
            return [styles.muted(EMPTY_PLACEHOLDER)]

        total = len(self._lines)
        end = min(self._scroll_offset + self.visible_height(), total)
        number_width = len(str(total))
        current_line = self.current_hit_line()
        hits = set(self._search_hits)
        stamps = self._line_timestamps if self._show_timestamps else []

        rendered: list[str] = []
        for i in range(self._scroll_offset, end):
            line = self._lines[i]
            is_current = i == current_line

            segments = base_segments(line, classify_line(line), styles)
            if i in hits:
                span = find_match(line, self._search_query)
                if span is not None:
                    match_style = styles.search_current if is_current else styles.search_match
                    segments = overlay(segments, span[0], span[1], match_style)

            number_style = styles.accent if is_current else styles.muted
            row = number_style(f"{i + 1:>{number_width}}") + SEPARATOR
            if stamps:
                row += styles.muted(stamps[i].strftime(TIMESTAMP_FORMAT)) + " "
            row += render_segments(segments)

            if self._width > 0 and visible_width(row) > self._width:
                row = truncate_to_width(row, self._width, ELLIPSIS)
            rendered.append(row)

        rendered.append(styles.muted(self._footer_text()))
        return rendered

    def _footer_text(self) -> str:
        total = len(self._lines)
        visible = self.visible_height()
        if total <= visible:
            return f"─── {total} lines ───"

        first = self._scroll_offset + 1
        last = min(self._scroll_offset + visible, total)
        if self._search_query and self._search_hits:
            return (
                f"─── {first}-{last} of {total} | "
                f"Match {self._search_index + 1}/{len(self._search_hits)} ───"
            )

        percent = self._scroll_offset * 100 // (total - visible)
        return f"─── {first}-{last} of {total} ({percent}%) ───"
