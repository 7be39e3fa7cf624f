"""TranscriptPanel - titled panel around a TranscriptViewer with key handling."""

from __future__ import annotations

from swarm.tui.components.transcript_viewer import TranscriptViewer
from swarm.tui.keybindings import (
    TranscriptKeybindingsManager,
    get_transcript_keybindings,
)
from swarm.tui.keys import is_printable
from swarm.tui.styles import Styles, default_styles
from swarm.tui.utils import truncate_to_width, visible_width

HEADER_ROWS = 1


class TranscriptPanel:
    """Header line plus the viewer's rendered window.

    Typing ``/`` opens search entry: every keystroke re-runs the search so
    hits update as the query is typed. Enter keeps the query, escape puts
    the previous one back.
    """

    def __init__(
        self,
        viewer: TranscriptViewer,
        title: str = "Transcript",
        styles: Styles | None = None,
        padding_x: int = 1,
        keybindings: TranscriptKeybindingsManager | None = None,
    ) -> None:
        self._viewer = viewer
        self._title = title
        self._styles = styles or default_styles()
        self._padding_x = padding_x
        self._keybindings = keybindings

        self._search_entry: str | None = None
        self._query_before_entry = ""

    @property
    def viewer(self) -> TranscriptViewer:
        return self._viewer

    @property
    def search_entry(self) -> str | None:
        """Query being typed, or ``None`` when search entry is closed."""
        return self._search_entry

    def set_title(self, title: str) -> None:
        self._title = title

    def set_styles(self, styles: Styles) -> None:
        self._styles = styles

    def set_size(self, width: int, height: int) -> None:
        self._viewer.set_size(
            max(1, width - self._padding_x * 2), max(1, height - HEADER_ROWS)
        )

    def invalidate(self) -> None:
        pass

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _header(self) -> str:
        styles = self._styles
        header = styles.title(self._title)

        if self._search_entry is not None:
            return header + " " + styles.focus(f"/{self._search_entry}")

        query = self._viewer.search_query
        if query:
            hits = self._viewer.search_hit_count()
            if hits:
                info = f" (/{query} {self._viewer.search_index + 1}/{hits})"
            else:
                info = f" (/{query})"
            header += styles.muted(info)
        return header

    def render(self, width: int) -> list[str]:
        content_width = max(1, width - self._padding_x * 2)
        if self._viewer.width != content_width:
            self._viewer.set_size(content_width, self._viewer.height)

        margin = " " * self._padding_x
        lines = [truncate_to_width(self._header(), content_width)]
        lines.extend(self._viewer.render_lines(self._styles))

        result: list[str] = []
        for line in lines:
            line_with_margins = margin + line + margin
            padding_needed = max(0, width - visible_width(line_with_margins))
            result.append(line_with_margins + " " * padding_needed)
        return result

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_input(self, data: str) -> None:
        kb = self._keybindings or get_transcript_keybindings()

        if self._search_entry is not None:
            self._handle_search_entry(data, kb)
            return

        viewer = self._viewer
        if kb.matches(data, "searchStart"):
            self._query_before_entry = viewer.search_query
            self._search_entry = ""
        elif kb.matches(data, "scrollUp"):
            viewer.scroll_up(1)
        elif kb.matches(data, "scrollDown"):
            viewer.scroll_down(1)
        elif kb.matches(data, "pageUp"):
            viewer.page_up()
        elif kb.matches(data, "pageDown"):
            viewer.page_down()
        elif kb.matches(data, "scrollTop"):
            viewer.scroll_to_top()
        elif kb.matches(data, "scrollBottom"):
            viewer.scroll_to_bottom()
        elif kb.matches(data, "searchNext"):
            viewer.next_search_hit()
        elif kb.matches(data, "searchPrev"):
            viewer.prev_search_hit()
        elif kb.matches(data, "searchClear"):
            viewer.clear_search()

    def _handle_search_entry(self, data: str, kb: TranscriptKeybindingsManager) -> None:
        assert self._search_entry is not None
        viewer = self._viewer

        if kb.matches(data, "searchConfirm"):
            self._search_entry = None
        elif kb.matches(data, "searchCancel"):
            self._search_entry = None
            if self._query_before_entry:
                viewer.set_search(self._query_before_entry)
            else:
                viewer.clear_search()
        elif kb.matches(data, "searchDeleteChar"):
            self._search_entry = self._search_entry[:-1]
            viewer.set_search(self._search_entry)
        elif is_printable(data):
            self._search_entry += data
            viewer.set_search(self._search_entry)
