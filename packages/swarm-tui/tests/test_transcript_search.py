"""Tests for TranscriptViewer search and hit navigation."""

from __future__ import annotations

from swarm.tui.components.transcript_viewer import TranscriptViewer


def _viewer(lines: list[str], height: int = 20) -> TranscriptViewer:
    viewer = TranscriptViewer(height=height)
    viewer.set_lines(lines)
    return viewer


class TestSetSearch:
    """set_search indexes every matching line in ascending order."""

    def test_hits_ascending(self) -> None:
        viewer = _viewer(["alpha", "beta", "gamma beta"])
        viewer.set_search("beta")
        assert viewer.search_hits == [1, 2]
        assert viewer.search_hit_count() == 2
        assert viewer.search_index == 0

    def test_case_insensitive(self) -> None:
        viewer = _viewer(["Error: boom", "all good", "an ERROR again"])
        viewer.set_search("error")
        assert viewer.search_hits == [0, 2]

    def test_query_case_ignored(self) -> None:
        viewer = _viewer(["needle", "hay"])
        viewer.set_search("NEEDLE")
        assert viewer.search_hits == [0]

    def test_empty_query_has_no_hits(self) -> None:
        viewer = _viewer(["a", "b"])
        viewer.set_search("")
        assert viewer.search_hits == []
        assert viewer.search_query == ""

    def test_no_matches(self) -> None:
        viewer = _viewer(["a", "b"])
        viewer.set_search("zzz")
        assert viewer.search_hits == []
        assert viewer.search_query == "zzz"

    def test_special_characters_are_literal(self) -> None:
        viewer = _viewer(["a.b", "axb", "[x]"])
        viewer.set_search(".")
        assert viewer.search_hits == [0]
        viewer.set_search("[x]")
        assert viewer.search_hits == [2]

    def test_resets_index(self) -> None:
        viewer = _viewer(["x1", "x2", "x3"])
        viewer.set_search("x")
        viewer.next_search_hit()
        viewer.set_search("x")
        assert viewer.search_index == 0

    def test_scrolls_first_hit_into_view(self) -> None:
        lines = [f"line {i}" for i in range(50)]
        lines[30] = "target here"
        viewer = _viewer(lines, height=12)  # 10 visible rows
        viewer.set_search("target")
        assert viewer.scroll_offset == 21
        assert viewer.scroll_offset <= 30 < viewer.scroll_offset + viewer.visible_height()

    def test_no_hits_leaves_scroll(self) -> None:
        viewer = _viewer([f"line {i}" for i in range(50)], height=12)
        viewer.scroll_down(7)
        viewer.set_search("missing")
        assert viewer.scroll_offset == 7


class TestClearSearch:
    """clear_search drops the query and hits but keeps the scroll position."""

    def test_clears_state(self) -> None:
        viewer = _viewer(["beta", "beta"])
        viewer.set_search("beta")
        viewer.next_search_hit()
        viewer.clear_search()
        assert viewer.search_query == ""
        assert viewer.search_hits == []
        assert viewer.search_index == 0

    def test_scroll_unchanged(self) -> None:
        lines = [f"line {i}" for i in range(50)]
        viewer = _viewer(lines, height=12)
        viewer.set_search("line 40")
        offset = viewer.scroll_offset
        viewer.clear_search()
        assert viewer.scroll_offset == offset


class TestHitNavigation:
    """next/prev cycle through hits and keep the current hit visible."""

    def test_next_cycles(self) -> None:
        viewer = _viewer(["alpha", "beta", "gamma beta"])
        viewer.set_search("beta")
        viewer.next_search_hit()
        assert viewer.search_index == 1
        viewer.next_search_hit()
        assert viewer.search_index == 0

    def test_prev_wraps_to_last(self) -> None:
        viewer = _viewer(["x", "x", "x"])
        viewer.set_search("x")
        viewer.prev_search_hit()
        assert viewer.search_index == 2
        viewer.prev_search_hit()
        assert viewer.search_index == 1

    def test_noop_without_hits(self) -> None:
        viewer = _viewer(["a", "b"])
        viewer.next_search_hit()
        viewer.prev_search_hit()
        assert viewer.search_index == 0
        assert viewer.scroll_offset == 0

    def test_current_hit_line(self) -> None:
        viewer = _viewer(["a", "hit", "b", "hit"])
        assert viewer.current_hit_line() is None
        viewer.set_search("hit")
        assert viewer.current_hit_line() == 1
        viewer.next_search_hit()
        assert viewer.current_hit_line() == 3

    def test_navigation_keeps_hit_visible(self) -> None:
        lines = [f"line {i}" for i in range(100)]
        for i in (5, 45, 90):
            lines[i] = f"match {i}"
        viewer = _viewer(lines, height=12)
        viewer.set_search("match")

        for _ in range(7):
            viewer.next_search_hit()
            target = viewer.current_hit_line()
            assert target is not None
            assert viewer.scroll_offset <= target < viewer.scroll_offset + viewer.visible_height()

        for _ in range(7):
            viewer.prev_search_hit()
            target = viewer.current_hit_line()
            assert target is not None
            assert viewer.scroll_offset <= target < viewer.scroll_offset + viewer.visible_height()

    def test_scrolling_up_to_hit_above(self) -> None:
        lines = [f"line {i}" for i in range(100)]
        lines[3] = "match"
        lines[80] = "match"
        viewer = _viewer(lines, height=12)
        viewer.set_search("match")
        viewer.next_search_hit()
        assert viewer.scroll_offset == 71
        viewer.next_search_hit()
        assert viewer.scroll_offset == 3


class TestReindexOnMutation:
    """Buffer changes re-run the active query without resetting the position."""

    def test_set_lines_reindexes(self) -> None:
        viewer = _viewer(["beta"])
        viewer.set_search("beta")
        viewer.set_lines(["alpha", "beta", "beta two"])
        assert viewer.search_query == "beta"
        assert viewer.search_hits == [1, 2]

    def test_index_survives_update(self) -> None:
        viewer = _viewer(["x", "x", "x"])
        viewer.set_search("x")
        viewer.next_search_hit()
        viewer.set_lines(["x", "x", "x", "x"])
        assert viewer.search_index == 1

    def test_index_out_of_range_resets(self) -> None:
        viewer = _viewer(["x", "x", "x"])
        viewer.set_search("x")
        viewer.next_search_hit()
        viewer.next_search_hit()
        viewer.set_lines(["x"])
        assert viewer.search_index == 0

    def test_update_without_matches(self) -> None:
        viewer = _viewer(["x", "x"])
        viewer.set_search("x")
        viewer.next_search_hit()
        viewer.set_lines(["y"])
        assert viewer.search_hits == []
        assert viewer.search_index == 0
        viewer.next_search_hit()
        assert viewer.search_index == 0

    def test_eviction_reindexes(self) -> None:
        viewer = _viewer(["hit", "miss", "hit", "miss"])
        viewer.set_search("hit")
        viewer.set_max_lines(2)
        assert viewer.lines == ["hit", "miss"]
        assert viewer.search_hits == [0]

    def test_set_content_reindexes(self) -> None:
        viewer = _viewer([])
        viewer.set_search("b")
        viewer.set_content("a\nb\nab")
        assert viewer.search_hits == [1, 2]
