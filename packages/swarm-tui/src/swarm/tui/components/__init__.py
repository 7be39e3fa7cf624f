"""TUI components."""

from swarm.tui.components.highlight import HighlightClass, classify_line
from swarm.tui.components.transcript_panel import TranscriptPanel
from swarm.tui.components.transcript_viewer import TranscriptViewer

__all__ = [
    "HighlightClass",
    "TranscriptPanel",
    "TranscriptViewer",
    "classify_line",
]
