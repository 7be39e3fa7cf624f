"""CLI entry point for swarm-transcript. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import os

import click

from swarm.tui.components import TranscriptPanel, TranscriptViewer
from swarm.tui.keybindings import TranscriptKeybindingsManager
from swarm.tui.settings import SettingsManager
from swarm.tui.styles import THEMES, build_styles, get_theme, plain_styles
from swarm.tui.transcript_file import TranscriptFileError, load_transcript


@click.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--search", "query", default=None, help="Highlight lines containing this text")
@click.option("--hit", type=click.IntRange(min=1), default=1, show_default=True,
              help="Select the Nth search hit (1-based, wraps around)")
@click.option("--width", type=click.IntRange(min=1), default=100, show_default=True)
@click.option("--height", type=click.IntRange(min=1), default=24, show_default=True)
@click.option("--theme", type=click.Choice(sorted(THEMES)), default=None,
              help="Colour palette (default from settings)")
@click.option("--plain", is_flag=True, help="Disable colours")
@click.option("--max-lines", type=click.IntRange(min=0), default=None,
              help="Keep only the newest N lines (0 = unbounded)")
@click.option("--timestamps/--no-timestamps", default=None, help="Show per-line timestamps")
@click.option("--bottom", is_flag=True, help="Start scrolled to the end of the transcript")
@click.option("--title", default=None, help="Panel title (default: file name)")
@click.option("--keys", default="", help="Keystrokes to replay into the panel before rendering")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(path, query, hit, width, height, theme, plain, max_lines, timestamps, bottom, title, keys, verbose):
    """Render a transcript file through the transcript viewport."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    manager = SettingsManager.create(os.getcwd())
    manager.apply_overrides({
        "theme": theme,
        "transcript": {"maxLines": max_lines, "showTimestamps": timestamps},
    })
    if manager.load_error is not None:
        click.echo(f"Warning: ignoring settings: {manager.load_error}", err=True)
    settings = manager.transcript_settings()

    try:
        transcript = load_transcript(path)
    except TranscriptFileError as e:
        raise click.ClickException(str(e)) from e

    viewer = TranscriptViewer(max_lines=settings.max_lines, show_timestamps=settings.show_timestamps)
    viewer.set_lines_with_timestamps(transcript.lines, transcript.timestamps)

    styles = plain_styles() if plain else build_styles(get_theme(settings.theme))
    panel = TranscriptPanel(
        viewer,
        title=title or os.path.basename(path),
        styles=styles,
        keybindings=TranscriptKeybindingsManager(settings.keybindings),
    )
    panel.set_size(width, height)

    if bottom:
        viewer.scroll_to_bottom()
    if query:
        viewer.set_search(query)
        for _ in range(hit - 1):
            viewer.next_search_hit()
    for key in keys:
        panel.handle_input(key)

    click.echo("\n".join(panel.render(width)))


if __name__ == "__main__":
    main()
