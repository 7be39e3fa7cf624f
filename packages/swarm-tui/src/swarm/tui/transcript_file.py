"""Read transcripts from disk.

Two formats are understood:

* plain text - one transcript line per file line, no timestamps;
* JSONL (``.jsonl`` suffix) - one JSON object per line with a ``text``
  field and an optional ``timestamp`` (ISO 8601 string or epoch seconds).
  Multi-line ``text`` values expand to several lines sharing a timestamp.

Timestamps are returned only when every record carries one, so the result
is always either aligned with the lines or empty.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

TEXT_KEYS = ("text", "line", "content")


class TranscriptFileError(ValueError):
    """Raised when a transcript file cannot be read or parsed."""


@dataclass
class Transcript:
    lines: list[str] = field(default_factory=list)
    timestamps: list[datetime] = field(default_factory=list)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO 8601 string or epoch seconds; ``None`` if unusable."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # Out-of-range epochs and NaN raise instead of returning
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def parse_plain(content: str) -> Transcript:
    if not content:
        return Transcript()
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return Transcript(lines=lines)


def parse_jsonl(content: str, source: str = "<string>") -> Transcript:
    """Parse JSONL transcript records.

    Raises:
        TranscriptFileError: If a line is not valid JSON or not an object.
    """
    lines: list[str] = []
    timestamps: list[datetime] = []
    all_stamped = True

    for line_no, raw in enumerate(content.splitlines(), start=1):
        if not raw.strip():
            continue
        try:
            record = json.loads(raw)
        except json.JSONDecodeError as e:
            raise TranscriptFileError(f"{source}:{line_no}: invalid JSON: {e.msg}") from e
        if not isinstance(record, dict):
            raise TranscriptFileError(f"{source}:{line_no}: expected a JSON object")

        text = next((record[k] for k in TEXT_KEYS if isinstance(record.get(k), str)), "")
        record_lines = text.split("\n")
        lines.extend(record_lines)

        stamp = parse_timestamp(record.get("timestamp"))
        if stamp is None:
            all_stamped = False
        else:
            timestamps.extend([stamp] * len(record_lines))

    if not all_stamped:
        if timestamps:
            logger.debug("%s: some records lack timestamps, dropping all", source)
        timestamps = []
    return Transcript(lines=lines, timestamps=timestamps)


def load_transcript(path: str | Path) -> Transcript:
    """Load a transcript file, choosing the parser by suffix.

    Raises:
        TranscriptFileError: If the file cannot be read or parsed.
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TranscriptFileError(f"cannot read {file_path}: {e}") from e

    if file_path.suffix.lower() == ".jsonl":
        return parse_jsonl(content, str(file_path))
    return parse_plain(content)
