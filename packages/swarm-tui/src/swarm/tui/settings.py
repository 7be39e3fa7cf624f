"""Hierarchical transcript settings loaded from JSON.

Precedence: CLI overrides > project settings > global settings.
Global settings live in ``$SWARM_CONFIG_DIR/settings.json`` (default
``~/.swarm``), project settings in ``<cwd>/.swarm/settings.json``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from swarm.tui.keybindings import TranscriptKeybindingsConfig

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".swarm"
CONFIG_DIR_ENV = "SWARM_CONFIG_DIR"

DEFAULT_MAX_LINES = 2000
DEFAULT_THEME = "default"


@dataclass
class TranscriptSettings:
    """Effective settings for a transcript view."""

    max_lines: int = DEFAULT_MAX_LINES
    theme: str = DEFAULT_THEME
    show_timestamps: bool = False
    keybindings: TranscriptKeybindingsConfig = field(default_factory=dict)


def deep_merge_settings(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge overrides into base settings.

    Nested dicts merge key by key; any other value replaces the base value.
    ``None`` overrides are ignored.
    """
    result = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge_settings(result[key], value)
        else:
            result[key] = value
    return result


def _default_config_dir() -> str:
    return os.environ.get(CONFIG_DIR_ENV) or os.path.join(
        os.path.expanduser("~"), CONFIG_DIR_NAME
    )


def _load_from_file(path: str) -> tuple[dict[str, Any], Exception | None]:
    """Load settings from a JSON file. Returns (settings, error)."""
    if not os.path.exists(path):
        return {}, None
    try:
        settings = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return {}, e
    if not isinstance(settings, dict):
        error = ValueError(f"settings file {path} does not hold a JSON object")
        logger.warning("Ignoring settings file %s: %s", path, error)
        return {}, error
    return settings, None


class SettingsManager:
    """Merged view over global, project and override settings.

    Use the factory methods (``create``, ``in_memory``) instead of calling
    the constructor directly.
    """

    def __init__(
        self,
        *,
        project_settings_path: str | None,
        initial_settings: dict[str, Any],
        load_error: Exception | None = None,
    ) -> None:
        self._project_settings_path = project_settings_path
        self._global_settings = dict(initial_settings)
        self._load_error = load_error

        project = self._load_project_settings()
        self._settings = deep_merge_settings(self._global_settings, project)

    @classmethod
    def create(cls, cwd: str, config_dir: str | None = None) -> SettingsManager:
        """Create a settings manager reading from disk."""
        settings_path = os.path.join(config_dir or _default_config_dir(), "settings.json")
        project_settings_path = os.path.join(cwd, CONFIG_DIR_NAME, "settings.json")

        settings, error = _load_from_file(settings_path)
        return cls(
            project_settings_path=project_settings_path,
            initial_settings=settings,
            load_error=error,
        )

    @classmethod
    def in_memory(cls, settings: dict[str, Any] | None = None) -> SettingsManager:
        """Create an in-memory settings manager for testing."""
        return cls(
            project_settings_path=None,
            initial_settings=settings or {},
        )

    def _load_project_settings(self) -> dict[str, Any]:
        if not self._project_settings_path:
            return {}
        settings, error = _load_from_file(self._project_settings_path)
        if self._load_error is None:
            self._load_error = error
        return settings

    def apply_overrides(self, overrides: dict[str, Any]) -> None:
        """Apply CLI-level overrides on top of merged settings."""
        self._settings = deep_merge_settings(self._settings, overrides)

    @property
    def settings(self) -> dict[str, Any]:
        return self._settings

    @property
    def load_error(self) -> Exception | None:
        """First error hit reading the global or project settings file."""
        return self._load_error

    def _transcript_section(self) -> dict[str, Any]:
        section = self._settings.get("transcript")
        return section if isinstance(section, dict) else {}

    def get_max_lines(self) -> int:
        value = self._transcript_section().get("maxLines")
        if isinstance(value, bool) or not isinstance(value, int):
            return DEFAULT_MAX_LINES
        return max(0, value)

    def get_show_timestamps(self) -> bool:
        return bool(self._transcript_section().get("showTimestamps", False))

    def get_theme(self) -> str:
        value = self._settings.get("theme")
        return value if isinstance(value, str) and value else DEFAULT_THEME

    def get_keybindings(self) -> TranscriptKeybindingsConfig:
        value = self._settings.get("keybindings")
        return dict(value) if isinstance(value, dict) else {}

    def transcript_settings(self) -> TranscriptSettings:
        return TranscriptSettings(
            max_lines=self.get_max_lines(),
            theme=self.get_theme(),
            show_timestamps=self.get_show_timestamps(),
            keybindings=self.get_keybindings(),
        )
