"""Renderer settings and their persistence.

Settings are stored as a JSON object in the user's config directory and
survive application restarts. A missing, unreadable or malformed file
yields the defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import DocConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderSettings:
    """Palette codes and substitute glyphs used by the renderer.

    Attributes:
        highlight_color: Overlay code for highlighted cells
        newpage_color: Overlay code for cells that carry a page break
        neutral_color: Overlay code for every other cell
        base_color: Text color before any row has set one
        newline_glyph: Shown for newlines when newlines are rendered
        control_glyph: Shown for control characters when they are rendered
    """
    highlight_color: str = DocConstants.HIGHLIGHT_COLOR
    newpage_color: str = DocConstants.NEWPAGE_COLOR
    neutral_color: str = DocConstants.NEUTRAL_COLOR
    base_color: str = DocConstants.BASE_COLOR
    newline_glyph: str = DocConstants.NEWLINE_GLYPH
    control_glyph: str = DocConstants.CONTROL_GLYPH


class SettingsStore:
    """Loads and saves :class:`RenderSettings` as JSON."""

    def __init__(self, path: Optional[Path] = None):
        self._settings_file = path or Path(platformdirs.user_config_dir("shrekdoc")) / "settings.json"
        self._cache: Optional[RenderSettings] = None

    @property
    def path(self) -> Path:
        return self._settings_file

    @staticmethod
    def validate_setting(key: str, value: Any) -> bool:
        """Every known setting is a single character."""
        return isinstance(value, str) and len(value) == 1

    def _from_dict(self, data: Dict[str, Any]) -> RenderSettings:
        known = {f.name for f in fields(RenderSettings)}
        values = {}
        for key, value in data.items():
            if key not in known:
                continue
            if not self.validate_setting(key, value):
                logger.warning(f"Ignoring invalid value for {key}: {value!r}")
                continue
            values[key] = value
        return replace(RenderSettings(), **values)

    def load(self) -> RenderSettings:
        """Return stored settings, or defaults if there are none."""
        if self._cache is not None:
            return self._cache

        if not self._settings_file.exists():
            self._cache = RenderSettings()
            return self._cache

        try:
            with open(self._settings_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._cache = RenderSettings()
            return self._cache

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            self._cache = RenderSettings()
            return self._cache

        self._cache = self._from_dict(data)
        return self._cache

    def save(self, settings: RenderSettings) -> bool:
        """Write settings atomically. Returns True on success."""
        temp_file = self._settings_file.with_suffix(".tmp")
        try:
            self._settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump(asdict(settings), f, indent=2)
            temp_file.replace(self._settings_file)
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

        self._cache = settings
        return True

    def clear_cache(self) -> None:
        self._cache = None


_store: Optional[SettingsStore] = None


def get_store() -> SettingsStore:
    """Get the global settings store instance."""
    global _store
    if _store is None:
        _store = SettingsStore()
    return _store
