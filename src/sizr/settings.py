"""JSON-backed defaults for report and scan options."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from sizr.errors import ConfigError
from sizr.utils import parse_size, xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "sizr"
_SETTINGS_FILE = "settings.json"


class Settings:
    """Read-only settings loaded from a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("report.limit")  # reads data["report"]["limit"]

    A missing file simply yields defaults.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_int(self, key: str, default: int) -> int:
        value = self.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{self._path}: {key} must be an integer, got {value!r}")
        return value

    def get_bool(self, key: str, default: bool) -> bool:
        value = self.get(key, default)
        if not isinstance(value, bool):
            raise ConfigError(f"{self._path}: {key} must be true or false, got {value!r}")
        return value

    def get_size(self, key: str, default: int) -> int:
        """Read a byte count given either as an integer or a size string."""
        value = self.get(key, default)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            try:
                return parse_size(value)
            except ValueError as e:
                raise ConfigError(f"{self._path}: {key}: {e}") from e
        raise ConfigError(f"{self._path}: {key} must be a size, got {value!r}")

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Ignoring settings in %s: top level must be an object", self._path)
            return
        self._data = data
