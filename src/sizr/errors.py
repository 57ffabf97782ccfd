"""Exceptions raised by sizr."""

from __future__ import annotations

from pathlib import Path


class SizrError(Exception):
    """Base class for sizr errors."""


class ConfigError(SizrError):
    """Invalid report options or settings values."""


class RootAccessError(SizrError):
    """The scan root cannot be used."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason
