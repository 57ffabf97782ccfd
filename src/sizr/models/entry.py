"""Scanned filesystem entries."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"

    @property
    def label(self) -> str:
        """Type column text: ``FILE`` or ``DIR``."""
        return "DIR" if self is EntryKind.DIRECTORY else "FILE"


@dataclass(frozen=True, slots=True)
class Entry:
    """Single file or directory observed during a scan.

    ``path`` is relative to the scan root. A directory's ``size_bytes`` is
    the total of everything beneath it.
    """

    path: Path
    size_bytes: int
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def display_path(self) -> str:
        """Path as printable text; undecodable name bytes become U+FFFD."""
        raw = os.fsencode(str(self.path))
        return raw.decode("utf-8", errors="replace")


@dataclass(slots=True)
class ScanResult:
    """Everything one scan produced."""

    root: Path
    entries: list[Entry] = field(default_factory=list)
    skipped: int = 0
    root_bytes: int = 0
