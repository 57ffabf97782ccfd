"""Report options and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from sizr.errors import ConfigError
from sizr.models.entry import Entry, EntryKind

DEFAULT_LIMIT = 10
DEFAULT_PATH_WIDTH = 47


class KindFilter(Enum):
    FILES_ONLY = "files"
    DIRS_ONLY = "dirs"
    BOTH = "both"

    def matches(self, kind: EntryKind) -> bool:
        if self is KindFilter.FILES_ONLY:
            return kind is EntryKind.FILE
        if self is KindFilter.DIRS_ONLY:
            return kind is EntryKind.DIRECTORY
        return True


@dataclass(frozen=True, slots=True)
class ReportOptions:
    """How to filter, rank and render a scan."""

    limit: int = DEFAULT_LIMIT
    min_size: int = 0
    kind_filter: KindFilter = KindFilter.BOTH
    full_paths: bool = False
    path_width: int = DEFAULT_PATH_WIDTH

    def __post_init__(self) -> None:
        if self.limit <= 0:
            raise ConfigError(f"limit must be a positive integer, got {self.limit}")
        if self.min_size < 0:
            raise ConfigError(f"min_size must not be negative, got {self.min_size}")
        # Room for the "..." marker plus at least one character.
        if self.path_width < 4:
            raise ConfigError(f"path_width must be at least 4, got {self.path_width}")


@dataclass(frozen=True, slots=True)
class ReportRow:
    rank: int
    entry: Entry


@dataclass(slots=True)
class Report:
    """Ranked view over one scan."""

    root: Path
    rows: list[ReportRow] = field(default_factory=list)
    total_bytes: int = 0
    matched_count: int = 0
    scanned_count: int = 0
    skipped_count: int = 0
    elapsed_ms: float = 0.0

    @property
    def hidden_count(self) -> int:
        """Matching entries left out by the row limit."""
        return self.matched_count - len(self.rows)
