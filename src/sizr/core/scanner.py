"""Single-pass directory tree scanner."""

from __future__ import annotations

import errno
import logging
import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator

from sizr.errors import RootAccessError
from sizr.models.entry import Entry, EntryKind, ScanResult

log = logging.getLogger(__name__)


class SymlinkPolicy(Enum):
    """What to do with symbolic links. They are never followed."""

    SKIP = "skip"
    RECORD = "record"


@dataclass
class _Frame:
    """A directory whose children are still being walked."""

    path: str
    rel: Path | None
    children: Iterator[os.DirEntry]
    total: int = 0


@dataclass
class _Walk:
    entries: list[Entry] = field(default_factory=list)
    visited: set[tuple[int, int]] = field(default_factory=set)
    skipped: int = 0


class TreeScanner:
    """Walks a directory tree once and sizes every node in it.

    Traversal is depth-first over an explicit stack, so deep trees do not
    hit the recursion limit. A directory is emitted only after all of its
    children, with the sum of their sizes. Nodes that raise ``OSError`` are
    dropped together with their subtree; only problems with the root itself
    are fatal.
    """

    def __init__(self, root: Path | str, symlinks: SymlinkPolicy = SymlinkPolicy.SKIP) -> None:
        self.root = Path(root)
        self.symlinks = symlinks

    def scan(self) -> ScanResult:
        """Scan the tree and return one entry per visited node below the root.

        Raises:
            RootAccessError: if the root is missing, not a directory or unreadable.
        """
        root_str = os.fspath(self.root)
        root_stat = self._stat_root(root_str)
        try:
            children = _list_dir(root_str)
        except OSError as e:
            raise RootAccessError(self.root, _reason(e)) from e

        walk = _Walk(visited={(root_stat.st_dev, root_stat.st_ino)})
        stack = [_Frame(root_str, None, iter(children))]
        root_bytes = 0

        while stack:
            frame = stack[-1]
            child = next(frame.children, None)
            if child is None:
                stack.pop()
                if frame.rel is None:
                    root_bytes = frame.total
                    continue
                walk.entries.append(Entry(path=frame.rel, size_bytes=frame.total, kind=EntryKind.DIRECTORY))
                stack[-1].total += frame.total
                continue

            rel = Path(child.name) if frame.rel is None else frame.rel / child.name
            try:
                sub = self._visit(child, rel, frame, walk)
            except OSError as e:
                log.debug("Skipping %s: %s", child.path, e)
                walk.skipped += 1
                continue
            if sub is not None:
                stack.append(sub)

        log.debug("Scanned %s: %d entries, %d skipped", self.root, len(walk.entries), walk.skipped)
        return ScanResult(root=self.root, entries=walk.entries, skipped=walk.skipped, root_bytes=root_bytes)

    def _visit(self, child: os.DirEntry, rel: Path, parent: _Frame, walk: _Walk) -> _Frame | None:
        """Handle one directory entry; return a frame if it must be descended into."""
        if child.is_symlink():
            if self.symlinks is SymlinkPolicy.RECORD:
                size = child.stat(follow_symlinks=False).st_size
                walk.entries.append(Entry(path=rel, size_bytes=size, kind=EntryKind.FILE))
                parent.total += size
            return None

        if child.is_dir(follow_symlinks=False):
            st = child.stat(follow_symlinks=False)
            key = (st.st_dev, st.st_ino)
            if key in walk.visited:
                log.debug("Already visited %s, not descending again", child.path)
                return None
            walk.visited.add(key)
            return _Frame(child.path, rel, iter(_list_dir(child.path)))

        if child.is_file(follow_symlinks=False):
            size = child.stat(follow_symlinks=False).st_size
            walk.entries.append(Entry(path=rel, size_bytes=size, kind=EntryKind.FILE))
            parent.total += size
        return None

    def _stat_root(self, root_str: str) -> os.stat_result:
        try:
            st = os.stat(root_str)
        except OSError as e:
            raise RootAccessError(self.root, _reason(e)) from e
        if not stat.S_ISDIR(st.st_mode):
            raise RootAccessError(self.root, "not a directory")
        return st


def _list_dir(path: str) -> list[os.DirEntry]:
    """Read a whole directory listing and release the handle."""
    with os.scandir(path) as it:
        return list(it)


def _reason(error: OSError) -> str:
    if error.errno == errno.ENOENT:
        return "does not exist"
    if error.errno in (errno.EACCES, errno.EPERM):
        return "permission denied"
    if error.errno == errno.ENOTDIR:
        return "not a directory"
    return error.strerror or str(error)


def scan_tree(root: Path | str, symlinks: SymlinkPolicy = SymlinkPolicy.SKIP) -> ScanResult:
    """Convenience wrapper around :class:`TreeScanner`."""
    return TreeScanner(root, symlinks=symlinks).scan()
