from __future__ import annotations
import os
import stat
from typing import Iterable, List, Optional, Set

from .errors import FilesystemError
from .messages import Diagnostics, warn

EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def is_executable(entry: os.DirEntry) -> bool:
    try:
        if entry.is_dir():
            return False
        st = entry.stat()
    except OSError:
        # dangling symlink or entry removed while listing
        return False
    return bool(st.st_mode & EXEC_BITS)


class PathIndexer:
    """Collects executable names from a list of directories."""

    def __init__(self, directories: Iterable[str], *, skip_unreadable: bool = False,
                 diag: Optional[Diagnostics] = None):
        self.directories: List[str] = [d for d in directories if d]
        self.skip_unreadable = skip_unreadable
        self.diag = diag or Diagnostics()

    def scan(self) -> Set[str]:
        names: Set[str] = set()
        with self.diag.timeit("scanning search path"):
            for directory in self.directories:
                try:
                    with os.scandir(directory) as it:
                        found = [e.name for e in it if is_executable(e)]
                except OSError as exc:
                    if self.skip_unreadable:
                        warn(f"Skipping unreadable directory {directory}: {exc.strerror or exc}")
                        continue
                    raise FilesystemError(f"Cannot list {directory}: {exc.strerror or exc}") from exc
                self.diag.debug("path:", directory, len(found))
                names.update(found)
        return names

    def last_changed(self) -> float:
        """Latest modification time across the directories, 0.0 if none stat."""
        latest = 0.0
        for directory in self.directories:
            try:
                mtime = os.stat(directory).st_mtime
            except OSError:
                continue
            if mtime > latest:
                latest = mtime
        return latest
