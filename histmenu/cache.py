from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Optional, Set

from .errors import FilesystemError
from .messages import Diagnostics
from .pathindex import PathIndexer


def read_lines(path: Path) -> List[str]:
    try:
        text = path.read_text(encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise FilesystemError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    return [line.strip() for line in text.splitlines() if line.strip()]


def write_lines(path: Path, lines: Iterable[str]) -> int:
    data = "".join(f"{line}\n" for line in lines)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data, encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise FilesystemError(f"Cannot write {path}: {exc.strerror or exc}") from exc
    return len(data)


class CacheStore:
    """Sorted executable names on disk, valid while newer than the search path."""

    def __init__(self, path: Path, diag: Optional[Diagnostics] = None):
        self.path = Path(path)
        self.diag = diag or Diagnostics()

    def get(self, not_older_than: float) -> Optional[Set[str]]:
        try:
            mtime = self.path.stat().st_mtime
        except OSError:
            return None
        if mtime < not_older_than:
            self.diag.debug("cache is stale:", self.path)
            return None
        with self.diag.timeit(f"loading cache {self.path}"):
            return set(read_lines(self.path))

    def put(self, names: Iterable[str]):
        with self.diag.timeit(f"saving cache {self.path}"):
            written = write_lines(self.path, sorted(set(names)))
        self.diag.debug("written", written, "bytes into", self.path)

    def load_or_scan(self, indexer: PathIndexer, *, force: bool = False) -> List[str]:
        names = None if force else self.get(indexer.last_changed())
        if not names:
            names = indexer.scan()
            self.put(names)
        return sorted(names)
