from __future__ import annotations
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Container, Dict, Iterable, List, Optional, Sequence

from .cache import read_lines, write_lines
from .errors import ParseError
from .messages import Diagnostics


@dataclass
class UsageRecord:
    command: str
    count: int = 1

    def __str__(self) -> str:
        return f"{self.command}:{self.count}"


def parse_line(line: str, where: str = "") -> UsageRecord:
    """Parse ``command:count``; a bare ``command`` is the old format, count 1."""
    command, sep, raw = line.rpartition(":")
    if not sep:
        return UsageRecord(line, 1)
    try:
        count = int(raw)
    except ValueError:
        raise ParseError(f"Invalid usage count {raw!r}{where}") from None
    if count < 0:
        raise ParseError(f"Negative usage count {count}{where}")
    return UsageRecord(command, count)


class HistoryStore:
    def __init__(self, path: Path, internal: Sequence[str] = (),
                 diag: Optional[Diagnostics] = None):
        self.path = Path(path)
        self.internal: List[str] = list(internal)
        self.diag = diag or Diagnostics()

    def load(self) -> List[UsageRecord]:
        if not self.path.exists():
            lines: List[str] = []
        else:
            with self.diag.timeit(f"loading history {self.path}"):
                lines = read_lines(self.path)

        records: Dict[str, UsageRecord] = {}
        for lineno, line in enumerate(lines, 1):
            rec = parse_line(line, f" at {self.path}:{lineno}")
            if not rec.command or rec.command in self.internal:
                continue
            if rec.command in records:
                # hand-edited file: merge duplicates into the first one
                records[rec.command].count += rec.count
            else:
                records[rec.command] = rec

        history = list(records.values())
        history.extend(UsageRecord(name, 0) for name in self.internal)
        return history

    def save(self, history: Iterable[UsageRecord], chosen: str = ""):
        lines: List[str] = []
        pending = chosen
        for rec in history:
            if rec.command in self.internal:
                continue
            if pending and rec.command == pending:
                rec = replace(rec, count=rec.count + 1)
                pending = ""
            lines.append(str(rec))
        if pending and pending not in self.internal:
            lines.append(str(UsageRecord(pending, 1)))

        self.diag.debug("saving history:", lines)
        with self.diag.timeit(f"saving history {self.path} with {len(lines)} entries"):
            write_lines(self.path, lines)


def rank(history: Iterable[UsageRecord]) -> List[UsageRecord]:
    """Most used first; equal counts keep their file order."""
    return sorted(history, key=lambda rec: rec.count, reverse=True)


def filter_out_history(app_names: Iterable[str], history: Iterable[UsageRecord]) -> List[str]:
    seen: Container[str] = {rec.command for rec in history}
    return [name for name in app_names if name not in seen]
