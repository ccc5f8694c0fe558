from __future__ import annotations
from typing import Iterable, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .commands import CommandEntry
from .history import UsageRecord
from .messages import printable
from .theme import INDIGO, GRAY


def history_table(history: Iterable[UsageRecord], title: str = "History") -> Table:
    t = Table(title=title, show_header=True, header_style=INDIGO)
    t.add_column("#", justify="right", style=GRAY)
    t.add_column("command", style="bold")
    t.add_column("count", justify="right")
    for idx, rec in enumerate(history, 1):
        t.add_row(str(idx), Text(printable(rec.command)), str(rec.count))
    return t


def commands_table(entries: Iterable[Tuple[str, CommandEntry]], title: str = "Menu commands") -> Table:
    t = Table(title=title, show_header=True, header_style=INDIGO)
    t.add_column("command", style="bold")
    t.add_column("does")
    for name, entry in entries:
        t.add_row(Text(name), Text(entry.help_text))
    return t


def render_history(history: Iterable[UsageRecord], console: Optional[Console] = None,
                   title: str = "History"):
    console = console or Console()
    rows = list(history)
    if not rows:
        console.print(f"[{GRAY}]No history yet[/{GRAY}]")
        return
    console.print(history_table(rows, title=title))
