from __future__ import annotations
import time
from contextlib import contextmanager
from typing import Any, Iterator

from rich.console import Console
from rich.markup import escape

from .theme import GRAY

# Diagnostics go to stderr; stdout carries candidate lists only.
_console = Console(stderr=True)
_out = Console(markup=False, highlight=False, emoji=False, soft_wrap=True)


def printable(value: Any) -> str:
    """Undecodable filename bytes (surrogate escapes) shown as U+FFFD."""
    return str(value).encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def ok(t):   _console.print(f"[green]✓ {escape(printable(t))}[/green]")
def warn(t): _console.print(f"[yellow]⚠ {escape(printable(t))}[/yellow]")
def err(t):  _console.print(f"[red]Error: {escape(printable(t))}[/red]")


def out(line: str):
    _out.print(printable(line))


class Diagnostics:
    """Verbose-only debug and timing output."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def debug(self, *parts: Any):
        if self.verbose:
            text = " ".join(str(p) for p in parts)
            _console.print(f"[{GRAY}]\\[debug] {escape(printable(text))}[/{GRAY}]")

    @contextmanager
    def timeit(self, label: str) -> Iterator[None]:
        started = time.perf_counter()
        try:
            yield
        finally:
            if self.verbose:
                elapsed = (time.perf_counter() - started) * 1000
                _console.print(f"[{GRAY}]\\[timeit] {elapsed:.2f}ms {escape(printable(label))}[/{GRAY}]")
