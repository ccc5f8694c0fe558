from __future__ import annotations
from typing import Iterator, List

from rich.console import Console

from .cache import CacheStore
from .commands import EDIT_HISTORY, RESCAN, CommandRegistry
from .config import Config
from .errors import FilesystemError
from .executor import Executor, spawn_detached
from .history import HistoryStore, UsageRecord, filter_out_history, rank
from .messages import Diagnostics, ok, out, printable
from .pathindex import PathIndexer
from .selector import SelectorBridge
from .ui import commands_table, render_history


class Launcher:
    """One launcher run: index, rank, pick, execute."""

    def __init__(self, config: Config):
        self.config = config
        self.diag = Diagnostics(config.verbose)
        self.registry = CommandRegistry()
        self.indexer = PathIndexer(
            config.search_path,
            skip_unreadable=config.skip_unreadable,
            diag=self.diag,
        )
        self.cache = CacheStore(config.cache_path, diag=self.diag)
        self._register_internal()
        self.history = HistoryStore(config.history_path, self.registry.names(), diag=self.diag)
        self.executor = Executor(config, self.registry, self.history, diag=self.diag)

    def _register_internal(self):
        @self.registry.command(EDIT_HISTORY)
        def edit_history():
            """Open the history file in an editor"""
            self.edit_history()

        @self.registry.command(RESCAN)
        def rescan():
            """Rebuild the executable cache now"""
            names = self.app_names(force=True)
            ok(f"Indexed {len(names)} executables")

    def edit_history(self):
        path = self.config.history_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
        except OSError as exc:
            raise FilesystemError(f"Cannot create {path}: {exc.strerror or exc}") from exc
        spawn_detached([*self.config.editor, str(path)], dry_run=self.config.dry_run, diag=self.diag)

    def app_names(self, force: bool = False) -> List[str]:
        return self.cache.load_or_scan(self.indexer, force=force)

    def ranked_history(self) -> List[UsageRecord]:
        return rank(self.history.load())

    def candidates(self, history: List[UsageRecord], app_names: List[str]) -> Iterator[str]:
        for rec in history:
            yield rec.command
        yield from app_names

    def show_history(self):
        history = [rec for rec in self.ranked_history() if rec.command not in self.registry]
        console = Console()
        render_history(history, console=console, title=printable(self.config.history_path))
        console.print(commands_table(self.registry.items()))

    def run(self, rescan: bool = False) -> int:
        with self.diag.timeit("run"):
            history = self.ranked_history()
            app_names = self.app_names(force=rescan)

            self.diag.debug("before filter", len(app_names))
            app_names = filter_out_history(app_names, history)
            self.diag.debug("history:", [str(rec) for rec in history])
            self.diag.debug("apps count:", len(app_names))

            if self.config.verbose:
                for name in self.candidates(history, app_names):
                    out(name)

            if self.config.dry_run:
                return 0

            selector = SelectorBridge(self.config.selector, self.config.selector_args, diag=self.diag)
            choice = selector.choose(self.candidates(history, app_names))
            if not choice:
                self.diag.debug("nothing chosen")
                return 0

            self.executor.execute(choice, history)
            return 0
