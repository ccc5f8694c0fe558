from __future__ import annotations
import shlex
import shutil
import subprocess
from typing import List, Optional, Sequence, Tuple

from .commands import CommandRegistry, dispatch
from .config import Config
from .errors import ParseError, ProcessLaunchError, ResolutionError
from .history import HistoryStore, UsageRecord
from .messages import Diagnostics


def spawn_detached(argv: Sequence[str], *, dry_run: bool = False,
                   diag: Optional[Diagnostics] = None):
    """Start ``argv`` in its own session and forget about it.

    The child outlives the launcher; no handle is kept and nothing waits on it.
    """
    diag = diag or Diagnostics()
    if dry_run:
        diag.debug("dry run, not starting:", list(argv))
        return
    diag.debug("starting:", list(argv))
    try:
        subprocess.Popen(list(argv), stdin=subprocess.DEVNULL, start_new_session=True)
    except OSError as exc:
        raise ProcessLaunchError(f"Cannot start {argv[0]}: {exc.strerror or exc}") from exc


def split_choice(choice: str) -> Tuple[str, List[str]]:
    try:
        parts = shlex.split(choice)
    except ValueError as exc:
        raise ParseError(f"Cannot parse {choice!r}: {exc}") from exc
    if not parts:
        raise ResolutionError(f"Nothing to run in {choice!r}")
    return parts[0], parts[1:]


class Executor:
    def __init__(self, config: Config, registry: CommandRegistry, store: HistoryStore,
                 diag: Optional[Diagnostics] = None):
        self.config = config
        self.registry = registry
        self.store = store
        self.diag = diag or Diagnostics()

    def resolve(self, program: str) -> str:
        found = shutil.which(program, path=self.config.lookup_path())
        if not found:
            raise ResolutionError(f"{program}: executable not found in search path")
        return found

    def execute(self, choice: str, history: List[UsageRecord]):
        if dispatch(self.registry, choice):
            return

        program, args = split_choice(choice)
        found = self.resolve(program)

        # record usage first; the launched program may crash or never return
        self.store.save(history, choice)
        spawn_detached([found, *args], dry_run=self.config.dry_run, diag=self.diag)
