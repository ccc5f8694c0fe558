from __future__ import annotations
import subprocess
from typing import Iterable, List, Optional, Sequence

from .errors import ProcessLaunchError
from .messages import Diagnostics


class SelectorBridge:
    """Feeds candidates to an external picker and reads back one line.

    The picker gets the whole list on stdin, one entry per line, and stdin is
    closed to mark the end. The first non-empty line it prints, stripped, is
    the choice; an empty string means the user cancelled. Multi-select
    pickers may print more, the rest is ignored.
    """

    def __init__(self, argv: Sequence[str], extra_args: Sequence[str] = (),
                 diag: Optional[Diagnostics] = None):
        if not argv:
            raise ProcessLaunchError("No selector command configured")
        self.argv: List[str] = [*argv, *extra_args]
        self.diag = diag or Diagnostics()

    def choose(self, candidates: Iterable[str]) -> str:
        payload = "".join(f"{c}\n" for c in candidates)
        self.diag.debug("selector:", self.argv)
        try:
            proc = subprocess.Popen(
                self.argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                # filenames are bytes; keep undecodable ones intact both ways
                errors="surrogateescape",
            )
        except OSError as exc:
            raise ProcessLaunchError(f"Cannot start selector {self.argv[0]}: {exc.strerror or exc}") from exc

        with self.diag.timeit("waiting for selector"):
            # communicate() tolerates a picker that exits before reading everything
            output, _ = proc.communicate(payload)

        lines = [line.strip() for line in (output or "").splitlines()]
        choice = next((line for line in lines if line), "")
        if proc.returncode:
            self.diag.debug("selector exited with", proc.returncode)
        return choice
