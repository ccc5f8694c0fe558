from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Tuple


Handler = Callable[[], None]

EDIT_HISTORY = "!edit-history"
RESCAN = "!rescan"


@dataclass
class CommandEntry:
    handler: Handler
    help_text: str


class CommandRegistry:
    """Internal commands, kept in registration order."""

    def __init__(self):
        self._handlers: Dict[str, CommandEntry] = {}

    def register(self, name: str, fn: Handler, help_text: str = ""):
        self._handlers[name] = CommandEntry(fn, help_text)

    def command(self, name: str):
        def deco(fn: Handler):
            self.register(name, fn, (fn.__doc__ or "").strip())
            return fn
        return deco

    def items(self) -> Iterator[Tuple[str, CommandEntry]]:
        return iter(self._handlers.items())

    def names(self) -> List[str]:
        return list(self._handlers)

    def resolve(self, name: str) -> Optional[CommandEntry]:
        return self._handlers.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers


def dispatch(registry: CommandRegistry, choice: str) -> bool:
    """Run the internal command named exactly by ``choice``.

    Returns False when ``choice`` is not an internal command.
    """
    entry = registry.resolve(choice)
    if not entry:
        return False
    entry.handler()
    return True
