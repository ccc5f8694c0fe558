from __future__ import annotations
import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from .errors import ParseError

APP_DIR = "histmenu"
HISTORY_FILE = "history"
CACHE_FILE = "app_cache"
DEFAULT_SELECTOR = "dmenu"
DEFAULT_EDITOR = "gvim"


def _xdg_dir(env: Mapping[str, str], var: str, fallback: Path) -> Path:
    value = env.get(var)
    # XDG says relative values are invalid and must be ignored
    if value and os.path.isabs(value):
        return Path(value)
    return fallback


def split_command(value: str) -> List[str]:
    try:
        return shlex.split(value)
    except ValueError as exc:
        raise ParseError(f"Cannot parse command {value!r}: {exc}") from exc


def search_path_from(value: Optional[str]) -> List[str]:
    """Split a PATH-style string, dropping empty components."""
    if not value:
        return []
    return [p for p in value.split(os.pathsep) if p]


@dataclass
class Config:
    search_path: List[str]
    history_path: Path
    cache_path: Path
    selector: List[str] = field(default_factory=lambda: [DEFAULT_SELECTOR])
    selector_args: List[str] = field(default_factory=list)
    editor: List[str] = field(default_factory=lambda: [DEFAULT_EDITOR])
    verbose: bool = False
    dry_run: bool = False
    skip_unreadable: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Config":
        """Build the default configuration from environment variables.

        History lives under ``$XDG_DATA_HOME/histmenu`` and the executable cache
        under ``$XDG_CACHE_HOME/histmenu``, falling back to ``~/.local/share``
        and ``~/.cache``.
        """
        env = os.environ if env is None else env
        home = Path(env.get("HOME") or Path.home())
        data_home = _xdg_dir(env, "XDG_DATA_HOME", home / ".local" / "share")
        cache_home = _xdg_dir(env, "XDG_CACHE_HOME", home / ".cache")

        selector = env.get("HISTMENU_SELECTOR") or DEFAULT_SELECTOR
        editor = env.get("HISTMENU_EDITOR") or env.get("VISUAL") or DEFAULT_EDITOR

        return cls(
            search_path=search_path_from(env.get("PATH")),
            history_path=data_home / APP_DIR / HISTORY_FILE,
            cache_path=cache_home / APP_DIR / CACHE_FILE,
            selector=split_command(selector),
            editor=split_command(editor),
        )

    def lookup_path(self) -> str:
        return os.pathsep.join(self.search_path)
