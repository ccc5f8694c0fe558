__version__ = "1.0.0"

from .config import Config
from .errors import (
    LauncherError, FilesystemError, ParseError, ResolutionError, ProcessLaunchError,
)
from .history import UsageRecord, HistoryStore, rank, filter_out_history
from .cache import CacheStore
from .pathindex import PathIndexer
from .selector import SelectorBridge
from .executor import Executor
from .app import Launcher

__all__ = [
    "Config", "Launcher",
    "LauncherError", "FilesystemError", "ParseError", "ResolutionError", "ProcessLaunchError",
    "UsageRecord", "HistoryStore", "rank", "filter_out_history",
    "CacheStore", "PathIndexer", "SelectorBridge", "Executor",
    "__version__",
]
