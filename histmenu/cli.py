from __future__ import annotations
import argparse
import pathlib
import sys
from typing import List, Optional, Sequence, Tuple

from . import __version__
from .app import Launcher
from .config import Config, split_command
from .errors import LauncherError
from .messages import err

SEPARATOR = "--"


def split_selector_args(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Everything after the first ``--`` belongs to the selector, untouched."""
    argv = list(argv)
    if SEPARATOR in argv:
        idx = argv.index(SEPARATOR)
        return argv[:idx], argv[idx + 1:]
    return argv, []


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="histmenu",
        description="Launch programs through dmenu, most used first",
        epilog="Arguments after -- are passed to the selector as they are.",
    )
    parser.add_argument(
        "--dry-run", "--noop", "-n",
        dest="dry_run",
        action="store_true",
        help="Do everything except starting the selector or the chosen program"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print debug and timing info on stderr, candidates on stdout"
    )
    parser.add_argument(
        "--edit", "-e",
        action="store_true",
        help="Open the history file in the editor and exit"
    )
    parser.add_argument(
        "--list-history", "-l",
        action="store_true",
        help="Show ranked history as a table and exit"
    )
    parser.add_argument(
        "--rescan",
        action="store_true",
        help="Ignore the executable cache for this run"
    )
    parser.add_argument(
        "--skip-unreadable",
        action="store_true",
        help="Warn about unreadable search directories instead of failing"
    )
    parser.add_argument("--selector", help="Selector command (default: $HISTMENU_SELECTOR or dmenu)")
    parser.add_argument("--editor", help="Editor command (default: $HISTMENU_EDITOR, $VISUAL or gvim)")
    parser.add_argument("--history-file", type=pathlib.Path, help="History file location")
    parser.add_argument("--cache-file", type=pathlib.Path, help="Executable cache location")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def make_config(args: argparse.Namespace, selector_args: List[str],
                base: Optional[Config] = None) -> Config:
    config = base or Config.from_env()
    config.selector_args = selector_args
    config.verbose = args.verbose
    config.dry_run = args.dry_run
    config.skip_unreadable = args.skip_unreadable
    if args.selector:
        config.selector = split_command(args.selector)
    if args.editor:
        config.editor = split_command(args.editor)
    if args.history_file:
        config.history_path = args.history_file
    if args.cache_file:
        config.cache_path = args.cache_file
    return config


def main(argv: Optional[Sequence[str]] = None, config: Optional[Config] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    own, selector_args = split_selector_args(argv)
    args = build_parser().parse_args(own)

    try:
        launcher = Launcher(make_config(args, selector_args, config))
        launcher.diag.debug("selector args:", selector_args)
        if args.edit:
            launcher.edit_history()
            return 0
        if args.list_history:
            launcher.show_history()
            return 0
        return launcher.run(rescan=args.rescan)
    except LauncherError as exc:
        err(exc)
        return 1
