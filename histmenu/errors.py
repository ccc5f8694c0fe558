from __future__ import annotations


class LauncherError(Exception):
    """Base for every failure that aborts a launcher run."""


class FilesystemError(LauncherError):
    pass


class ParseError(LauncherError):
    pass


class ResolutionError(LauncherError):
    pass


class ProcessLaunchError(LauncherError):
    """A selector, editor or chosen program could not be started."""
