"""
Exceptions raised by the file stash.

Fatal errors abort the whole command and are reported by the CLI.
MoveError is the only per-item error; operations catch it, warn, and continue.
"""


class StashError(Exception):
    """Base error for the project."""


class ConfigReadError(StashError):
    """The sidecar file exists but could not be read."""


class ConfigParseError(StashError):
    """The sidecar file is not valid JSON or has the wrong shape."""


class ConfigWriteError(StashError):
    """The sidecar file could not be written."""


class DirectoryReadError(StashError):
    """The working directory could not be listed."""


class StashFolderError(StashError):
    """The stash folder or one of its category folders could not be created."""


class MoveError(StashError):
    """A single file or folder could not be moved."""


class StashNotFoundError(StashError):
    """No record exists for the requested stash identifier."""


class EmptyStashError(StashError):
    """A record exists but lists no files or folders."""
