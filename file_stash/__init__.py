"""
File Stash - Temporarily move files out of a directory and bring them back later.

This package stashes the contents of a working directory into a dated
folder (optionally sorted into category subfolders) and records the
moves in a JSON sidecar so they can be restored.
"""

from .config import Config
from .errors import StashError
from .operations import list_stashes, stash_files, unstash_files
from .store import StashEntry, StashMode, StashRecordStore, load_store, save_store

__version__ = "1.0.0"
__all__ = [
    "Config",
    "StashError",
    "StashEntry",
    "StashMode",
    "StashRecordStore",
    "load_store",
    "save_store",
    "stash_files",
    "unstash_files",
    "list_stashes",
]
