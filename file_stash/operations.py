"""
Core stash operations.

These functions perform the actual file system operations (create, move).
They use a callback pattern for output to separate concerns from the CLI.
"""

import shutil
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional

from .config import Config, DEFAULT_CONFIG
from .errors import (
    DirectoryReadError,
    EmptyStashError,
    MoveError,
    StashFolderError,
    StashNotFoundError,
)
from .store import StashEntry, StashMode, StashRecordStore, save_store
from .utils import (
    display_date,
    get_category,
    is_blacklisted,
    resolve_identifier,
    stash_identifier,
)


@dataclass
class OperationResult:
    """Result of a stash or unstash with statistics."""
    success_count: int = 0
    error_count: int = 0
    file_count: int = 0
    folder_count: int = 0
    categories: List[str] = field(default_factory=list)
    actions: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


@dataclass
class StashSummary:
    """One line of the stash listing."""
    identifier: str
    date: str
    mode: StashMode
    file_count: int
    folder_count: int
    categories: List[str] = field(default_factory=list)


# Type alias for output callback
OutputCallback = Callable[[str], None]


def _default_output(message: str) -> None:
    """Default output callback that prints to stdout."""
    print(message)


def _move_entry(source: Path, destination: Path) -> None:
    """
    Move a file or folder node, refusing to overwrite anything.
    
    Raises:
        MoveError: If the destination exists or the move fails
    """
    if destination.exists() or destination.is_symlink():
        raise MoveError(f"destination already exists: {destination}")
    try:
        shutil.move(str(source), str(destination))
    except OSError as e:
        raise MoveError(str(e)) from e


def _record_failure(result: OperationResult, output: OutputCallback, message: str) -> None:
    output(f"  [WARNING] {message}")
    result.errors.append(message)
    result.error_count += 1


def stash_files(
    store: StashRecordStore,
    directory: Path,
    categorize: bool = True,
    config: Config = DEFAULT_CONFIG,
    output: OutputCallback = _default_output,
    today: Optional[date] = None,
) -> OperationResult:
    """
    Move every top-level entry of ``directory`` into today's stash folder.
    
    Files go to <stash>/<category>/<name> when categorizing, otherwise
    <stash>/<name>. Folders always go to <stash>/<name>. Only entries that
    were actually moved are recorded. The entry replaces any earlier record
    for the same day and the store is saved.
    
    Args:
        store: Record store to update
        directory: Working directory to stash
        categorize: If True, sort files into category subfolders
        config: Configuration to use
        output: Callback for output messages
        today: Stash date (optional, for testing)
        
    Returns:
        OperationResult with statistics
        
    Raises:
        DirectoryReadError: If the directory cannot be listed
        StashFolderError: If the stash folder structure cannot be created
        ConfigWriteError: If the store cannot be saved
    """
    result = OperationResult()
    identifier = stash_identifier(today, config)
    
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise DirectoryReadError(f"error reading directory {directory}: {e}") from e
    
    files: List[Path] = []
    folders: List[Path] = []
    for path in entries:
        if is_blacklisted(path.name, identifier, config):
            continue
        if path.is_dir() and not path.is_symlink():
            folders.append(path)
        else:
            files.append(path)
    
    if not files and not folders:
        output("No files or folders to stash.")
        return result
    
    # First pass: decide where each file goes so the folders can be created up front
    planned = [(f, get_category(f, config) if categorize else None) for f in files]
    needed_categories = sorted({category for _, category in planned if category is not None})
    
    stash_dir = directory / identifier
    try:
        stash_dir.mkdir(parents=True, exist_ok=True)
        for category in needed_categories:
            (stash_dir / category).mkdir(exist_ok=True)
    except OSError as e:
        raise StashFolderError(f"error creating stash folder {stash_dir}: {e}") from e
    
    entry = StashEntry(mode=StashMode.CATEGORIZE if categorize else StashMode.SIMPLE)
    
    output(f"\nStashing {len(files)} files and {len(folders)} folders into: {identifier}/\n")
    output("-" * 60)
    
    for file_path, category in planned:
        relative = Path(identifier, category, file_path.name) if category else Path(identifier, file_path.name)
        action = f"{file_path.name} -> {category}/" if category else file_path.name
        try:
            _move_entry(file_path, directory / relative)
        except MoveError as e:
            _record_failure(result, output, f"failed to move file {file_path.name}: {e}")
            continue
        entry.record_file(str(relative), category)
        result.actions.append(action)
        output(f"  [STASHED] {action}")
    
    for folder_path in folders:
        relative = Path(identifier, folder_path.name)
        action = f"{folder_path.name}/"
        try:
            _move_entry(folder_path, directory / relative)
        except MoveError as e:
            _record_failure(result, output, f"failed to move folder {folder_path.name}: {e}")
            continue
        entry.record_folder(str(relative))
        result.actions.append(action)
        output(f"  [STASHED] {action}")
    
    result.file_count = len(entry.files)
    result.folder_count = len(entry.folders)
    result.success_count = result.file_count + result.folder_count
    result.categories = sorted(entry.categories)
    
    store.put(identifier, entry)
    save_store(store, directory, config)
    
    output("-" * 60)
    summary = f"\nStashed {result.file_count} files and {result.folder_count} folders"
    if categorize:
        summary += f" (categorized into {len(result.categories)} categories)"
    if result.error_count:
        summary += f", {result.error_count} errors"
    output(summary)
    
    return result


def _remove_stash_folder(stash_dir: Path, entry: StashEntry) -> None:
    """
    Remove the stash folder once it is empty.
    
    Empty subfolders are removed first, including category folders that
    never received a file. Recorded folders are left alone even when
    empty. Anything still inside (e.g. an entry whose restore failed)
    keeps the folder on disk and the final rmdir raises OSError.
    """
    if not stash_dir.is_dir():
        return
    recorded_folders = {Path(folder).name for folder in entry.folders}
    for child in stash_dir.iterdir():
        if child.name in recorded_folders or child.is_symlink() or not child.is_dir():
            continue
        if not any(child.iterdir()):
            child.rmdir()
    stash_dir.rmdir()


def unstash_files(
    store: StashRecordStore,
    directory: Path,
    requested_date: Optional[str] = None,
    config: Config = DEFAULT_CONFIG,
    output: OutputCallback = _default_output,
    today: Optional[date] = None,
) -> OperationResult:
    """
    Move everything recorded for a stash back into ``directory``.
    
    Restores are best effort: a failed move is reported and skipped. Once
    the restore has been attempted the record is dropped, even if some
    entries could not be restored, so check the reported counts.
    
    Args:
        store: Record store to read and update
        directory: Working directory to restore into
        requested_date: Date (with or without prefix); today if omitted
        config: Configuration to use
        output: Callback for output messages
        today: Current date (optional, for testing)
        
    Returns:
        OperationResult with statistics
        
    Raises:
        StashNotFoundError: If no record exists for the date
        EmptyStashError: If the record lists nothing to restore
        ConfigWriteError: If the store cannot be saved
    """
    result = OperationResult()
    identifier = resolve_identifier(requested_date, config, today)
    
    entry = store.get(identifier)
    if entry is None:
        raise StashNotFoundError(f"no stash found for date: {display_date(identifier, config)}")
    if entry.is_empty:
        raise EmptyStashError(
            f"no files or folders to unstash for date: {display_date(identifier, config)}"
        )
    
    output(f"\nRestoring {len(entry.files)} files and {len(entry.folders)} folders from: {identifier}/\n")
    output("-" * 60)
    
    for recorded in entry.files:
        name = Path(recorded).name
        try:
            _move_entry(directory / recorded, directory / name)
        except MoveError as e:
            _record_failure(result, output, f"failed to restore file {recorded}: {e}")
            continue
        result.file_count += 1
        result.actions.append(name)
        output(f"  [RESTORED] {name}")
    
    for recorded in entry.folders:
        name = Path(recorded).name
        try:
            _move_entry(directory / recorded, directory / name)
        except MoveError as e:
            _record_failure(result, output, f"failed to restore folder {recorded}: {e}")
            continue
        result.folder_count += 1
        result.actions.append(f"{name}/")
        output(f"  [RESTORED] {name}/")
    
    result.success_count = result.file_count + result.folder_count
    result.categories = sorted(entry.categories)
    
    stash_dir = directory / identifier
    try:
        _remove_stash_folder(stash_dir, entry)
    except OSError as e:
        output(f"  [WARNING] failed to remove stash folder {identifier}: {e}")
    
    store.remove(identifier)
    save_store(store, directory, config)
    
    output("-" * 60)
    summary = f"\nUnstashed {result.file_count} files and {result.folder_count} folders from {identifier}"
    if result.error_count:
        summary += f", {result.error_count} errors"
    output(summary)
    
    return result


def list_stashes(
    store: StashRecordStore,
    config: Config = DEFAULT_CONFIG,
    output: OutputCallback = _default_output,
) -> List[StashSummary]:
    """
    Report every recorded stash without touching the store.
    
    Stashes are listed in identifier order, so the same store always
    produces the same listing.
    
    Args:
        store: Record store to read
        config: Configuration to use
        output: Callback for output messages
        
    Returns:
        One StashSummary per recorded stash
    """
    summaries = [
        StashSummary(
            identifier=identifier,
            date=display_date(identifier, config),
            mode=entry.mode,
            file_count=len(entry.files),
            folder_count=len(entry.folders),
            categories=sorted(entry.categories) if entry.mode is StashMode.CATEGORIZE else [],
        )
        for identifier, entry in sorted(store.entries.items())
    ]
    
    if not summaries:
        output("No stashes found.")
        return summaries
    
    output("Available stashes:")
    for summary in summaries:
        line = f"  {summary.date}: {summary.file_count} files, {summary.folder_count} folders"
        if summary.categories:
            line += f" (categorized: {', '.join(summary.categories)})"
        output(line)
    
    return summaries
