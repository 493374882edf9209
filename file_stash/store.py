"""
Stash record store backed by the JSON sidecar file.

The whole store is loaded once at command start and written back in full
after each mutating command. Layout on disk:

    {
      "files_by_date": {
        "gostash-2024-01-15": {
          "mode": "categorize",
          "files": ["gostash-2024-01-15/images/a.png"],
          "folders": ["gostash-2024-01-15/sub"],
          "categories": {"images": ["gostash-2024-01-15/images/a.png"]}
        }
      }
    }

"categories" is omitted for simple entries and tolerated as missing on load.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import Config, DEFAULT_CONFIG
from .errors import ConfigParseError, ConfigReadError, ConfigWriteError


ROOT_KEY = "files_by_date"


class StashMode(str, Enum):
    SIMPLE = "simple"
    CATEGORIZE = "categorize"


@dataclass
class StashEntry:
    """Effects of one stash operation: where every moved entry now lives."""
    mode: StashMode = StashMode.SIMPLE
    files: List[str] = field(default_factory=list)
    folders: List[str] = field(default_factory=list)
    
    # Only populated in categorize mode
    categories: Dict[str, List[str]] = field(default_factory=dict)
    
    @property
    def is_empty(self) -> bool:
        return not self.files and not self.folders
    
    def record_file(self, path: str, category: Optional[str] = None) -> None:
        """Record a file that was successfully moved to ``path``."""
        self.files.append(path)
        if category is not None:
            self.categories.setdefault(category, []).append(path)
    
    def record_folder(self, path: str) -> None:
        """Record a folder that was successfully moved to ``path``."""
        self.folders.append(path)
    
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "mode": self.mode.value,
            "files": list(self.files),
            "folders": list(self.folders),
        }
        if self.mode is StashMode.CATEGORIZE and self.categories:
            data["categories"] = {k: list(v) for k, v in self.categories.items()}
        return data
    
    @classmethod
    def from_dict(cls, identifier: str, data: Any) -> "StashEntry":
        """
        Build an entry from its JSON form.
        
        Missing list fields default to empty. An entry without a mode is
        treated as simple.
        
        Raises:
            ConfigParseError: If the entry has the wrong shape
        """
        if not isinstance(data, dict):
            raise ConfigParseError(f"entry {identifier!r} is not an object")
        
        raw_mode = data.get("mode") or StashMode.SIMPLE.value
        try:
            mode = StashMode(raw_mode)
        except ValueError:
            raise ConfigParseError(f"entry {identifier!r} has unknown mode {raw_mode!r}") from None
        
        files = _string_list(identifier, "files", data.get("files"))
        folders = _string_list(identifier, "folders", data.get("folders"))
        
        raw_categories = data.get("categories") or {}
        if not isinstance(raw_categories, dict):
            raise ConfigParseError(f"entry {identifier!r}: 'categories' is not an object")
        categories = {
            str(name): _string_list(identifier, f"categories.{name}", paths)
            for name, paths in raw_categories.items()
        }
        
        return cls(mode=mode, files=files, folders=folders, categories=categories)


def _string_list(identifier: str, key: str, value: Any) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigParseError(f"entry {identifier!r}: {key!r} is not a list of paths")
    return list(value)


@dataclass
class StashRecordStore:
    """Mapping from stash identifier to the entry it produced."""
    entries: Dict[str, StashEntry] = field(default_factory=dict)
    
    def __contains__(self, identifier: str) -> bool:
        return identifier in self.entries
    
    def __len__(self) -> int:
        return len(self.entries)
    
    def get(self, identifier: str) -> Optional[StashEntry]:
        return self.entries.get(identifier)
    
    def put(self, identifier: str, entry: StashEntry) -> None:
        """Store an entry, replacing any earlier entry for the same identifier."""
        self.entries[identifier] = entry
    
    def remove(self, identifier: str) -> None:
        self.entries.pop(identifier, None)
    
    def to_dict(self) -> Dict[str, Any]:
        return {ROOT_KEY: {key: entry.to_dict() for key, entry in self.entries.items()}}
    
    @classmethod
    def from_dict(cls, data: Any) -> "StashRecordStore":
        if not isinstance(data, dict):
            raise ConfigParseError("sidecar root is not a JSON object")
        
        raw_entries = data.get(ROOT_KEY) or {}
        if not isinstance(raw_entries, dict):
            raise ConfigParseError(f"{ROOT_KEY!r} is not a JSON object")
        
        return cls(entries={
            key: StashEntry.from_dict(key, value) for key, value in raw_entries.items()
        })


def sidecar_path(directory: Path, config: Config = DEFAULT_CONFIG) -> Path:
    return directory / config.sidecar_name


def load_store(directory: Path, config: Config = DEFAULT_CONFIG) -> StashRecordStore:
    """
    Load the record store from the sidecar file in ``directory``.
    
    If the sidecar does not exist, an empty store is returned and an empty
    sidecar is written so later commands find it.
    
    Args:
        directory: Working directory holding the sidecar
        config: Configuration to use
        
    Returns:
        The fully loaded store
        
    Raises:
        ConfigReadError: If the sidecar exists but cannot be read
        ConfigParseError: If the sidecar is not a valid store document
        ConfigWriteError: If the empty sidecar cannot be created
    """
    path = sidecar_path(directory, config)
    
    if not path.exists():
        store = StashRecordStore()
        save_store(store, directory, config)
        return store
    
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigReadError(f"error reading {path}: {e}") from e
    
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"error decoding {path}: {e}") from e
    
    return StashRecordStore.from_dict(data)


def save_store(store: StashRecordStore, directory: Path, config: Config = DEFAULT_CONFIG) -> None:
    """
    Write the whole store to the sidecar file.
    
    The JSON is written to a temp file next to the sidecar and then swapped
    in, so a crash mid-write never leaves a truncated sidecar behind.
    
    Raises:
        ConfigWriteError: On any I/O failure
    """
    path = sidecar_path(directory, config)
    tmp_path = directory / config.sidecar_tmp_name
    content = json.dumps(store.to_dict(), indent=2) + "\n"
    
    try:
        tmp_path.write_text(content, encoding="utf-8")
        tmp_path.replace(path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise ConfigWriteError(f"error writing {path}: {e}") from e
