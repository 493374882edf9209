"""
Configuration for the file stash.

Uses a dataclass to make configuration testable and injectable.
Default values match the on-disk layout (.gostash.json, gostash-<date>/).
"""

from dataclasses import dataclass, field
from typing import Dict, Set


@dataclass
class Config:
    """
    Configuration for stash operations.
    
    All settings can be overridden when creating a Config instance,
    making it easy to test with different values.
    
    Example:
        # Use defaults
        config = Config()
        
        # Override for testing
        config = Config(sidecar_name=".test-stash.json")
    """
    
    # Sidecar file holding the stash records
    sidecar_name: str = ".gostash.json"
    
    # Stash folders are named <prefix>-<date>
    stash_prefix: str = "gostash"
    date_format: str = "%Y-%m-%d"
    
    # File extension to category mapping
    categories: Dict[str, Set[str]] = field(default_factory=lambda: {
        "images": {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".webp", ".ico"},
        "documents": {".pdf", ".doc", ".docx", ".txt", ".rtf", ".odt", ".pages"},
        "videos": {".mp4", ".avi", ".mkv", ".mov", ".wmv", ".flv", ".webm", ".m4v"},
        "audio": {".mp3", ".wav", ".flac", ".aac", ".ogg", ".wma", ".m4a"},
        "archives": {".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz"},
        "code": {".go", ".py", ".js", ".html", ".css", ".java", ".cpp", ".c", ".h"},
        "data": {".json", ".xml", ".csv", ".sql", ".db", ".sqlite"},
        "executables": {".exe", ".msi", ".deb", ".rpm", ".dmg", ".app"},
    })
    
    # Default category for unrecognized extensions
    default_category: str = "misc"
    
    @property
    def identifier_prefix(self) -> str:
        """Prefix shared by every stash identifier, e.g. 'gostash-'."""
        return f"{self.stash_prefix}-"
    
    @property
    def sidecar_tmp_name(self) -> str:
        """Temporary file used while rewriting the sidecar."""
        return f"{self.sidecar_name}.tmp"
    
    def get_category(self, extension: str) -> str:
        """
        Get the category for a file extension.
        
        Args:
            extension: File extension including dot (e.g., ".jpg")
            
        Returns:
            Category name or default_category if not found
        """
        ext_lower = extension.lower()
        for category, extensions in self.categories.items():
            if ext_lower in extensions:
                return category
        return self.default_category


# Default configuration instance
DEFAULT_CONFIG = Config()
