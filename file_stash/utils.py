"""
Pure utility functions for the file stash.

These functions are stateless and have no side effects.
They are easy to unit test in isolation.
"""

from datetime import date
from pathlib import Path
from typing import Optional

from .config import Config, DEFAULT_CONFIG


def get_category(file_path: Path, config: Config = DEFAULT_CONFIG) -> str:
    """
    Determine the category for a file based on its extension.
    
    Args:
        file_path: Path (or bare name) of the file
        config: Configuration to use
        
    Returns:
        Category name (e.g., "images", "documents", "misc")
    """
    return config.get_category(Path(file_path).suffix)


def stash_identifier(today: Optional[date] = None, config: Config = DEFAULT_CONFIG) -> str:
    """
    Build the stash identifier for a day, e.g. 'gostash-2024-01-15'.
    
    Args:
        today: Day to build the identifier for (default: today)
        config: Configuration to use
        
    Returns:
        Identifier naming both the stash folder and its record
    """
    if today is None:
        today = date.today()
    return f"{config.identifier_prefix}{today.strftime(config.date_format)}"


def resolve_identifier(
    requested: Optional[str] = None,
    config: Config = DEFAULT_CONFIG,
    today: Optional[date] = None,
) -> str:
    """
    Turn a user-supplied date into a stash identifier.
    
    No date means today's stash. A date that already carries the
    identifier prefix is used as-is.
    
    Example:
        >>> resolve_identifier("2024-01-15")
        'gostash-2024-01-15'
        >>> resolve_identifier("gostash-2024-01-15")
        'gostash-2024-01-15'
    """
    if not requested:
        return stash_identifier(today, config)
    if requested.startswith(config.identifier_prefix):
        return requested
    return f"{config.identifier_prefix}{requested}"


def display_date(identifier: str, config: Config = DEFAULT_CONFIG) -> str:
    """Strip the identifier prefix, leaving the date part for display."""
    if identifier.startswith(config.identifier_prefix):
        return identifier[len(config.identifier_prefix):]
    return identifier


def is_blacklisted(name: str, identifier: str, config: Config = DEFAULT_CONFIG) -> bool:
    """
    Check if a directory entry must never be stashed.
    
    Protects the sidecar file (and its temp file while it is being
    rewritten) and the stash folder the entries are being moved into.
    
    Args:
        name: Entry name in the working directory
        identifier: Stash identifier of the current operation
        config: Configuration to use
        
    Returns:
        True if the entry should be left alone
    """
    return name in {config.sidecar_name, config.sidecar_tmp_name, identifier}
