"""
Unit tests for file_stash.utils module.

Tests pure utility functions in isolation.
"""

import pytest
from datetime import date
from pathlib import Path

from file_stash.config import Config
from file_stash.utils import (
    display_date,
    get_category,
    is_blacklisted,
    resolve_identifier,
    stash_identifier,
)


class TestGetCategory:
    """Tests for get_category function."""
    
    def test_every_listed_extension_maps_to_its_category(self):
        config = Config()
        for category, extensions in config.categories.items():
            for ext in extensions:
                assert get_category(Path(f"file{ext}"), config) == category
    
    def test_case_insensitive(self):
        config = Config()
        assert get_category(Path("photo.JPG"), config) == "images"
        assert get_category(Path("Report.PdF"), config) == "documents"
        assert get_category(Path("main.GO"), config) == "code"
    
    def test_examples(self):
        config = Config()
        assert get_category(Path("a.png"), config) == "images"
        assert get_category(Path("b.txt"), config) == "documents"
        assert get_category(Path("clip.webm"), config) == "videos"
        assert get_category(Path("song.flac"), config) == "audio"
        assert get_category(Path("backup.7z"), config) == "archives"
        assert get_category(Path("rows.csv"), config) == "data"
        assert get_category(Path("setup.msi"), config) == "executables"
    
    def test_unknown_extension_is_misc(self):
        config = Config()
        assert get_category(Path("file.xyz"), config) == "misc"
        assert get_category(Path("file.unknown"), config) == "misc"
    
    def test_no_extension_is_misc(self):
        config = Config()
        assert get_category(Path("Makefile"), config) == "misc"
        assert get_category(Path(".bashrc"), config) == "misc"
    
    def test_only_last_suffix_counts(self):
        config = Config()
        assert get_category(Path("archive.tar.gz"), config) == "archives"
        assert get_category(Path("notes.txt.bak"), config) == "misc"
    
    def test_accepts_plain_names(self):
        assert get_category("photo.gif") == "images"
    
    def test_custom_default_category(self):
        config = Config(default_category="other")
        assert get_category(Path("file.xyz"), config) == "other"


class TestStashIdentifier:
    """Tests for stash_identifier function."""
    
    def test_formats_date(self):
        assert stash_identifier(date(2024, 1, 15)) == "gostash-2024-01-15"
    
    def test_defaults_to_today(self):
        assert stash_identifier() == f"gostash-{date.today().isoformat()}"
    
    def test_custom_prefix(self):
        config = Config(stash_prefix="parked")
        assert stash_identifier(date(2024, 3, 1), config) == "parked-2024-03-01"


class TestResolveIdentifier:
    """Tests for resolve_identifier function."""
    
    def test_no_date_means_today(self):
        today = date(2024, 1, 15)
        assert resolve_identifier(None, today=today) == "gostash-2024-01-15"
        assert resolve_identifier("", today=today) == "gostash-2024-01-15"
    
    def test_adds_prefix(self):
        assert resolve_identifier("2024-01-15") == "gostash-2024-01-15"
    
    def test_keeps_existing_prefix(self):
        assert resolve_identifier("gostash-2024-01-15") == "gostash-2024-01-15"


class TestDisplayDate:
    """Tests for display_date function."""
    
    def test_strips_prefix(self):
        assert display_date("gostash-2024-01-15") == "2024-01-15"
    
    def test_leaves_other_keys_alone(self):
        assert display_date("something-else") == "something-else"


class TestIsBlacklisted:
    """Tests for is_blacklisted function."""
    
    @pytest.mark.parametrize("name", [".gostash.json", ".gostash.json.tmp", "gostash-2024-01-15"])
    def test_protected_names(self, name: str):
        assert is_blacklisted(name, "gostash-2024-01-15") is True
    
    def test_regular_names(self):
        assert is_blacklisted("a.png", "gostash-2024-01-15") is False
        assert is_blacklisted("gostash-2024-01-14", "gostash-2024-01-15") is False
    
    def test_uses_configured_sidecar(self, test_config: Config):
        assert is_blacklisted(".test-stash.json", "gostash-2024-01-15", test_config) is True
        assert is_blacklisted(".gostash.json", "gostash-2024-01-15", test_config) is False
