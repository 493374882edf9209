"""
Pytest fixtures for file stash tests.

Provides reusable test fixtures for creating temporary directories,
test files, and output capture.
"""

import pytest
from datetime import date
from pathlib import Path

from file_stash.config import Config


STASH_DAY = date(2024, 1, 15)


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def test_config() -> Config:
    """Create a test configuration with its own sidecar name."""
    return Config(sidecar_name=".test-stash.json")


@pytest.fixture
def stash_day() -> date:
    """Fixed stash date so identifiers are predictable."""
    return STASH_DAY


@pytest.fixture
def sample_files(temp_dir: Path) -> dict:
    """
    Create sample files of different types for testing.
    
    Returns a dict mapping category to list of created files.
    """
    files = {
        "images": [],
        "documents": [],
        "code": [],
        "misc": [],
    }
    
    for ext in [".jpg", ".png"]:
        f = temp_dir / f"image{ext}"
        f.write_text(f"fake image {ext}")
        files["images"].append(f)
    
    for ext in [".pdf", ".txt"]:
        f = temp_dir / f"document{ext}"
        f.write_text(f"fake document {ext}")
        files["documents"].append(f)
    
    f = temp_dir / "script.py"
    f.write_text("print('hello')")
    files["code"].append(f)
    
    f = temp_dir / "unknown.xyz"
    f.write_text("unknown content")
    files["misc"].append(f)
    
    return files


@pytest.fixture
def sample_folder(temp_dir: Path) -> Path:
    """Create a subfolder with a nested file."""
    folder = temp_dir / "sub"
    folder.mkdir()
    (folder / "nested.txt").write_text("nested content")
    return folder


@pytest.fixture
def capture_output() -> list:
    """Create a list to capture output from operations."""
    return []


@pytest.fixture
def output_callback(capture_output: list):
    """Create an output callback that captures messages."""
    def callback(message: str) -> None:
        capture_output.append(message)
    return callback
