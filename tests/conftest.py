"""
Shared fixtures for duplicate-detection tests.
Creates isolated temporary directories with controlled test files.
"""
import logging
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so the 'onecopy' package is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture(autouse=True)
def reset_logging():
    """Drops the stderr handler the CLI installs so it does not outlive the test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def example_tree(temp_dir) -> Dict[str, Path]:
    """
    The canonical scenario:
    - a/x.txt and a/y.txt hold "hello" (one duplicate group, x.txt kept)
    - b/z.txt holds "world" (unique)
    """
    (temp_dir / "a").mkdir()
    (temp_dir / "b").mkdir()

    files = {
        "x": temp_dir / "a" / "x.txt",
        "y": temp_dir / "a" / "y.txt",
        "z": temp_dir / "b" / "z.txt",
    }
    files["x"].write_bytes(b"hello")
    files["y"].write_bytes(b"hello")
    files["z"].write_bytes(b"world")
    return files


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for grouping scenarios:
    - 3 identical 1KB files (one in a subdirectory)
    - 2 identical 2KB files
    - 2 unique files
    - 2 empty files (identical content, so also a group)
    """
    files = {}

    # Duplicate set #1 (1KB of 'A')
    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    # Duplicate pair #2 (2KB of 'B')
    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Unique files
    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    # Empty files
    files["empty1"] = temp_dir / "empty1.txt"
    files["empty1"].write_bytes(b"")
    files["empty2"] = temp_dir / "empty2.txt"
    files["empty2"].write_bytes(b"")

    # Subdirectory with another copy of content_a
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files
