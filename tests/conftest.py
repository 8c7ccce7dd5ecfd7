"""
Shared fixtures for duplicate scanner tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates the reference duplicate layout:
    - 3 copies of "X" content (one in a subdirectory)
    - 2 copies of "Y" content (one in a subdirectory)
    - 1 unique file
    All three contents have different lengths, so sizes never collide across groups.
    """
    files = {}
    sub = temp_dir / "sub"
    sub.mkdir()

    content_x = b"first duplicate content"
    content_y = b"second duplicate data"
    content_z = b"unique"

    files["original1"] = temp_dir / "original1.txt"
    files["duplicate1"] = temp_dir / "duplicate1.txt"
    files["deep1"] = sub / "deep1.txt"
    for key in ("original1", "duplicate1", "deep1"):
        files[key].write_bytes(content_x)

    files["original2"] = temp_dir / "original2.dat"
    files["dup2"] = sub / "dup2.dat"
    for key in ("original2", "dup2"):
        files[key].write_bytes(content_y)

    files["unique"] = temp_dir / "unique.txt"
    files["unique"].write_bytes(content_z)

    return files


class FakeTrash:
    """In-memory TrashBackend that records calls instead of touching the disk."""

    def __init__(self, supported=True, failing=()):
        self.supported = supported
        self.failing = set(failing)
        self.calls = []

    def trash_supported(self) -> bool:
        return self.supported

    def move_to_trash(self, path: str) -> bool:
        self.calls.append(path)
        return path not in self.failing


@pytest.fixture
def fake_trash():
    return FakeTrash()
