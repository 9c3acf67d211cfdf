"""Tests for file system helpers."""

import pytest

from stratum.errors import MeshIOError
from stratum.file_parser import ensure_directory, sha256_of_file


class TestWorkspaceUtils:
    """Tests for hashing and directory creation."""

    def test_sha256_of_file(self, tmp_path):
        path = tmp_path / "abc.txt"
        path.write_bytes(b"abc")

        assert sha256_of_file(path) == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_sha256_missing_file(self, tmp_path):
        with pytest.raises(MeshIOError):
            sha256_of_file(tmp_path / "missing.bin")

    def test_ensure_directory_creates_parents(self, tmp_path):
        """Nested directories are created and calling twice is harmless."""
        target = tmp_path / "a" / "b" / "c"

        assert ensure_directory(target) == target
        assert ensure_directory(target) == target
        assert target.is_dir()

    def test_ensure_directory_on_file(self, tmp_path):
        """A regular file in the way is a MeshIOError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(MeshIOError):
            ensure_directory(blocker)
