"""Tests for filesystem abstraction."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from filekit.filesystem import RealFileSystem
from filekit.protocols import FileSystem


class TestRealFileSystem:
    """Tests for RealFileSystem implementation."""

    def test_satisfies_protocol(self) -> None:
        """Test RealFileSystem is structurally a FileSystem."""
        assert isinstance(RealFileSystem(), FileSystem)

    def test_read_text(self, tmp_path: Path) -> None:
        """Test reading text content from a file."""
        fs = RealFileSystem()
        test_file = tmp_path / "test.txt"
        test_file.write_text("Hello, World!")

        assert fs.read_text(test_file) == "Hello, World!"

    def test_read_bytes_not_found(self, tmp_path: Path) -> None:
        """Test reading a non-existent file raises FileNotFoundError."""
        fs = RealFileSystem()

        with pytest.raises(FileNotFoundError):
            fs.read_bytes(tmp_path / "missing.txt")

    def test_write_bytes_truncates(self, tmp_path: Path) -> None:
        """Test writing replaces existing content and returns the count."""
        fs = RealFileSystem()
        test_file = tmp_path / "output.bin"
        test_file.write_bytes(b"old content")

        assert fs.write_bytes(test_file, b"new") == 3
        assert test_file.read_bytes() == b"new"

    def test_write_bytes_append(self, tmp_path: Path) -> None:
        """Test appending keeps existing content."""
        fs = RealFileSystem()
        test_file = tmp_path / "output.bin"
        test_file.write_bytes(b"ab")

        assert fs.write_bytes(test_file, b"cd", append=True) == 2
        assert test_file.read_bytes() == b"abcd"

    def test_exists_and_kind(self, tmp_path: Path) -> None:
        """Test exists, is_dir and is_file."""
        fs = RealFileSystem()
        test_file = tmp_path / "file.txt"
        test_file.touch()

        assert fs.exists(test_file) is True
        assert fs.is_file(test_file) is True
        assert fs.is_dir(test_file) is False
        assert fs.is_dir(tmp_path) is True
        assert fs.is_file(tmp_path) is False
        assert fs.exists(tmp_path / "missing") is False

    def test_access(self, tmp_path: Path) -> None:
        """Test permission checks on an owned directory."""
        fs = RealFileSystem()
        assert fs.is_readable(tmp_path) is True
        assert fs.is_writable(tmp_path) is True
        assert fs.is_readable(tmp_path / "missing") is False

    def test_realpath(self, tmp_path: Path) -> None:
        """Test symlinks and '..' are resolved."""
        fs = RealFileSystem()
        (tmp_path / "real").mkdir()
        (tmp_path / "link").symlink_to(tmp_path / "real")

        assert fs.realpath(tmp_path / "link" / ".." / "real") == os.path.realpath(
            tmp_path / "real"
        )

    def test_mkdir_parents(self, tmp_path: Path) -> None:
        """Test creating nested directories with parents=True."""
        fs = RealFileSystem()
        nested_dir = tmp_path / "a" / "b" / "c"

        fs.mkdir(nested_dir, parents=True)

        assert nested_dir.is_dir()

    def test_mkdir_raises_without_exist_ok(self, tmp_path: Path) -> None:
        """Test mkdir raises FileExistsError without exist_ok."""
        fs = RealFileSystem()
        existing_dir = tmp_path / "existing"
        existing_dir.mkdir()

        with pytest.raises(FileExistsError):
            fs.mkdir(existing_dir)

    def test_list_entries(self, tmp_path: Path) -> None:
        """Test listing returns names including hidden entries."""
        fs = RealFileSystem()
        (tmp_path / "a.txt").touch()
        (tmp_path / ".hidden").touch()
        (tmp_path / "sub").mkdir()

        assert sorted(fs.list_entries(tmp_path)) == [".hidden", "a.txt", "sub"]

    def test_list_entries_missing(self, tmp_path: Path) -> None:
        """Test listing a missing directory raises OSError."""
        with pytest.raises(OSError):
            RealFileSystem().list_entries(tmp_path / "missing")

    def test_unlink_and_rmdir(self, tmp_path: Path) -> None:
        """Test removing a file then its directory."""
        fs = RealFileSystem()
        sub = tmp_path / "sub"
        sub.mkdir()
        (sub / "f.txt").touch()

        with pytest.raises(OSError):
            fs.rmdir(sub)
        fs.unlink(sub / "f.txt")
        fs.rmdir(sub)

        assert not sub.exists()

    def test_rename(self, tmp_path: Path) -> None:
        """Test renaming moves the content."""
        fs = RealFileSystem()
        (tmp_path / "old.txt").write_text("content")

        fs.rename(tmp_path / "old.txt", tmp_path / "new.txt")

        assert not (tmp_path / "old.txt").exists()
        assert (tmp_path / "new.txt").read_text() == "content"

    def test_rename_onto_directory_fails(self, tmp_path: Path) -> None:
        """Test renaming onto an existing directory raises instead of moving inside it."""
        fs = RealFileSystem()
        (tmp_path / "old.txt").write_text("content")
        (tmp_path / "taken").mkdir()

        with pytest.raises(OSError):
            fs.rename(tmp_path / "old.txt", tmp_path / "taken")

        assert (tmp_path / "old.txt").exists()
        assert not (tmp_path / "taken" / "old.txt").exists()

    def test_copyfile(self, tmp_path: Path) -> None:
        """Test copying leaves the source in place."""
        fs = RealFileSystem()
        (tmp_path / "src.bin").write_bytes(b"\x00\x01")

        fs.copyfile(tmp_path / "src.bin", tmp_path / "dst.bin")

        assert (tmp_path / "src.bin").exists()
        assert (tmp_path / "dst.bin").read_bytes() == b"\x00\x01"

    def test_chmod_and_stat(self, tmp_path: Path) -> None:
        """Test chmod, getsize and getmtime."""
        fs = RealFileSystem()
        test_file = tmp_path / "f.txt"
        test_file.write_text("12345")

        fs.chmod(test_file, 0o600)

        assert test_file.stat().st_mode & 0o777 == 0o600
        assert fs.getsize(test_file) == 5
        assert fs.getmtime(test_file) == pytest.approx(test_file.stat().st_mtime)
