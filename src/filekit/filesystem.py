"""Native filesystem implementation.

The RealFileSystem implementation wraps standard library operations and
is what handles use unless a test double is injected.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os, Path and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return os.path.exists(path)

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return os.path.isdir(path)

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        return os.path.isfile(path)

    def is_readable(self, path: Path) -> bool:
        """Check read permission on a path."""
        return os.access(path, os.R_OK)

    def is_writable(self, path: Path) -> bool:
        """Check write permission on a path."""
        return os.access(path, os.W_OK)

    def realpath(self, path: Path) -> str:
        """Resolve a path to its canonical absolute form."""
        return os.path.realpath(path)

    def mkdir(self, path: Path, mode: int = 0o777, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        Path(path).mkdir(mode=mode, parents=parents, exist_ok=exist_ok)

    def list_entries(self, path: Path) -> list[str]:
        """List entry names of a directory."""
        with os.scandir(path) as entries:
            return [entry.name for entry in entries]

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        os.unlink(path)

    def rmdir(self, path: Path) -> None:
        """Remove an empty directory."""
        os.rmdir(path)

    def rename(self, src: Path, dst: Path) -> None:
        """Rename an entry in one step.

        Fails when dst is an existing directory or on another device.
        """
        Path(src).rename(dst)

    def copyfile(self, src: Path, dst: Path) -> None:
        """Copy the bytes of a file."""
        shutil.copyfile(src, dst)

    def read_bytes(self, path: Path) -> bytes:
        """Read the full content of a file."""
        return Path(path).read_bytes()

    def read_text(self, path: Path) -> str:
        """Read text content from a file."""
        return Path(path).read_text()

    def write_bytes(self, path: Path, data: bytes, append: bool = False) -> int:
        """Write bytes to a file."""
        with open(path, "ab" if append else "wb") as handle:
            return handle.write(data)

    def chmod(self, path: Path, mode: int) -> None:
        """Apply permission bits."""
        os.chmod(path, mode)

    def getsize(self, path: Path) -> int:
        """Size of a file in bytes."""
        return os.path.getsize(path)

    def getmtime(self, path: Path) -> float:
        """Last modification time in epoch seconds."""
        return os.path.getmtime(path)
