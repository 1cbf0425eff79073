"""Protocol definitions for the collaborators of file and directory handles.

Handles never touch ``os`` directly. They talk to a ``FileSystem``, and
MIME detection goes through a ``ContentSniffer`` and an ``ImageInspector``.
This keeps the handles testable with doubles that simulate failures the
real filesystem rarely produces on demand (a rename refused halfway through
a batch, an unlistable directory).

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for native filesystem primitives.

    Every method is a single native call. Failures surface as ``OSError``
    and are translated into typed errors by the handles.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        ...

    def is_readable(self, path: Path) -> bool:
        """Check read permission on a path."""
        ...

    def is_writable(self, path: Path) -> bool:
        """Check write permission on a path."""
        ...

    def realpath(self, path: Path) -> str:
        """Resolve a path to its canonical absolute form."""
        ...

    def mkdir(self, path: Path, mode: int = 0o777, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            mode: Permission bits for created directories.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def list_entries(self, path: Path) -> list[str]:
        """List entry names of a directory, in native order.

        Raises:
            OSError: If the directory cannot be opened.
        """
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        ...

    def rmdir(self, path: Path) -> None:
        """Remove an empty directory."""
        ...

    def rename(self, src: Path, dst: Path) -> None:
        """Rename or move an entry."""
        ...

    def copyfile(self, src: Path, dst: Path) -> None:
        """Copy the bytes of a file."""
        ...

    def read_bytes(self, path: Path) -> bytes:
        """Read the full content of a file."""
        ...

    def read_text(self, path: Path) -> str:
        """Read text content from a file."""
        ...

    def write_bytes(self, path: Path, data: bytes, append: bool = False) -> int:
        """Write bytes to a file, truncating unless ``append``.

        Returns:
            Number of bytes written.
        """
        ...

    def chmod(self, path: Path, mode: int) -> None:
        """Apply permission bits."""
        ...

    def getsize(self, path: Path) -> int:
        """Size of a file in bytes."""
        ...

    def getmtime(self, path: Path) -> float:
        """Last modification time in epoch seconds."""
        ...


@runtime_checkable
class ContentSniffer(Protocol):
    """Protocol for magic-byte content detection."""

    def mime_type(self, path: Path, with_encoding: bool = False) -> str | None:
        """Detect the MIME type of a file.

        Args:
            path: Path to the file.
            with_encoding: Append the charset, e.g. ``text/plain; charset=us-ascii``.

        Returns:
            The detected type, or None if detection failed.
        """
        ...

    def encoding(self, path: Path) -> str | None:
        """Detect the character encoding of a file."""
        ...


@runtime_checkable
class ImageInspector(Protocol):
    """Protocol for reading image headers."""

    def dimensions(self, path: Path) -> tuple[int, int] | None:
        """Width and height of an image, or None if it is not one."""
        ...

    def mime_type(self, path: Path) -> str | None:
        """MIME type of the image format, or None if it is not an image."""
        ...
