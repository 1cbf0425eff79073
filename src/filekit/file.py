"""File handle: content access, moving, deletion and MIME detection."""

from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path

from filekit.directory import Directory
from filekit.errors import (
    DeleteFailedError,
    DirectoryNotWritableError,
    FileMissingError,
    FileNotReadableError,
    FileNotWritableError,
)
from filekit.filesystem import RealFileSystem
from filekit.mime import PillowImageInspector, lookup_extension
from filekit.protocols import ContentSniffer, FileSystem, ImageInspector
from filekit.types import PathComponent, StrPath

logger = logging.getLogger(__name__)

# Section name given to keys that appear before any [section] header
_INI_ROOT_SECTION = "__root__"


class File:
    """Handle on a file path that may or may not exist yet.

    The current path is the only mutable state: ``move_to()`` updates it
    in place. The filesystem, sniffer and image inspector are fixed at
    construction. Existence is checked lazily by each operation.
    """

    def __init__(
        self,
        path: StrPath,
        filesystem: FileSystem | None = None,
        sniffer: ContentSniffer | None = None,
        images: ImageInspector | None = None,
    ) -> None:
        """Initialize file handle.

        Args:
            path: Path to the file, absolute or relative. Stored verbatim.
            filesystem: Filesystem abstraction (defaults to RealFileSystem).
            sniffer: Content sniffer. Without one, MIME detection falls
                back to image headers and the extension table.
            images: Image inspector (defaults to PillowImageInspector).
        """
        self._path = os.fspath(path)
        self.fs = filesystem or RealFileSystem()
        self.sniffer = sniffer
        self.images = images or PillowImageInspector()

    def exists(self) -> bool:
        """True if the path exists and is a regular file (not a directory)."""
        return self.fs.is_file(Path(self._path))

    def is_writable(self) -> bool:
        """True if the file can be written.

        A file that does not exist yet is writable when its directory is.
        """
        if not self.exists():
            return self.fs.is_writable(Path(self.get_dir_path()))
        return self.fs.is_writable(Path(self._path))

    def is_readable(self) -> bool:
        return self.fs.is_readable(Path(self._path))

    def set_permissions(self, mode: int) -> bool:
        """Apply permission bits.

        Returns:
            True on success, False if the change was refused.
        """
        try:
            self.fs.chmod(Path(self._path), mode)
        except OSError as e:
            logger.warning("Could not change permissions of %s: %s", self._path, e)
            return False
        return True

    def get_directory(self) -> Directory:
        """Handle on the directory containing this file.

        Raises:
            DirectoryNotFoundError: If the parent directory does not exist.
        """
        return Directory(self.get_dir_path(), filesystem=self.fs)

    def _require_readable(self) -> None:
        if not self.exists():
            raise FileMissingError(self._path)
        if not self.is_readable():
            raise FileNotReadableError(self._path)

    def get_bytes(self) -> bytes:
        """Full content of the file.

        Raises:
            FileMissingError: If the file does not exist.
            FileNotReadableError: If the file is not readable.
        """
        self._require_readable()
        return self.fs.read_bytes(Path(self._path))

    def get_content(self, encoding: str = "utf-8") -> str:
        """Full content of the file, decoded.

        Raises:
            FileMissingError: If the file does not exist.
            FileNotReadableError: If the file is not readable.
        """
        return self.get_bytes().decode(encoding)

    def _write(self, content: str | bytes, append: bool, encoding: str) -> int:
        if not self.is_writable():
            raise FileNotWritableError(self._path)
        data = content.encode(encoding) if isinstance(content, str) else content
        try:
            written = self.fs.write_bytes(Path(self._path), data, append=append)
        except OSError as e:
            raise FileNotWritableError(self._path) from e
        logger.debug("Wrote %d bytes to %s", written, self._path)
        return written

    def replace_content(self, content: str | bytes, encoding: str = "utf-8") -> int:
        """Replace the content of the file, creating it if needed.

        Returns:
            Number of bytes written.

        Raises:
            FileNotWritableError: If the file cannot be written.
        """
        return self._write(content, append=False, encoding=encoding)

    def append_content(self, content: str | bytes, encoding: str = "utf-8") -> int:
        """Append to the file, creating it if needed.

        Returns:
            Number of bytes written.

        Raises:
            FileNotWritableError: If the file cannot be written.
        """
        return self._write(content, append=True, encoding=encoding)

    def parse_ini(self) -> dict[str, str]:
        """Parse the file as an INI document.

        Keys of all sections are merged into one flat mapping, later
        sections overriding earlier ones. Keys before the first section
        header are accepted. Surrounding double quotes are stripped from
        values.

        Raises:
            FileMissingError: If the file does not exist.
            FileNotReadableError: If the file is not readable.
        """
        self._require_readable()
        parser = configparser.ConfigParser(interpolation=None, strict=False)
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        parser.read_string(f"[{_INI_ROOT_SECTION}]\n" + self.fs.read_text(Path(self._path)))

        values: dict[str, str] = {}
        for section in parser.sections():
            for key, value in parser.items(section):
                if len(value) >= 2 and value[0] == value[-1] == '"':
                    value = value[1:-1]
                values[key] = value
        return values

    def delete(self) -> bool:
        """Delete the file.

        The handle keeps pointing at the removed path.

        Raises:
            FileMissingError: If the file does not exist.
            FileNotWritableError: If the file is not writable.
            DeleteFailedError: If the file could not be removed.
        """
        if not self.exists():
            raise FileMissingError(self._path)
        if not self.is_writable():
            raise FileNotWritableError(self._path)
        try:
            self.fs.unlink(Path(self._path))
        except OSError as e:
            raise DeleteFailedError(self._path) from e
        logger.debug("Deleted file %s", self._path)
        return True

    def move_to(self, target: Directory | StrPath) -> bool:
        """Move the file into a directory, keeping its name.

        A target given as a path is created first if it does not exist.

        Args:
            target: Target directory handle or path.

        Returns:
            True if moved (the handle now points at the new location),
            False if the rename failed.

        Raises:
            DirectoryNotWritableError: If the target is not writable, or a
                target path could not be created.
        """
        if not isinstance(target, Directory):
            target = Directory.create_recursive(target, filesystem=self.fs)

        if not target.is_writable():
            raise DirectoryNotWritableError(target.path)

        new_path = target.path + self.get_basename()
        try:
            self.fs.rename(Path(self._path), Path(new_path))
        except OSError as e:
            logger.warning("Could not move %s to %s: %s", self._path, new_path, e)
            return False

        logger.debug("Moved %s to %s", self._path, new_path)
        self._path = new_path
        return True

    def get_download_headers(self, filename: str | None = None) -> dict[str, str | int]:
        """HTTP headers for sending this file as an attachment.

        Args:
            filename: Name offered to the client. Defaults to the basename.

        Returns:
            Ordered header mapping, ready for an HTTP response layer.

        Raises:
            FileNotReadableError: If the file is not readable.
            FileMissingError: If the file does not exist.
        """
        if not self.is_readable():
            raise FileNotReadableError(self._path)

        if not filename:
            filename = self.get_basename()

        return {
            "Content-type": self.get_mime_type(with_encoding=True) or "",
            "Content-disposition": f"attachment; filename={filename}",
            "Content-Transfer-Encoding": "binary",
            "Expires": "0",
            "Cache-Control": "must-revalidate, post-check=0, pre-check=0",
            "Pragma": "public",
            "Content-Length": self.get_size(),
        }

    def get_size(self) -> int:
        """Size of the file in bytes.

        Raises:
            FileMissingError: If the file does not exist.
        """
        if not self.exists():
            raise FileMissingError(self._path)
        return self.fs.getsize(Path(self._path))

    def get_mime_type(self, with_encoding: bool = False) -> str | None:
        """Detect the MIME type of the file.

        The content sniffer is used when one is configured. Otherwise an
        image reports its own type, and anything else is looked up by
        extension.

        Args:
            with_encoding: Ask the sniffer to include the charset.

        Returns:
            The MIME type, or None if it could not be determined.

        Raises:
            FileMissingError: If the file does not exist.
        """
        if not self.exists():
            raise FileMissingError(self._path)

        filename = self.fs.realpath(Path(self._path))

        if self.sniffer is not None:
            return self.sniffer.mime_type(Path(filename), with_encoding)

        if self.is_image():
            return self.images.mime_type(Path(self._path))
        return lookup_extension(filename)

    def get_encoding(self) -> str | None:
        """Detect the character encoding, or None without a sniffer.

        Raises:
            FileMissingError: If the file does not exist.
        """
        if not self.exists():
            raise FileMissingError(self._path)
        if self.sniffer is None:
            return None
        return self.sniffer.encoding(Path(self.fs.realpath(Path(self._path))))

    def get_path(self, component: PathComponent | None = None) -> str:
        """The full path, or one component of it.

        Args:
            component: Part of the path to return. None returns the path
                exactly as stored.
        """
        if component is None:
            return self._path

        stripped = self._path.rstrip(os.sep) or os.sep
        if component is PathComponent.DIRNAME:
            return os.path.dirname(stripped) or "."

        basename = os.path.basename(stripped)
        if component is PathComponent.BASENAME:
            return basename

        stem, dot, extension = basename.rpartition(".")
        if component is PathComponent.EXTENSION:
            return extension if dot else ""
        return stem if dot else basename

    def get_dir_path(self) -> str:
        return self.get_path(PathComponent.DIRNAME)

    def get_basename(self) -> str:
        return self.get_path(PathComponent.BASENAME)

    def get_extension(self) -> str:
        return self.get_path(PathComponent.EXTENSION)

    def get_filename(self) -> str:
        """Basename without its extension."""
        return self.get_path(PathComponent.FILENAME)

    def is_image(self) -> bool:
        """True if the file is an image with positive width and height.

        Raises:
            FileMissingError: If the file does not exist.
            FileNotReadableError: If the file is not readable.
        """
        self._require_readable()
        size = self.images.dimensions(Path(self._path))
        return bool(size and size[0] > 0 and size[1] > 0)

    def get_modification_time(self) -> int:
        """Last modification time in epoch seconds.

        Raises:
            FileMissingError: If the file does not exist.
        """
        if not self.exists():
            raise FileMissingError(self._path)
        return int(self.fs.getmtime(Path(self._path)))

    def __repr__(self) -> str:
        return f"File({self._path!r})"
