"""Directory handle: listing, creation, deletion, copy and rename."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from filekit.errors import (
    DeleteFailedError,
    DirectoryAlreadyExistsError,
    DirectoryNotFoundError,
    DirectoryNotReadableError,
    DirectoryNotWritableError,
)
from filekit.filesystem import RealFileSystem
from filekit.protocols import FileSystem
from filekit.types import StrPath

logger = logging.getLogger(__name__)

# Mode applied to directories created without an explicit mode
DEFAULT_MODE = 0o770


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


class Directory:
    """Handle on an existing directory.

    The path is resolved to canonical form with a trailing separator at
    construction and never changes afterwards. After ``delete()`` the
    handle points at a path that no longer exists.
    """

    def __init__(self, path: StrPath, filesystem: FileSystem | None = None) -> None:
        """Initialize handle on an existing directory.

        Args:
            path: Path to the directory.
            filesystem: Filesystem abstraction (defaults to RealFileSystem).

        Raises:
            DirectoryNotFoundError: If path is not an existing directory.
        """
        self.fs = filesystem or RealFileSystem()
        if not self.fs.is_dir(Path(path)):
            raise DirectoryNotFoundError(os.fspath(path))
        self._path = self.fs.realpath(Path(path)).rstrip(os.sep) + os.sep

    @classmethod
    def create(
        cls,
        parent: StrPath,
        name: str,
        mode: int = DEFAULT_MODE,
        replace_existing: bool = False,
        filesystem: FileSystem | None = None,
    ) -> Directory:
        """Create a directory inside an existing parent.

        Args:
            parent: Existing parent directory.
            name: Name (or relative path) of the directory to create.
            mode: Permission bits for created directories.
            replace_existing: Recursively delete an existing target first.
            filesystem: Filesystem abstraction (defaults to RealFileSystem).

        Returns:
            Handle on the created directory.

        Raises:
            DirectoryNotFoundError: If parent does not exist.
            DirectoryAlreadyExistsError: If the target exists and
                replace_existing is False.
            DirectoryNotWritableError: If the directory could not be created.
        """
        fs = filesystem or RealFileSystem()
        if not fs.is_dir(Path(parent)):
            raise DirectoryNotFoundError(os.fspath(parent))

        target = Path(fs.realpath(Path(parent))) / name
        if fs.exists(target):
            if not replace_existing:
                raise DirectoryAlreadyExistsError(str(target))
            cls(target, filesystem=fs).delete()

        try:
            fs.mkdir(target, mode=mode, parents=True)
        except OSError as e:
            raise DirectoryNotWritableError(str(target)) from e
        logger.debug("Created directory %s", target)
        return cls(target, filesystem=fs)

    @classmethod
    def create_recursive(
        cls,
        path: StrPath,
        mode: int = DEFAULT_MODE,
        filesystem: FileSystem | None = None,
    ) -> Directory:
        """Create a directory and any missing parents, if it is absent.

        Calling this on an existing directory returns a handle to it.

        Args:
            path: Directory to create.
            mode: Permission bits for created directories.
            filesystem: Filesystem abstraction (defaults to RealFileSystem).

        Returns:
            Handle on the directory.

        Raises:
            DirectoryNotWritableError: If the directory could not be created.
        """
        fs = filesystem or RealFileSystem()
        if fs.is_dir(Path(path)):
            return cls(path, filesystem=fs)

        try:
            fs.mkdir(Path(path), mode=mode, parents=True)
        except OSError as e:
            raise DirectoryNotWritableError(os.fspath(path)) from e
        logger.debug("Created directory %s", path)
        return cls(path, filesystem=fs)

    def make_subdirectory(
        self, name: str, mode: int = DEFAULT_MODE, if_not_exists: bool = True
    ) -> Directory:
        """Create a subdirectory of this directory.

        Args:
            name: Name of the subdirectory.
            mode: Permission bits for created directories.
            if_not_exists: Return the existing subdirectory instead of
                raising when it is already present.

        Returns:
            Handle on the subdirectory.

        Raises:
            DirectoryAlreadyExistsError: If it exists and if_not_exists is False.
            DirectoryNotWritableError: If it could not be created.
        """
        try:
            return self.create(self._path, name, mode, replace_existing=False, filesystem=self.fs)
        except DirectoryAlreadyExistsError:
            if if_not_exists:
                return Directory(self._path + name, filesystem=self.fs)
            raise

    def empty(self) -> None:
        """Delete all files and non-hidden subdirectories.

        Hidden subdirectories (name starting with ".") are left untouched.
        Files are removed first, then each subdirectory is emptied and
        removed. The first failure aborts the remaining deletions.

        Raises:
            DeleteFailedError: If an entry could not be removed.
        """
        for name in self.list_files():
            path = Path(self._path) / name
            try:
                self.fs.unlink(path)
            except OSError as e:
                raise DeleteFailedError(str(path)) from e
            logger.debug("Deleted file %s", path)

        # list_directories() already leaves out hidden entries
        for name in self.list_directories():
            subdirectory = Directory(self._path + name, filesystem=self.fs)
            subdirectory.empty()
            subdirectory.delete(recursive=False)

    def delete(self, recursive: bool = True) -> None:
        """Delete this directory.

        Args:
            recursive: Empty the directory first.

        Raises:
            DirectoryNotFoundError: If the directory no longer exists.
            DeleteFailedError: If the directory could not be removed, for
                example because it is not empty.
        """
        if not self.fs.is_dir(Path(self._path)):
            raise DirectoryNotFoundError(self._path)
        if recursive:
            self.empty()
        try:
            self.fs.rmdir(Path(self._path))
        except OSError as e:
            raise DeleteFailedError(self._path) from e
        logger.debug("Deleted directory %s", self._path)

    def _entries(self) -> list[str]:
        try:
            return self.fs.list_entries(Path(self._path))
        except OSError as e:
            raise DirectoryNotReadableError(self._path) from e

    def list_directories(self) -> list[str]:
        """Names of the non-hidden subdirectories, sorted.

        Raises:
            DirectoryNotReadableError: If the directory cannot be listed.
        """
        directories = [
            name
            for name in self._entries()
            if not _is_hidden(name) and self.fs.is_dir(Path(self._path) / name)
        ]
        return sorted(directories)

    def list_files(self, filter: str = "") -> list[str]:
        """Names of the regular files in this directory, sorted.

        Hidden files are included.

        Args:
            filter: Keep only names containing this substring, ignoring case.

        Raises:
            DirectoryNotReadableError: If the directory cannot be listed.
        """
        needle = filter.lower()
        files = [
            name
            for name in self._entries()
            if self.fs.is_file(Path(self._path) / name) and needle in name.lower()
        ]
        return sorted(files)

    def _resolve_target(self, target: Directory | StrPath) -> str:
        if isinstance(target, Directory):
            return target.path
        return os.fspath(target)

    def copy_files(
        self, target: Directory | StrPath, filter: str = "", delete: bool = False
    ) -> None:
        """Copy files into another directory.

        Args:
            target: Target directory handle or path.
            filter: Copy only names containing this substring, ignoring case.
            delete: Remove each source file once it has been copied.

        Raises:
            DirectoryNotWritableError: If the target is not writable or a
                copy fails.
            DeleteFailedError: If a source file could not be removed.
        """
        target_path = self._resolve_target(target)
        files = self.list_files(filter)

        if not self.fs.is_writable(Path(target_path)):
            raise DirectoryNotWritableError(target_path)

        for name in files:
            source = Path(self._path) / name
            destination = Path(target_path) / name
            try:
                self.fs.copyfile(source, destination)
            except OSError as e:
                raise DirectoryNotWritableError(target_path) from e
            logger.debug("Copied %s to %s", source, destination)
            if delete:
                try:
                    self.fs.unlink(source)
                except OSError as e:
                    raise DeleteFailedError(str(source)) from e

    def rename_sequential(
        self, pad: int = 0, prefix: str = "", filter: str = "", start: int = 0
    ) -> None:
        """Rename files to a numbered sequence, in sorted name order.

        Each file becomes ``<prefix><number><ending>``. The number starts
        at ``start`` and is zero-padded to ``pad`` digits. The ending is
        everything from the first "." of the original name, lowercased,
        so "Archive.TAR.gz" keeps ".tar.gz".

        Args:
            pad: Minimum number of digits.
            prefix: Text placed before the number.
            filter: Rename only names containing this substring, ignoring case.
            start: First number of the sequence.

        Raises:
            DirectoryNotWritableError: On the first rename that fails.

        Example:
            ``b.jpg`` and ``a.jpg`` with pad=4 become ``0000.jpg`` (was
            a.jpg) and ``0001.jpg`` (was b.jpg).
        """
        for number, name in enumerate(self.list_files(filter), start):
            dot = name.find(".")
            ending = name[dot:].lower() if dot >= 0 else ""
            new_name = f"{prefix}{str(number).rjust(pad, '0')}{ending}"
            source = Path(self._path) / name
            try:
                self.fs.rename(source, Path(self._path) / new_name)
            except OSError as e:
                raise DirectoryNotWritableError(self._path) from e
            logger.debug("Renamed %s to %s", name, new_name)

    @property
    def path(self) -> str:
        """Canonical path, with trailing separator."""
        return self._path

    def get_path(self) -> str:
        """Canonical path, with trailing separator."""
        return self._path

    def is_writable(self) -> bool:
        return self.fs.is_writable(Path(self._path))

    def is_readable(self) -> bool:
        return self.fs.is_readable(Path(self._path))

    def __repr__(self) -> str:
        return f"Directory({self._path!r})"
