"""Typed errors raised by directory and file handles."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ErrorKind",
    "FilesystemError",
    "DirectoryNotFoundError",
    "DirectoryAlreadyExistsError",
    "DirectoryNotWritableError",
    "DirectoryNotReadableError",
    "DeleteFailedError",
    "FileMissingError",
    "FileNotReadableError",
    "FileNotWritableError",
]


class ErrorKind(str, Enum):
    """Kind of filesystem failure."""

    DIRECTORY_NOT_FOUND = "directory_not_found"
    DIRECTORY_ALREADY_EXISTS = "directory_already_exists"
    DIRECTORY_NOT_WRITABLE = "directory_not_writable"
    DIRECTORY_NOT_READABLE = "directory_not_readable"
    DELETE_FAILED = "delete_failed"
    FILE_NOT_FOUND = "file_not_found"
    FILE_NOT_READABLE = "file_not_readable"
    FILE_NOT_WRITABLE = "file_not_writable"


class FilesystemError(Exception):
    """Base class for all handle errors.

    Attributes:
        kind: The failure kind, for callers that branch on a value.
        path: The path involved, when known.
    """

    kind: ErrorKind
    message = "Filesystem operation failed"

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        text = f"{self.message}: {path}" if path else self.message
        super().__init__(text)


class DirectoryNotFoundError(FilesystemError):
    kind = ErrorKind.DIRECTORY_NOT_FOUND
    message = "Directory does not exist"


class DirectoryAlreadyExistsError(FilesystemError):
    kind = ErrorKind.DIRECTORY_ALREADY_EXISTS
    message = "Directory already exists"


class DirectoryNotWritableError(FilesystemError):
    kind = ErrorKind.DIRECTORY_NOT_WRITABLE
    message = "Directory is not writable"


class DirectoryNotReadableError(FilesystemError):
    kind = ErrorKind.DIRECTORY_NOT_READABLE
    message = "Directory is not readable"


class DeleteFailedError(FilesystemError):
    kind = ErrorKind.DELETE_FAILED
    message = "Could not delete"


class FileMissingError(FilesystemError):
    """File does not exist.

    Named to avoid shadowing the builtin FileNotFoundError.
    """

    kind = ErrorKind.FILE_NOT_FOUND
    message = "File does not exist"


class FileNotReadableError(FilesystemError):
    kind = ErrorKind.FILE_NOT_READABLE
    message = "File is not readable"


class FileNotWritableError(FilesystemError):
    kind = ErrorKind.FILE_NOT_WRITABLE
    message = "File is not writable"
