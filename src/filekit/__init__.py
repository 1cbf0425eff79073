"""Object-oriented handles on local directories and files."""

__version__ = "0.1.0"

from filekit.directory import Directory
from filekit.errors import (
    DeleteFailedError,
    DirectoryAlreadyExistsError,
    DirectoryNotFoundError,
    DirectoryNotReadableError,
    DirectoryNotWritableError,
    ErrorKind,
    FileMissingError,
    FileNotReadableError,
    FileNotWritableError,
    FilesystemError,
)
from filekit.file import File
from filekit.types import PathComponent

__all__ = [
    "__version__",
    "Directory",
    "File",
    "PathComponent",
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
