"""Shared data types for filekit."""

from __future__ import annotations

import os
from enum import Enum
from typing import Union

__all__ = ["PathComponent", "StrPath"]

StrPath = Union[str, "os.PathLike[str]"]


class PathComponent(str, Enum):
    """Parts of a file path, as returned by ``File.get_path()``.

    Attributes:
        DIRNAME: Parent directory path ("." for a bare name).
        BASENAME: Final path segment.
        EXTENSION: Text after the last "." in the basename, "" if none.
        FILENAME: Basename without its extension.
    """

    DIRNAME = "dirname"
    BASENAME = "basename"
    EXTENSION = "extension"
    FILENAME = "filename"
