"""MIME-type detection helpers.

Detection has three layers, tried in order by ``File.get_mime_type()``:

1. A content sniffer (libmagic through python-magic), when configured.
2. An image inspector (Pillow), which reports the native MIME type of
   any image it can open regardless of file extension.
3. The static extension table below, keyed by the lowercase suffix after
   the last ".".
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

__all__ = [
    "EXTENSION_MIME_TYPES",
    "LibmagicSniffer",
    "PillowImageInspector",
    "lookup_extension",
]

EXTENSION_MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "txt": "text/plain",
        "htm": "text/html",
        "html": "text/html",
        "php": "text/html",
        "css": "text/css",
        "js": "application/javascript",
        "json": "application/json",
        "xml": "application/xml",
        "swf": "application/x-shockwave-flash",
        "flv": "video/x-flv",
        # images
        "png": "image/png",
        "jpe": "image/jpeg",
        "jpeg": "image/jpeg",
        "jpg": "image/jpeg",
        "gif": "image/gif",
        "bmp": "image/bmp",
        "ico": "image/vnd.microsoft.icon",
        "tiff": "image/tiff",
        "tif": "image/tiff",
        "svg": "image/svg+xml",
        "svgz": "image/svg+xml",
        # archives
        "zip": "application/zip",
        "rar": "application/x-rar-compressed",
        "exe": "application/x-msdownload",
        "msi": "application/x-msdownload",
        "cab": "application/vnd.ms-cab-compressed",
        # audio/video
        "mp3": "audio/mpeg",
        "qt": "video/quicktime",
        "mov": "video/quicktime",
        # adobe
        "pdf": "application/pdf",
        "psd": "image/vnd.adobe.photoshop",
        "ai": "application/postscript",
        "eps": "application/postscript",
        "ps": "application/postscript",
        # ms office
        "doc": "application/msword",
        "rtf": "application/rtf",
        "xls": "application/vnd.ms-excel",
        "ppt": "application/vnd.ms-powerpoint",
        # open office
        "odt": "application/vnd.oasis.opendocument.text",
        "ods": "application/vnd.oasis.opendocument.spreadsheet",
    }
)


def lookup_extension(path: str) -> str | None:
    """Look up a MIME type by the suffix after the last "." in ``path``.

    Args:
        path: File path or name.

    Returns:
        The MIME type from the extension table, or None if the suffix is
        unknown or the path has no ".".

    Example:
        >>> lookup_extension("/tmp/report.PDF")
        'application/pdf'
    """
    if "." not in path:
        return None
    ext = path.rsplit(".", 1)[1].lower()
    return EXTENSION_MIME_TYPES.get(ext)


class LibmagicSniffer:
    """Content sniffer backed by libmagic.

    Satisfies the ContentSniffer protocol structurally. Requires the
    ``python-magic`` distribution and the system libmagic library.
    """

    def __init__(self) -> None:
        """Initialize sniffer.

        Raises:
            ImportError: If python-magic or libmagic is not installed.
        """
        import magic

        self._mime = magic.Magic(mime=True)
        self._mime_with_encoding = magic.Magic(mime=True, mime_encoding=True)
        self._encoding = magic.Magic(mime_encoding=True)

    def mime_type(self, path: Path, with_encoding: bool = False) -> str | None:
        """Detect the MIME type of a file from its content."""
        detector = self._mime_with_encoding if with_encoding else self._mime
        return detector.from_file(os.fspath(path)) or None

    def encoding(self, path: Path) -> str | None:
        """Detect the character encoding of a file from its content."""
        return self._encoding.from_file(os.fspath(path)) or None


class PillowImageInspector:
    """Image header reader backed by Pillow.

    Satisfies the ImageInspector protocol structurally. Only the header is
    read; pixel data is never decoded.
    """

    def dimensions(self, path: Path) -> tuple[int, int] | None:
        """Width and height of an image, or None if Pillow cannot open it.

        Images above Pillow's decompression bomb limit are refused as well.
        """
        try:
            with Image.open(path) as image:
                return image.size
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            logger.debug("Not an image: %s (%s)", path, e)
            return None

    def mime_type(self, path: Path) -> str | None:
        """MIME type of the image format, or None if Pillow cannot open it."""
        try:
            with Image.open(path) as image:
                return image.get_format_mimetype()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            logger.debug("Not an image: %s (%s)", path, e)
            return None
