"""Shared test fixtures."""

from __future__ import annotations

import os
import struct
import zlib
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from PIL import Image

from filekit.config import ConfigManager
from filekit.context import AppContext


@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Path:
    """Create a temporary configuration directory."""
    config_dir = tmp_path / ".filekit"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def populated_dir(tmp_path: Path) -> Path:
    """Directory with files, a subdirectory tree and hidden entries.

    Layout::

        work/
            b.jpg, a.jpg, notes.TXT, .hidden_file
            sub/inner.txt
            sub/deeper/leaf.txt
            .git/config
    """
    root = tmp_path / "work"
    root.mkdir()
    (root / "b.jpg").write_bytes(b"bbb")
    (root / "a.jpg").write_bytes(b"aaa")
    (root / "notes.TXT").write_text("notes")
    (root / ".hidden_file").write_text("hidden")
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "sub" / "inner.txt").write_text("inner")
    (root / "sub" / "deeper" / "leaf.txt").write_text("leaf")
    (root / ".git").mkdir()
    (root / ".git" / "config").write_text("[core]")
    return root


@pytest.fixture
def jpeg_file(tmp_path: Path) -> Path:
    """A small valid JPEG saved under a misleading extension."""
    path = tmp_path / "photo.dat"
    Image.new("RGB", (4, 3), color=(200, 10, 10)).save(path, format="JPEG")
    return path


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A small valid PNG."""
    path = tmp_path / "image.png"
    Image.new("RGB", (2, 5)).save(path, format="PNG")
    return path


def _png_chunk(tag: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(tag + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", crc)


@pytest.fixture
def oversized_png(tmp_path: Path) -> Path:
    """A PNG header declaring 20000x20000 pixels, with no pixel data."""
    path = tmp_path / "big.png"
    header = struct.pack(">IIBBBBB", 20000, 20000, 8, 2, 0, 0, 0)
    path.write_bytes(
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", b"")
        + _png_chunk(b"IEND", b"")
    )
    return path


@pytest.fixture
def skip_if_root() -> None:
    """Skip permission tests when running as root (root bypasses mode bits)."""
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("permission bits are not enforced for root")


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    Every path looks like an existing, writable directory until a test
    says otherwise.
    """
    fs = MagicMock()
    fs.exists.return_value = True
    fs.is_dir.return_value = True
    fs.is_file.return_value = False
    fs.is_readable.return_value = True
    fs.is_writable.return_value = True
    fs.realpath.side_effect = lambda path: os.fspath(path)
    fs.list_entries.return_value = []
    return fs


# ============================================================================
# App Context Fixtures
# ============================================================================


@pytest.fixture
def app_context(temp_config_dir: Path) -> AppContext:
    """Real AppContext using a temporary config directory."""
    return AppContext(config=ConfigManager(config_dir=temp_config_dir))
