"""Tests for context module."""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from filekit.config import ConfigManager, Settings
from filekit.context import AppContext, create_context
from filekit.directory import Directory
from filekit.file import File


class TestAppContext:
    """Tests for AppContext dataclass."""

    def test_create_with_all_dependencies(self, temp_config_dir: Path) -> None:
        """Test creating context with all dependencies."""
        config = ConfigManager(config_dir=temp_config_dir)
        filesystem = MagicMock()
        images = MagicMock()
        sniffer = MagicMock()
        ctx = AppContext(
            config=config,
            settings=Settings(),
            filesystem=filesystem,
            images=images,
            sniffer=sniffer,
        )
        assert ctx.config is config
        assert ctx.filesystem is filesystem
        assert ctx.images is images
        assert ctx.sniffer is sniffer

    def test_defaults(self, app_context: AppContext) -> None:
        """Test context creates default collaborators if not provided."""
        from filekit.filesystem import RealFileSystem
        from filekit.mime import PillowImageInspector

        assert isinstance(app_context.filesystem, RealFileSystem)
        assert isinstance(app_context.images, PillowImageInspector)
        assert app_context.sniffer is None

    def test_open_file_wires_collaborators(self, temp_config_dir: Path) -> None:
        """Test file handles share the context's collaborators."""
        sniffer = MagicMock()
        ctx = AppContext(config=ConfigManager(config_dir=temp_config_dir), sniffer=sniffer)

        file = ctx.open_file("/some/file.txt")

        assert isinstance(file, File)
        assert file.fs is ctx.filesystem
        assert file.sniffer is sniffer
        assert file.images is ctx.images

    def test_open_directory(self, app_context: AppContext, tmp_path: Path) -> None:
        """Test directory handles share the context's filesystem."""
        directory = app_context.open_directory(tmp_path)
        assert isinstance(directory, Directory)
        assert directory.fs is app_context.filesystem

    def test_make_directory_uses_configured_mode(
        self, temp_config_dir: Path, tmp_path: Path
    ) -> None:
        """Test make_directory applies the configured mode."""
        ctx = AppContext(
            config=ConfigManager(config_dir=temp_config_dir),
            settings=Settings(dir_mode=0o700),
        )

        ctx.make_directory(tmp_path / "made")

        assert (tmp_path / "made").stat().st_mode & 0o077 == 0


class TestCreateContext:
    """Tests for create_context factory function."""

    def test_create_context_default(self, temp_config_dir: Path) -> None:
        """Test creating context without a config file."""
        ctx = create_context(config_dir=temp_config_dir)
        assert ctx.config.config_dir == temp_config_dir
        assert ctx.settings == Settings()
        assert ctx.sniffer is None

    def test_create_context_reads_settings(self, temp_config_dir: Path) -> None:
        """Test create_context loads the saved settings."""
        (temp_config_dir / "config.json").write_text(json.dumps({"dirMode": 0o750}))

        ctx = create_context(config_dir=temp_config_dir)

        assert ctx.settings.dir_mode == 0o750

    def test_create_context_with_sniffing(self, temp_config_dir: Path) -> None:
        """Test content sniffing builds a libmagic sniffer."""
        pytest.importorskip("magic")
        from filekit.mime import LibmagicSniffer

        (temp_config_dir / "config.json").write_text(json.dumps({"contentSniffing": True}))

        ctx = create_context(config_dir=temp_config_dir)

        assert isinstance(ctx.sniffer, LibmagicSniffer)
        assert os.fspath(ctx.config.config_file).endswith("config.json")
