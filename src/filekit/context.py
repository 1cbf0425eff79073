"""Application context for dependency injection.

This module separates object creation from object use: CLI commands get
their handles from an AppContext, and tests construct one directly with
test doubles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from filekit.config import ConfigManager, Settings
from filekit.directory import Directory
from filekit.file import File
from filekit.protocols import ContentSniffer, FileSystem, ImageInspector
from filekit.types import StrPath


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from filekit.filesystem import RealFileSystem
    return RealFileSystem()


def _default_images() -> ImageInspector:
    """Create the default image inspector."""
    from filekit.mime import PillowImageInspector
    return PillowImageInspector()


@dataclass
class AppContext:
    """Container for the collaborators shared by all handles.

    Dependencies are typed using Protocol interfaces, not concrete classes,
    so test doubles can be injected without inheritance.
    """

    config: ConfigManager
    settings: Settings = field(default_factory=Settings)
    filesystem: FileSystem = field(default_factory=_default_filesystem)
    images: ImageInspector = field(default_factory=_default_images)
    sniffer: ContentSniffer | None = None

    def open_file(self, path: StrPath) -> File:
        """File handle wired to this context."""
        return File(path, filesystem=self.filesystem, sniffer=self.sniffer, images=self.images)

    def open_directory(self, path: StrPath) -> Directory:
        """Directory handle wired to this context.

        Raises:
            DirectoryNotFoundError: If path is not an existing directory.
        """
        return Directory(path, filesystem=self.filesystem)

    def make_directory(self, path: StrPath) -> Directory:
        """Create a directory recursively with the configured mode."""
        return Directory.create_recursive(
            path, mode=self.settings.dir_mode, filesystem=self.filesystem
        )


def create_context(config_dir: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        config_dir: Override configuration directory (for testing).

    Returns:
        Configured AppContext with all dependencies.

    Raises:
        ImportError: If content sniffing is enabled but libmagic is missing.
    """
    from filekit.filesystem import RealFileSystem
    from filekit.mime import LibmagicSniffer, PillowImageInspector

    config = ConfigManager.create(config_dir) if config_dir else ConfigManager.create_default()
    settings = config.load()
    sniffer = LibmagicSniffer() if settings.content_sniffing else None

    return AppContext(
        config=config,
        settings=settings,
        filesystem=RealFileSystem(),
        images=PillowImageInspector(),
        sniffer=sniffer,
    )
