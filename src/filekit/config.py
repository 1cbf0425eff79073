"""Persistent settings for the filekit command line."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from filekit.directory import DEFAULT_MODE

logger = logging.getLogger(__name__)

# Default configuration location
CONFIG_DIR = Path.home() / ".filekit"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """User settings stored in config.json."""

    model_config = ConfigDict(populate_by_name=True)

    dir_mode: int = Field(default=DEFAULT_MODE, alias="dirMode", ge=0, le=0o7777)
    content_sniffing: bool = Field(default=False, alias="contentSniffing")
    log_level: str = Field(default="WARNING", alias="logLevel")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class ConfigManager:
    """Loads and saves Settings as JSON."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize config manager.

        Args:
            config_dir: Directory holding config.json. Defaults to ~/.filekit.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.config_dir = config_dir or CONFIG_DIR
        self.config_file = self.config_dir / "config.json"

    @classmethod
    def create(cls, config_dir: Path) -> ConfigManager:
        """Create a config manager with a custom directory."""
        return cls(config_dir=config_dir)

    @classmethod
    def create_default(cls) -> ConfigManager:
        """Create a config manager using ~/.filekit."""
        return cls()

    def load(self) -> Settings:
        """Load settings, falling back to defaults when no file exists.

        Raises:
            ValueError: If the file is not valid JSON or fails validation.
        """
        if not self.config_file.exists():
            return Settings()
        data = json.loads(self.config_file.read_text())
        return Settings.model_validate(data)

    def save(self, settings: Settings) -> None:
        """Write settings, creating the config directory if needed."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        data = settings.model_dump(by_alias=True)
        self.config_file.write_text(json.dumps(data, indent=2))
        logger.debug("Saved settings to %s", self.config_file)
