"""Tests for config module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from filekit.config import CONFIG_DIR, ConfigManager, Settings


class TestSettings:
    """Tests for Settings model."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = Settings()
        assert settings.dir_mode == 0o770
        assert settings.content_sniffing is False
        assert settings.log_level == "WARNING"

    def test_aliases(self) -> None:
        """Test camelCase aliases are accepted."""
        settings = Settings.model_validate({"dirMode": 0o755, "contentSniffing": True})
        assert settings.dir_mode == 0o755
        assert settings.content_sniffing is True

    def test_log_level_normalized(self) -> None:
        """Test log level is upper-cased."""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_invalid_mode(self) -> None:
        """Test modes beyond permission bits are rejected."""
        with pytest.raises(ValidationError):
            Settings(dir_mode=0o17777)


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_default_dir(self) -> None:
        """Test default configuration directory."""
        assert ConfigManager.create_default().config_dir == CONFIG_DIR

    def test_load_missing_returns_defaults(self, tmp_path: Path) -> None:
        """Test loading without a file returns defaults."""
        manager = ConfigManager.create(tmp_path / "nowhere")
        assert manager.load() == Settings()

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Test settings survive a save/load cycle."""
        manager = ConfigManager.create(tmp_path / "config")
        manager.save(Settings(dir_mode=0o700, content_sniffing=True, log_level="INFO"))

        loaded = manager.load()

        assert loaded.dir_mode == 0o700
        assert loaded.content_sniffing is True
        assert loaded.log_level == "INFO"

    def test_saved_with_aliases(self, temp_config_dir: Path) -> None:
        """Test the JSON file uses camelCase keys."""
        manager = ConfigManager(config_dir=temp_config_dir)
        manager.save(Settings())

        data = json.loads(manager.config_file.read_text())

        assert data == {"dirMode": 0o770, "contentSniffing": False, "logLevel": "WARNING"}

    def test_load_invalid_json(self, temp_config_dir: Path) -> None:
        """Test invalid JSON raises ValueError."""
        manager = ConfigManager(config_dir=temp_config_dir)
        manager.config_file.write_text("{not json")

        with pytest.raises(ValueError):
            manager.load()
