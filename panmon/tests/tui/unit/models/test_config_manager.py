"""Tests for settings loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from panmon.constants.defaults import ENDPOINT_DEFAULT
from panmon.models.state.app_settings import AppSettings, ConfigError
from panmon.models.state.config_manager import ConfigLoadError, ConfigManager


class TestAppSettings:
    """Tests for AppSettings defaults and validation."""

    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.endpoint == ENDPOINT_DEFAULT
        assert settings.poll_interval == 1.0
        assert settings.notification_timeout == 10.0
        assert settings.request_timeout is None

    def test_rejects_tiny_interval(self) -> None:
        with pytest.raises(ValueError):
            AppSettings(poll_interval=0.0)

    def test_config_load_error_is_config_error(self) -> None:
        assert issubclass(ConfigLoadError, ConfigError)


class TestConfigManager:
    """Tests for ConfigManager.load."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        settings = ConfigManager.load(tmp_path / "absent.json")
        assert settings == AppSettings()

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "panmon.json"
        path.write_text(
            json.dumps({"endpoint": "http://node:9000/api", "request_timeout": 2.5}),
            encoding="utf-8",
        )

        settings = ConfigManager.load(path)

        assert settings.endpoint == "http://node:9000/api"
        assert settings.request_timeout == 2.5

    def test_overrides_win_and_none_is_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "panmon.json"
        path.write_text(json.dumps({"endpoint": "http://a/api", "poll_interval": 2}))

        settings = ConfigManager.load(
            path, overrides={"endpoint": "http://b/api", "poll_interval": None}
        )

        assert settings.endpoint == "http://b/api"
        assert settings.poll_interval == 2.0

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "panmon.json"
        path.write_text("{not json")

        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path)

    def test_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "panmon.json"
        path.write_text("[]")

        with pytest.raises(ConfigLoadError, match="JSON object"):
            ConfigManager.load(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="Invalid settings"):
            ConfigManager.load(tmp_path / "absent.json", overrides={"poll_interval": -1})

    def test_default_path(self) -> None:
        assert ConfigManager.default_path().name == "panmon.json"
