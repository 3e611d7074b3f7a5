"""Settings loading.

Settings come from an optional JSON file; command-line overrides are applied
on top by the caller. Nothing is written back.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from panmon.constants.defaults import CONFIG_FILENAME_DEFAULT
from panmon.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads :class:`AppSettings` from disk."""

    @staticmethod
    def default_path() -> Path:
        return Path.home() / ".config" / "panmon" / CONFIG_FILENAME_DEFAULT

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> AppSettings:
        """Load settings from ``path`` and apply non-None ``overrides``.

        A missing file yields defaults. An unreadable or invalid file raises
        :class:`ConfigLoadError`.
        """
        config_path = path or cls.default_path()
        data: dict[str, Any] = {}
        if config_path.exists():
            try:
                raw = json.loads(config_path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as exc:
                raise ConfigLoadError(f"Cannot read {config_path}: {exc}") from exc
            if not isinstance(raw, dict):
                raise ConfigLoadError(f"{config_path} must contain a JSON object")
            data.update(raw)
        else:
            logger.debug("No settings file at %s, using defaults", config_path)

        data.update({k: v for k, v in (overrides or {}).items() if v is not None})
        try:
            return AppSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings: {exc}") from exc


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
