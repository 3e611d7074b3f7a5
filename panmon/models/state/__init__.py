"""Application state models."""

from panmon.models.state.app_settings import AppSettings, ConfigError, ConfigLoadError
from panmon.models.state.config_manager import ConfigManager
from panmon.models.state.view_model import ViewModel

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ViewModel",
]
