"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from panmon.constants.defaults import ENDPOINT_DEFAULT
from panmon.constants.limits import POLL_INTERVAL_MIN
from panmon.constants.timeouts import (
    NOTIFICATION_TIMEOUT,
    POLL_INTERVAL,
    REQUEST_TIMEOUT,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    endpoint: str = ENDPOINT_DEFAULT
    poll_interval: float = Field(default=POLL_INTERVAL, ge=POLL_INTERVAL_MIN)  # seconds
    notification_timeout: float = Field(default=NOTIFICATION_TIMEOUT, gt=0)
    request_timeout: float | None = Field(default=REQUEST_TIMEOUT, gt=0)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
