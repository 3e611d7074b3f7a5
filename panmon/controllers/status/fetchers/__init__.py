"""Fetchers for the status controller."""

from panmon.controllers.status.fetchers.status_fetcher import (
    StatusFetcher,
    StatusFetchError,
)

__all__ = ["StatusFetchError", "StatusFetcher"]
