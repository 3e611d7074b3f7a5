"""Controllers module for the dashboard.

This module provides controllers for fetching and reconciling server status.
"""

from __future__ import annotations

from panmon.controllers.status import (
    NodeParser,
    SnapshotParser,
    StatusFetcher,
    StatusFetchError,
    StatusPoller,
)

__all__ = [
    "NodeParser",
    "SnapshotParser",
    "StatusFetchError",
    "StatusFetcher",
    "StatusPoller",
]
