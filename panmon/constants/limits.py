"""Limit constants for the dashboard."""

from typing import Final

# ============================================================================
# Reconciliation limits
# ============================================================================

# Entries applied per warning/error batch; the remainder of a batch is dropped.
# TODO: confirm with the server team whether a per-response cap belongs in /api.
MAX_LOG_BATCH: Final = 31

# ============================================================================
# Validation limits
# ============================================================================

POLL_INTERVAL_MIN: Final = 0.1

__all__ = [
    "MAX_LOG_BATCH",
    "POLL_INTERVAL_MIN",
]
