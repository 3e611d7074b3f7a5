"""Timeout constants for the dashboard.

All timeout and interval values for polling and notifications.
"""

from typing import Final

# ============================================================================
# Polling (float, in seconds)
# ============================================================================

# Delay between the completion of one poll and the start of the next.
POLL_INTERVAL: Final = 1.0

# None leaves failure detection to the transport.
REQUEST_TIMEOUT: Final = None

# ============================================================================
# Notifications (float, in seconds)
# ============================================================================

NOTIFICATION_TIMEOUT: Final = 10.0

__all__ = [
    "NOTIFICATION_TIMEOUT",
    "POLL_INTERVAL",
    "REQUEST_TIMEOUT",
]
