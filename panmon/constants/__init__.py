"""Constants module for the dashboard.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants, palettes and lookup tables
- timeouts.py: Poll and notification intervals (seconds)
- limits.py: Limit values
- defaults.py: Default values for settings
"""

from panmon.constants.defaults import ENDPOINT_DEFAULT
from panmon.constants.enums import (
    ClusterStatus,
    NodeState,
    PollOutcome,
    Severity,
)
from panmon.constants.limits import MAX_LOG_BATCH
from panmon.constants.timeouts import NOTIFICATION_TIMEOUT, POLL_INTERVAL
from panmon.constants.values import (
    APP_TITLE,
    STATUS_COLORS,
    STATUS_PLACEHOLDER,
)

__all__ = [
    "APP_TITLE",
    "ENDPOINT_DEFAULT",
    "MAX_LOG_BATCH",
    "NOTIFICATION_TIMEOUT",
    "POLL_INTERVAL",
    "STATUS_COLORS",
    "STATUS_PLACEHOLDER",
    "ClusterStatus",
    "NodeState",
    "PollOutcome",
    "Severity",
]
