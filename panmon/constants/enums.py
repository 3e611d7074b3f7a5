"""All enum definitions for the dashboard.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Status Enums
# =============================================================================

class ClusterStatus(Enum):
    """Cluster status values reported by the server.

    OFFLINE is synthesized locally when the status endpoint is unreachable.
    """

    READY = "READY"
    RUNNING = "RUNNING"
    FAILED = "FAILED"
    OFFLINE = "OFFLINE"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_value(cls, value: object) -> "ClusterStatus":
        """Resolve a raw status string, falling back to UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class NodeState(Enum):
    """Node (client) status values from the status endpoint."""

    READY = "ready"
    RUNNING = "running"
    FAILED = "failed"


class Severity(Enum):
    """Severity levels for log entries and notifications."""

    ERROR = "error"
    WARNING = "warning"


# =============================================================================
# Poll Outcome Enums
# =============================================================================

class PollOutcome(Enum):
    """Result of a single poll cycle."""

    UPDATED = "updated"
    NOT_READY = "not_ready"
    OFFLINE = "offline"


__all__ = [
    "ClusterStatus",
    "NodeState",
    "PollOutcome",
    "Severity",
]
