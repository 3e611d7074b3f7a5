"""Scalar constants for the dashboard.

All application-level constants with proper type hints using Final.
"""

from typing import Final

from panmon.constants.enums import ClusterStatus, NodeState, Severity

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Panchaea Monitor"
STATUS_PLACEHOLDER: Final = "..."

# ============================================================================
# Palettes (rich style strings)
# ============================================================================

PALETTE_IDLE: Final = "bold black on bright_yellow"
PALETTE_ACTIVE: Final = "bold black on bright_green"
PALETTE_ERROR: Final = "bold black on bright_red"
PALETTE_OFFLINE: Final = "bold white on grey37"

NODE_COLOR_NEUTRAL: Final = "yellow"
NODE_COLOR_ACTIVE: Final = "green"
NODE_COLOR_ALERT: Final = "red"

# ============================================================================
# Lookup tables
# ============================================================================

STATUS_COLORS: Final[dict[ClusterStatus, str]] = {
    ClusterStatus.FAILED: PALETTE_ERROR,
    ClusterStatus.RUNNING: PALETTE_ACTIVE,
    ClusterStatus.READY: PALETTE_IDLE,
    ClusterStatus.OFFLINE: PALETTE_OFFLINE,
}
STATUS_COLOR_DEFAULT: Final = PALETTE_IDLE

NODE_STATUS_COLORS: Final[dict[str, str]] = {
    NodeState.READY.value: NODE_COLOR_NEUTRAL,
    NodeState.RUNNING.value: NODE_COLOR_ACTIVE,
    NodeState.FAILED.value: NODE_COLOR_ALERT,
}
NODE_STATUS_COLOR_DEFAULT: Final = NODE_COLOR_NEUTRAL

# ============================================================================
# Notifications
# ============================================================================

NOTIFICATION_ICONS: Final[dict[Severity, str]] = {
    Severity.WARNING: "[yellow]✱[/yellow]",
    Severity.ERROR: "[red]✱[/red]",
}

# Load glyph rendered for every node until the server reports real load.
LOAD_METRIC_DEFAULT: Final = "▁"

__all__ = [
    "APP_TITLE",
    "LOAD_METRIC_DEFAULT",
    "NODE_COLOR_ACTIVE",
    "NODE_COLOR_ALERT",
    "NODE_COLOR_NEUTRAL",
    "NODE_STATUS_COLORS",
    "NODE_STATUS_COLOR_DEFAULT",
    "NOTIFICATION_ICONS",
    "PALETTE_ACTIVE",
    "PALETTE_ERROR",
    "PALETTE_IDLE",
    "PALETTE_OFFLINE",
    "STATUS_COLORS",
    "STATUS_COLOR_DEFAULT",
    "STATUS_PLACEHOLDER",
]
