"""Dashboard screen package."""

from panmon.screens.dashboard.dashboard_screen import (
    DashboardScreen,
    NotificationRaised,
    StatusUpdated,
)
from panmon.screens.dashboard.presenter import DashboardPresenter

__all__ = [
    "DashboardPresenter",
    "DashboardScreen",
    "NotificationRaised",
    "StatusUpdated",
]
