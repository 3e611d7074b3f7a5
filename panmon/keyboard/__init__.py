"""Keyboard bindings for the dashboard TUI."""

from panmon.keyboard.app import APP_BINDINGS
from panmon.keyboard.dashboard import DASHBOARD_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "DASHBOARD_BINDINGS",
]
