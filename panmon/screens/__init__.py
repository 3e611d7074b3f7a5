"""Screens for the dashboard TUI."""

from panmon.screens.dashboard import DashboardScreen

__all__ = ["DashboardScreen"]
