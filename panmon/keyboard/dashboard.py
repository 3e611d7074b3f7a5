"""Dashboard screen keyboard bindings."""

from textual.binding import Binding

DASHBOARD_BINDINGS: list[Binding] = [
    Binding("r", "refresh", "Refresh"),
    Binding("w", "toggle_warnings", "Warnings"),
    Binding("e", "toggle_errors", "Errors"),
]

__all__ = [
    "DASHBOARD_BINDINGS",
]
