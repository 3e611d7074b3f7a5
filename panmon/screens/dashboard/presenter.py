"""Dashboard presenter - turns the poller's view-model into display values."""

from __future__ import annotations

from rich.markup import escape
from rich.text import Text

from panmon.constants.enums import Severity
from panmon.constants.values import NOTIFICATION_ICONS
from panmon.controllers.status.poller import StatusPoller
from panmon.models.events.notification import Notification
from panmon.models.state.view_model import ViewModel
from panmon.screens.dashboard.config import (
    EMPTY_LOG_TEXT,
    ERRORS_TITLE,
    RUNNING_MARKER,
    WARNINGS_TITLE,
)


class DashboardPresenter:
    """Presenter for DashboardScreen - formatting and panel state."""

    def __init__(self, poller: StatusPoller) -> None:
        self._poller = poller
        self._collapsed: dict[Severity, bool] = {
            Severity.WARNING: True,
            Severity.ERROR: True,
        }

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def poller(self) -> StatusPoller:
        return self._poller

    @property
    def view_model(self) -> ViewModel:
        return self._poller.view_model

    # =========================================================================
    # Panel state
    # =========================================================================

    def is_collapsed(self, severity: Severity) -> bool:
        return self._collapsed[severity]

    def toggle(self, severity: Severity) -> bool:
        """Flip a log panel between collapsed and expanded; returns the new state."""
        self._collapsed[severity] = not self._collapsed[severity]
        return self._collapsed[severity]

    # =========================================================================
    # Formatting
    # =========================================================================

    def status_text(self) -> Text:
        vm = self.view_model
        text = Text(f" {vm.status} ", style=vm.status_color)
        text.append(
            f"  nodes {len(vm.nodes)} ({vm.running_nodes} running)"
            f"  work units {len(vm.work_units)}"
        )
        return text

    def node_rows(self) -> list[tuple[Text, ...]]:
        rows = []
        for node in self.view_model.nodes:
            rows.append(
                (
                    Text(str(node.id)),
                    Text(str(node.thread_count)),
                    Text(node.status, style=node.status_color),
                    Text(node.load_metric),
                    Text(RUNNING_MARKER if node.is_running else "", style=node.status_color),
                )
            )
        return rows

    def work_unit_rows(self) -> list[tuple[str, ...]]:
        return [
            (
                "-" if unit.client_id is None else str(unit.client_id),
                str(unit.thread),
                unit.status,
                str(unit.attempt),
            )
            for unit in self.view_model.work_units
        ]

    def log_title(self, severity: Severity) -> str:
        vm = self.view_model
        if severity is Severity.WARNING:
            return f"{WARNINGS_TITLE} ({vm.warnings_count})"
        return f"{ERRORS_TITLE} ({vm.errors_count})"

    def log_text(self, severity: Severity) -> Text:
        vm = self.view_model
        entries = vm.warnings if severity is Severity.WARNING else vm.errors
        if not entries:
            return Text(EMPTY_LOG_TEXT, style="dim")
        return Text("\n".join(entries))

    @staticmethod
    def notification_markup(notification: Notification) -> str:
        """Render a notification as markup, escaping the server-provided text."""
        icon = notification.icon or NOTIFICATION_ICONS[notification.severity]
        return f"{icon} {escape(notification.message)}"
