"""Dashboard screen - cluster status, node table and warning/error logs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Collapsible, DataTable, Footer, Header, Static

from panmon.constants.enums import Severity
from panmon.controllers.status.poller import StatusPoller
from panmon.keyboard.dashboard import DASHBOARD_BINDINGS
from panmon.models.events.notification import Notification
from panmon.models.state.view_model import ViewModel
from panmon.screens.dashboard.config import (
    ERRORS_LOG_ID,
    ERRORS_PANEL_ID,
    NODE_TABLE_COLUMNS,
    NODES_TABLE_ID,
    STATUS_BAR_ID,
    WARNINGS_LOG_ID,
    WARNINGS_PANEL_ID,
    WORK_UNIT_TABLE_COLUMNS,
    WORK_UNITS_TABLE_ID,
)
from panmon.screens.dashboard.presenter import DashboardPresenter

logger = logging.getLogger(__name__)


# =============================================================================
# Messages
# =============================================================================


class StatusUpdated(Message):
    """Message indicating the poller changed the view-model."""


class NotificationRaised(Message):
    """Message carrying one warning/error notification."""

    def __init__(self, notification: Notification) -> None:
        super().__init__()
        self.notification = notification


_PANELS: dict[Severity, tuple[str, str]] = {
    Severity.WARNING: (WARNINGS_PANEL_ID, WARNINGS_LOG_ID),
    Severity.ERROR: (ERRORS_PANEL_ID, ERRORS_LOG_ID),
}


class DashboardScreen(Screen[None]):
    """Main screen bound to a :class:`StatusPoller`."""

    BINDINGS: list[Binding] = DASHBOARD_BINDINGS

    def __init__(self, poller: StatusPoller) -> None:
        super().__init__()
        self.presenter = DashboardPresenter(poller)
        self._unsubscribe: list[Callable[[], None]] = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id=STATUS_BAR_ID)
        with Horizontal(id="tables-row"):
            with Vertical(classes="table-panel"):
                yield Static("Nodes", classes="panel-title")
                yield DataTable(id=NODES_TABLE_ID, zebra_stripes=True, cursor_type="row")
            with Vertical(classes="table-panel"):
                yield Static("Work units", classes="panel-title")
                yield DataTable(
                    id=WORK_UNITS_TABLE_ID, zebra_stripes=True, cursor_type="row"
                )
        for severity, (panel_id, log_id) in _PANELS.items():
            with Collapsible(
                title=self.presenter.log_title(severity),
                collapsed=self.presenter.is_collapsed(severity),
                id=panel_id,
            ):
                yield Static("", id=log_id, markup=False)
        yield Footer()

    def on_mount(self) -> None:
        for table_id, columns in (
            (NODES_TABLE_ID, NODE_TABLE_COLUMNS),
            (WORK_UNITS_TABLE_ID, WORK_UNIT_TABLE_COLUMNS),
        ):
            table = self.query_one(f"#{table_id}", DataTable)
            for label, width in columns:
                table.add_column(label, width=width)

        poller = self.presenter.poller
        self._unsubscribe = [
            poller.add_state_listener(self._on_state_changed),
            poller.add_notification_listener(self._on_notification),
        ]
        self.refresh_view()
        self.run_worker(poller.run(), name="status-poller", group="poller", exclusive=True)

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []

    # =========================================================================
    # Poller callbacks
    # =========================================================================

    def _on_state_changed(self, _: ViewModel) -> None:
        self.post_message(StatusUpdated())

    def _on_notification(self, notification: Notification) -> None:
        self.post_message(NotificationRaised(notification))

    def on_status_updated(self, _: StatusUpdated) -> None:
        self.refresh_view()

    def on_notification_raised(self, message: NotificationRaised) -> None:
        notification = message.notification
        self.app.notify(
            self.presenter.notification_markup(notification),
            severity=notification.severity.value,
            timeout=notification.timeout,
        )

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh_view(self) -> None:
        """Redraw every widget from the current view-model."""
        try:
            self.query_one(f"#{STATUS_BAR_ID}", Static).update(
                self.presenter.status_text()
            )
            self._fill_table(NODES_TABLE_ID, self.presenter.node_rows())
            self._fill_table(WORK_UNITS_TABLE_ID, self.presenter.work_unit_rows())
            for severity, (panel_id, log_id) in _PANELS.items():
                self.query_one(f"#{panel_id}", Collapsible).title = (
                    self.presenter.log_title(severity)
                )
                self.query_one(f"#{log_id}", Static).update(
                    self.presenter.log_text(severity)
                )
        except NoMatches:
            logger.debug("Dashboard widgets not mounted yet, skipping redraw")

    def _fill_table(self, table_id: str, rows: list[tuple]) -> None:
        table = self.query_one(f"#{table_id}", DataTable)
        table.clear()
        for row in rows:
            table.add_row(*row)

    # =========================================================================
    # Actions
    # =========================================================================

    def _toggle_panel(self, severity: Severity) -> None:
        collapsed = self.presenter.toggle(severity)
        panel_id, _ = _PANELS[severity]
        with suppress(NoMatches):
            self.query_one(f"#{panel_id}", Collapsible).collapsed = collapsed

    def action_toggle_warnings(self) -> None:
        """Expand or collapse the warnings panel."""
        self._toggle_panel(Severity.WARNING)

    def action_toggle_errors(self) -> None:
        """Expand or collapse the errors panel."""
        self._toggle_panel(Severity.ERROR)

    def action_refresh(self) -> None:
        """Poll now unless a request is already in flight."""
        poller = self.presenter.poller
        if poller.in_flight:
            self.notify("Refresh already in progress", severity="information")
            return
        self.run_worker(poller.poll_now(), name="status-refresh", group="refresh")
