"""Status poller - keeps a local mirror of remote cluster state.

The poller owns the :class:`ViewModel`. Each cycle fetches one snapshot,
reconciles it into the view-model and emits a notification per appended
log entry. The next cycle starts ``interval`` seconds after the previous one
settles, so at most one request is ever in flight.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from contextlib import suppress
from typing import Any, Protocol

from panmon.constants.enums import ClusterStatus, PollOutcome, Severity
from panmon.constants.limits import MAX_LOG_BATCH
from panmon.constants.timeouts import NOTIFICATION_TIMEOUT, POLL_INTERVAL
from panmon.constants.values import (
    NOTIFICATION_ICONS,
    STATUS_COLOR_DEFAULT,
    STATUS_COLORS,
)
from panmon.controllers.status.fetchers import StatusFetchError
from panmon.controllers.status.parsers import SnapshotParser
from panmon.models.core.snapshot import StatusSnapshot
from panmon.models.events.notification import Notification
from panmon.models.state.view_model import ViewModel

logger = logging.getLogger(__name__)

StateListener = Callable[[ViewModel], None]
NotificationListener = Callable[[Notification], None]


class SupportsFetch(Protocol):
    """Anything with an async ``fetch()`` returning a decoded status payload."""

    async def fetch(self) -> Any: ...


def status_color(status: str) -> str:
    """Map a cluster status string to its palette, idle when unrecognized."""
    return STATUS_COLORS.get(ClusterStatus.from_value(status), STATUS_COLOR_DEFAULT)


class StatusPoller:
    """Polls the status endpoint and reconciles results into a ViewModel."""

    def __init__(
        self,
        fetcher: SupportsFetch,
        *,
        interval: float = POLL_INTERVAL,
        notification_timeout: float = NOTIFICATION_TIMEOUT,
        view_model: ViewModel | None = None,
        parser: SnapshotParser | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._parser = parser or SnapshotParser()
        self._interval = interval
        self._notification_timeout = notification_timeout
        self._view_model = view_model or ViewModel()
        self._state_listeners: list[StateListener] = []
        self._notification_listeners: list[NotificationListener] = []
        self._lock = asyncio.Lock()
        self._task: asyncio.Task[None] | None = None

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def view_model(self) -> ViewModel:
        return self._view_model

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def in_flight(self) -> bool:
        return self._lock.locked()

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def add_state_listener(self, listener: StateListener) -> Callable[[], None]:
        """Subscribe to view-model changes; returns an unsubscribe callable."""
        self._state_listeners.append(listener)
        return lambda: self._remove(self._state_listeners, listener)

    def add_notification_listener(
        self, listener: NotificationListener
    ) -> Callable[[], None]:
        """Subscribe to warning/error notifications; returns an unsubscribe callable."""
        self._notification_listeners.append(listener)
        return lambda: self._remove(self._notification_listeners, listener)

    @staticmethod
    def _remove(listeners: list[Any], listener: Any) -> None:
        with suppress(ValueError):
            listeners.remove(listener)

    def _dispatch(self, listeners: list[Any], value: Any) -> None:
        for listener in list(listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("Listener %r failed", listener)

    def _state_changed(self) -> None:
        self._dispatch(self._state_listeners, self._view_model)

    # =========================================================================
    # Log entries
    # =========================================================================

    def _append(self, severity: Severity, message: str) -> None:
        target = (
            self._view_model.warnings
            if severity is Severity.WARNING
            else self._view_model.errors
        )
        target.append(message)
        self._dispatch(
            self._notification_listeners,
            Notification(
                severity=severity,
                message=message,
                icon=NOTIFICATION_ICONS[severity],
                timeout=self._notification_timeout,
            ),
        )

    def record_warning(self, message: str) -> None:
        self._append(Severity.WARNING, message)
        self._state_changed()

    def record_error(self, message: str) -> None:
        self._append(Severity.ERROR, message)
        self._state_changed()

    def _append_batch(self, severity: Severity, messages: list[str]) -> None:
        if len(messages) > MAX_LOG_BATCH:
            logger.debug(
                "Dropping %d %s entries beyond batch limit %d",
                len(messages) - MAX_LOG_BATCH,
                severity.value,
                MAX_LOG_BATCH,
            )
        for message in messages[:MAX_LOG_BATCH]:
            self._append(severity, message)

    # =========================================================================
    # Reconciliation
    # =========================================================================

    def apply_snapshot(self, snapshot: StatusSnapshot) -> None:
        """Merge a usable snapshot into the view-model."""
        vm = self._view_model
        if snapshot.warnings is not None:
            self._append_batch(Severity.WARNING, snapshot.warnings)
        if snapshot.errors is not None:
            self._append_batch(Severity.ERROR, snapshot.errors)
        if snapshot.status is not None:
            vm.status = snapshot.status
            vm.status_color = status_color(snapshot.status)
        if snapshot.nodes is not None:
            vm.nodes = list(snapshot.nodes)
        if snapshot.work_units is not None:
            vm.work_units = list(snapshot.work_units)

    def apply_failure(self, message: str) -> None:
        """Downgrade to OFFLINE and record ``message`` unless it repeats the last error."""
        vm = self._view_model
        vm.status = ClusterStatus.OFFLINE.value
        vm.status_color = status_color(vm.status)
        if vm.last_error != message:
            self._append(Severity.ERROR, message)

    # =========================================================================
    # Polling
    # =========================================================================

    async def poll(self) -> PollOutcome:
        """Run one fetch/reconcile cycle.

        Cycles are serialized on one lock, so a caller arriving while a
        request is outstanding waits for it to settle before fetching.
        """
        async with self._lock:
            try:
                payload = await self._fetcher.fetch()
            except StatusFetchError as exc:
                logger.warning("Status endpoint unreachable: %s", exc.message)
                self.apply_failure(exc.message)
                outcome = PollOutcome.OFFLINE
            else:
                snapshot = self._parser.parse(payload)
                if snapshot is None:
                    logger.debug("Status payload not ready, skipping reconciliation")
                    outcome = PollOutcome.NOT_READY
                else:
                    self.apply_snapshot(snapshot)
                    outcome = PollOutcome.UPDATED

        if outcome is not PollOutcome.NOT_READY:
            self._state_changed()
        return outcome

    async def poll_now(self) -> PollOutcome | None:
        """Poll immediately unless a cycle is already in flight."""
        if self._lock.locked():
            return None
        return await self.poll()

    async def run(self) -> None:
        """Poll forever, sleeping ``interval`` seconds after each cycle settles."""
        while True:
            try:
                await self.poll()
            except Exception:
                logger.exception("Poll cycle failed")
            await asyncio.sleep(self._interval)

    def start(self) -> asyncio.Task[None]:
        """Start :meth:`run` as a task on the running loop."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.run(), name="status-poller")
        return self._task

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with suppress(asyncio.CancelledError):
            await self._task
        self._task = None
