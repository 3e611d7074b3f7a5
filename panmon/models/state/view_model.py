"""Mutable view-model mirrored from the status endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field

from panmon.constants.enums import ClusterStatus
from panmon.constants.values import STATUS_COLOR_DEFAULT, STATUS_PLACEHOLDER
from panmon.models.core.node_info import NodeInfo, WorkUnitInfo


@dataclass
class ViewModel:
    """What the dashboard should currently display.

    Owned and mutated by :class:`~panmon.controllers.status.poller.StatusPoller`;
    rendering code only reads it.
    """

    status: str = STATUS_PLACEHOLDER
    status_color: str = STATUS_COLOR_DEFAULT
    nodes: list[NodeInfo] = field(default_factory=list)
    work_units: list[WorkUnitInfo] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def warnings_count(self) -> int:
        return len(self.warnings)

    @property
    def errors_count(self) -> int:
        return len(self.errors)

    @property
    def cluster_status(self) -> ClusterStatus:
        return ClusterStatus.from_value(self.status)

    @property
    def last_error(self) -> str | None:
        return self.errors[-1] if self.errors else None

    @property
    def running_nodes(self) -> int:
        return sum(1 for node in self.nodes if node.is_running)
