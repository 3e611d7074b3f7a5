"""Node parser - parses client and work-unit entries into structured models."""

from __future__ import annotations

import logging
from typing import Any

from panmon.constants.enums import NodeState
from panmon.constants.values import (
    LOAD_METRIC_DEFAULT,
    NODE_STATUS_COLOR_DEFAULT,
    NODE_STATUS_COLORS,
)
from panmon.models.core.node_info import NodeInfo, WorkUnitInfo

logger = logging.getLogger(__name__)


def _as_int(value: Any, default: int | None = None) -> int | None:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class NodeParser:
    """Parses raw ``Clients`` and ``WorkUnits`` entries."""

    @staticmethod
    def status_color(status: str) -> str:
        """Map a node status to its display color, neutral when unrecognized."""
        return NODE_STATUS_COLORS.get(status, NODE_STATUS_COLOR_DEFAULT)

    def parse_node(self, entry: Any) -> NodeInfo | None:
        """Parse a single ``Clients`` entry.

        Args:
            entry: Raw client dictionary from the payload

        Returns:
            NodeInfo, or None when the entry has no usable id.
        """
        if not isinstance(entry, dict):
            return None
        node_id = _as_int(entry.get("Id"))
        if node_id is None:
            logger.debug("Skipping client entry without id: %r", entry)
            return None

        status = str(entry.get("Status") or "")
        return NodeInfo(
            id=node_id,
            thread_count=max(0, _as_int(entry.get("Threads"), 0) or 0),
            status=status,
            status_color=self.status_color(status),
            is_running=status == NodeState.RUNNING.value,
            load_metric=LOAD_METRIC_DEFAULT,
        )

    def parse_nodes(self, entries: list[Any]) -> list[NodeInfo]:
        nodes = []
        for entry in entries:
            node = self.parse_node(entry)
            if node is not None:
                nodes.append(node)
        return nodes

    def parse_work_unit(self, entry: Any) -> WorkUnitInfo | None:
        """Parse a single ``WorkUnits`` entry."""
        if not isinstance(entry, dict):
            return None
        client = entry.get("Client")
        client_id = _as_int(client.get("ID")) if isinstance(client, dict) else None
        return WorkUnitInfo(
            client_id=client_id,
            thread=_as_int(entry.get("Thread"), 0) or 0,
            status=str(entry.get("Status") or "unknown"),
            attempt=_as_int(entry.get("Attempt"), 0) or 0,
        )

    def parse_work_units(self, entries: list[Any]) -> list[WorkUnitInfo]:
        units = []
        for entry in entries:
            unit = self.parse_work_unit(entry)
            if unit is not None:
                units.append(unit)
        return units
