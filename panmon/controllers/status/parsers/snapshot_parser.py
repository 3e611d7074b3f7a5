"""Snapshot parser - turns a raw status payload into a StatusSnapshot."""

from __future__ import annotations

import logging
from typing import Any

from panmon.controllers.status.parsers.node_parser import NodeParser
from panmon.models.core.snapshot import StatusSnapshot

logger = logging.getLogger(__name__)


class SnapshotParser:
    """Parses status payloads permissively.

    Missing or malformed arrays come back as ``None`` so reconciliation can
    leave those sections untouched.
    """

    def __init__(self, node_parser: NodeParser | None = None) -> None:
        self._node_parser = node_parser or NodeParser()

    @staticmethod
    def is_ready(payload: Any) -> bool:
        """Return True when the payload passes the server readiness gate."""
        return isinstance(payload, dict) and payload.get("WorkUnits") is not None

    @staticmethod
    def _messages(value: Any) -> list[str] | None:
        if not isinstance(value, list):
            return None
        return [str(item) for item in value]

    def parse(self, payload: Any) -> StatusSnapshot | None:
        """Parse a payload, returning None when the server is not ready yet."""
        if not self.is_ready(payload):
            return None

        clients = payload.get("Clients")
        work_units = payload.get("WorkUnits")
        status = payload.get("Status")
        return StatusSnapshot(
            status=None if status is None else str(status),
            warnings=self._messages(payload.get("Warnings")),
            errors=self._messages(payload.get("Errors")),
            nodes=(
                self._node_parser.parse_nodes(clients)
                if isinstance(clients, list)
                else None
            ),
            work_units=(
                self._node_parser.parse_work_units(work_units)
                if isinstance(work_units, list)
                else None
            ),
        )
