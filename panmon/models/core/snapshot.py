"""Parsed status endpoint snapshot."""

from pydantic import BaseModel

from panmon.models.core.node_info import NodeInfo, WorkUnitInfo


class StatusSnapshot(BaseModel):
    """One usable payload returned by the status endpoint.

    ``None`` for any field means the section was missing or malformed and
    must be left untouched during reconciliation.
    """

    status: str | None = None
    warnings: list[str] | None = None
    errors: list[str] | None = None
    nodes: list[NodeInfo] | None = None
    work_units: list[WorkUnitInfo] | None = None
