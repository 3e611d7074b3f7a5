"""Core domain models."""

from panmon.models.core.node_info import NodeInfo, WorkUnitInfo
from panmon.models.core.snapshot import StatusSnapshot

__all__ = ["NodeInfo", "StatusSnapshot", "WorkUnitInfo"]
