"""Node and work-unit models."""

from pydantic import BaseModel

from panmon.constants.values import LOAD_METRIC_DEFAULT, NODE_STATUS_COLOR_DEFAULT


class NodeInfo(BaseModel):
    """One connected client node as shown in the node table."""

    id: int
    thread_count: int = 0
    status: str
    status_color: str = NODE_STATUS_COLOR_DEFAULT
    is_running: bool = False
    load_metric: str = LOAD_METRIC_DEFAULT


class WorkUnitInfo(BaseModel):
    """Work unit assignment reported by the server."""

    client_id: int | None = None
    thread: int = 0
    status: str = "unknown"
    attempt: int = 0
