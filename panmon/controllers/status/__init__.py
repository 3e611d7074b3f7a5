"""Status domain: fetching, parsing and reconciling server status."""

from panmon.controllers.status.fetchers import StatusFetcher, StatusFetchError
from panmon.controllers.status.parsers import NodeParser, SnapshotParser
from panmon.controllers.status.poller import StatusPoller, status_color

__all__ = [
    "NodeParser",
    "SnapshotParser",
    "StatusFetchError",
    "StatusFetcher",
    "StatusPoller",
    "status_color",
]
