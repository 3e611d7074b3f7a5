"""Parsers for the status controller."""

from panmon.controllers.status.parsers.node_parser import NodeParser
from panmon.controllers.status.parsers.snapshot_parser import SnapshotParser

__all__ = ["NodeParser", "SnapshotParser"]
