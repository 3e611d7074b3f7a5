"""Tests for node parser."""

from __future__ import annotations

import pytest

from panmon.constants.values import (
    LOAD_METRIC_DEFAULT,
    NODE_COLOR_ACTIVE,
    NODE_COLOR_ALERT,
    NODE_COLOR_NEUTRAL,
)
from panmon.controllers.status.parsers.node_parser import NodeParser


class TestNodeParser:
    """Tests for NodeParser class."""

    @pytest.fixture
    def parser(self) -> NodeParser:
        """Create NodeParser instance."""
        return NodeParser()

    @pytest.mark.parametrize(
        ("status", "color", "running"),
        [
            ("ready", NODE_COLOR_NEUTRAL, False),
            ("running", NODE_COLOR_ACTIVE, True),
            ("failed", NODE_COLOR_ALERT, False),
            ("RUNNING", NODE_COLOR_NEUTRAL, False),
            ("", NODE_COLOR_NEUTRAL, False),
        ],
    )
    def test_parse_node_status(
        self, parser: NodeParser, status: str, color: str, running: bool
    ) -> None:
        node = parser.parse_node({"Id": 3, "Threads": 8, "Status": status})

        assert node is not None
        assert node.id == 3
        assert node.thread_count == 8
        assert node.status == status
        assert node.status_color == color
        assert node.is_running is running
        assert node.load_metric == LOAD_METRIC_DEFAULT

    def test_parse_node_without_id_is_skipped(self, parser: NodeParser) -> None:
        assert parser.parse_node({"Threads": 2, "Status": "ready"}) is None
        assert parser.parse_node({"Id": "abc"}) is None
        assert parser.parse_node("node-1") is None

    def test_parse_node_defaults_threads(self, parser: NodeParser) -> None:
        node = parser.parse_node({"Id": "7", "Threads": None})

        assert node is not None
        assert node.id == 7
        assert node.thread_count == 0
        assert node.status == ""

    def test_negative_threads_clamped(self, parser: NodeParser) -> None:
        node = parser.parse_node({"Id": 1, "Threads": -4, "Status": "ready"})

        assert node is not None
        assert node.thread_count == 0

    def test_parse_nodes_keeps_order_and_drops_invalid(self, parser: NodeParser) -> None:
        nodes = parser.parse_nodes(
            [
                {"Id": 2, "Threads": 1, "Status": "ready"},
                None,
                {"Id": 0, "Threads": 4, "Status": "running"},
            ]
        )

        assert [node.id for node in nodes] == [2, 0]

    def test_parse_work_unit(self, parser: NodeParser) -> None:
        unit = parser.parse_work_unit(
            {
                "Client": {"ID": 1, "Status": "running", "Threads": 2},
                "Thread": 2,
                "Status": "stuck",
                "Attempt": 1,
            }
        )

        assert unit is not None
        assert unit.client_id == 1
        assert unit.thread == 2
        assert unit.status == "stuck"
        assert unit.attempt == 1

    def test_parse_work_unit_without_client(self, parser: NodeParser) -> None:
        unit = parser.parse_work_unit({"Client": None, "Thread": 1})

        assert unit is not None
        assert unit.client_id is None
        assert unit.status == "unknown"
        assert unit.attempt == 0

    def test_parse_work_units_drops_invalid(self, parser: NodeParser) -> None:
        units = parser.parse_work_units([{"Thread": 1, "Status": "new"}, 42])

        assert len(units) == 1
        assert units[0].status == "new"
