"""Tests for snapshot parser."""

from __future__ import annotations

import pytest

from panmon.controllers.status.parsers import SnapshotParser


class TestSnapshotParser:
    """Tests for SnapshotParser class."""

    @pytest.fixture
    def parser(self) -> SnapshotParser:
        return SnapshotParser()

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            "",
            "<html>",
            [],
            {},
            {"Status": "RUNNING", "WorkUnits": None},
            {"Status": "RUNNING", "Clients": []},
        ],
    )
    def test_not_ready(self, parser: SnapshotParser, payload: object) -> None:
        assert parser.is_ready(payload) is False
        assert parser.parse(payload) is None

    def test_full_payload(self, parser: SnapshotParser) -> None:
        snapshot = parser.parse(
            {
                "Status": "RUNNING",
                "Warnings": ["[1] Thread 3 is stuck"],
                "Errors": ["[!] WorkUnit not found"],
                "Clients": [
                    {"Id": 0, "Threads": 4, "Status": "running"},
                    {"Id": 1, "Threads": 2, "Status": "ready"},
                ],
                "WorkUnits": [{"Thread": 1, "Status": "running", "Attempt": 0}],
            }
        )

        assert snapshot is not None
        assert snapshot.status == "RUNNING"
        assert snapshot.warnings == ["[1] Thread 3 is stuck"]
        assert snapshot.errors == ["[!] WorkUnit not found"]
        assert snapshot.nodes is not None
        assert [node.id for node in snapshot.nodes] == [0, 1]
        assert snapshot.work_units is not None
        assert len(snapshot.work_units) == 1

    def test_missing_sections_are_none(self, parser: SnapshotParser) -> None:
        snapshot = parser.parse({"WorkUnits": []})

        assert snapshot is not None
        assert snapshot.status is None
        assert snapshot.warnings is None
        assert snapshot.errors is None
        assert snapshot.nodes is None
        assert snapshot.work_units == []

    def test_malformed_sections_are_none(self, parser: SnapshotParser) -> None:
        snapshot = parser.parse(
            {
                "Status": "READY",
                "Warnings": "disk almost full",
                "Errors": {"0": "x"},
                "Clients": 3,
                "WorkUnits": {},
            }
        )

        assert snapshot is not None
        assert snapshot.warnings is None
        assert snapshot.errors is None
        assert snapshot.nodes is None
        assert snapshot.work_units is None

    def test_messages_are_stringified(self, parser: SnapshotParser) -> None:
        snapshot = parser.parse({"Status": 1, "Warnings": [404], "WorkUnits": []})

        assert snapshot is not None
        assert snapshot.status == "1"
        assert snapshot.warnings == ["404"]
