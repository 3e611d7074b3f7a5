"""Unit tests for all enum definitions in constants/enums.py."""

from __future__ import annotations

from enum import Enum

import pytest

from panmon.constants.enums import ClusterStatus, NodeState, PollOutcome, Severity

# =============================================================================
# ClusterStatus
# =============================================================================


class TestClusterStatus:
    """Test ClusterStatus enum."""

    def test_is_enum(self) -> None:
        assert issubclass(ClusterStatus, Enum)

    def test_members(self) -> None:
        assert [member.value for member in ClusterStatus] == [
            "READY",
            "RUNNING",
            "FAILED",
            "OFFLINE",
            "UNKNOWN",
        ]

    def test_membership(self) -> None:
        assert ClusterStatus("RUNNING") is ClusterStatus.RUNNING

    @pytest.mark.parametrize("value", ["GARBAGE", "running", "", None, 3])
    def test_from_value_falls_back_to_unknown(self, value: object) -> None:
        assert ClusterStatus.from_value(value) is ClusterStatus.UNKNOWN

    def test_from_value_known(self) -> None:
        assert ClusterStatus.from_value("FAILED") is ClusterStatus.FAILED


# =============================================================================
# NodeState
# =============================================================================


class TestNodeState:
    """Test NodeState enum."""

    def test_values(self) -> None:
        assert NodeState.READY.value == "ready"
        assert NodeState.RUNNING.value == "running"
        assert NodeState.FAILED.value == "failed"

    def test_invalid_membership(self) -> None:
        with pytest.raises(ValueError):
            NodeState("stuck")


# =============================================================================
# Severity / PollOutcome
# =============================================================================


class TestSeverity:
    """Test Severity enum values match Textual notification severities."""

    def test_values(self) -> None:
        assert Severity.WARNING.value == "warning"
        assert Severity.ERROR.value == "error"


class TestPollOutcome:
    def test_members_count(self) -> None:
        assert len(PollOutcome) == 3
