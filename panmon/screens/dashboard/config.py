"""Dashboard screen configuration - column definitions and widget ID constants."""

from __future__ import annotations

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

NODE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Node", 8),
    ("Threads", 9),
    ("Status", 12),
    ("Load", 6),
    ("", 3),
]

WORK_UNIT_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Client", 8),
    ("Thread", 8),
    ("Status", 12),
    ("Attempt", 9),
]

# =============================================================================
# Widget IDs
# =============================================================================

STATUS_BAR_ID = "status-bar"
NODES_TABLE_ID = "nodes-table"
WORK_UNITS_TABLE_ID = "work-units-table"
WARNINGS_PANEL_ID = "warnings-panel"
WARNINGS_LOG_ID = "warnings-log"
ERRORS_PANEL_ID = "errors-panel"
ERRORS_LOG_ID = "errors-log"

# =============================================================================
# Labels
# =============================================================================

RUNNING_MARKER = "●"
EMPTY_LOG_TEXT = "Nothing reported"
WARNINGS_TITLE = "Warnings"
ERRORS_TITLE = "Errors"
