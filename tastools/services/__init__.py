"""Stateful services: tool registry, active tool tracking, check/replay."""

from .tool_registry import ToolRegistry, TOOL_REGISTRY, lookup
from .active_tools import ActiveToolTracker
from .check_coordinator import (
    CHECK_TOOL,
    CheckCoordinator,
    CheckOutcome,
    CheckResult,
    CheckTarget,
    ReplayBudget,
)

__all__ = [
    # Registry
    "ToolRegistry",
    "TOOL_REGISTRY",
    "lookup",
    # Active tools
    "ActiveToolTracker",
    # Check / replay
    "CHECK_TOOL",
    "CheckCoordinator",
    "CheckOutcome",
    "CheckResult",
    "CheckTarget",
    "ReplayBudget",
]
