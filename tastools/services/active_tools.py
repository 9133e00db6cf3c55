"""
Active tool tracker - per-tick bookkeeping of running tools.

Owned by one script execution. Holds at most one running Tool per name:
a new invocation of the same tool replaces the old instance, an "off"
invocation removes it, and finite durations count down once per tick.
"""

import logging

from tastools.domain import MatchResult, Tool
from tastools.logging_config import log_tool


logger = logging.getLogger(__name__)


class ActiveToolTracker:
    """
    The set of currently running tools for one script.

    Provides:
    - apply(): feed a successful match into the active set
    - advance_tick(): count durations down and expire finished tools
    - active_tools(): running tools in execution order
    """

    def __init__(self):
        self._tools: dict[str, Tool] = {}
        self._tick = 0

    @property
    def tick(self) -> int:
        """Number of ticks advanced so far."""
        return self._tick

    def apply(self, match: MatchResult, current_tick: int) -> Tool | None:
        """
        Apply a matched invocation to the active set.

        Args:
            match: Result of matching the invocation (failed matches are ignored)
            current_tick: Tick the invocation runs on

        Returns:
            The newly tracked Tool, or None if nothing was registered.
        """
        if not match.success or match.schema is None:
            return None

        schema = match.schema

        if match.is_off:
            removed = self._tools.pop(schema.name, None)
            if removed is not None:
                log_tool(logger, current_tick, schema.name, "OFF")
            return None

        if schema.stops_all_tools:
            stopped = sorted(self._tools)
            self._tools.clear()
            log_tool(logger, current_tick, schema.name, "STOP_ALL", f"stopped={stopped}")
            return None

        if not schema.registers_active_state:
            return None

        span = match.span
        tool = Tool(
            tool=schema.name,
            from_line=span.line if span else 0,
            start_col=span.start_col if span else 0,
            end_col=span.end_col if span else 0,
            priority_index=schema.priority_index,
            activated_tick=current_tick,
            ticks_remaining=match.duration,
        )

        action = "REPLACE" if schema.name in self._tools else "START"
        self._tools[schema.name] = tool
        remaining = "unbounded" if tool.is_unbounded else f"{tool.ticks_remaining} ticks"
        log_tool(logger, current_tick, schema.name, action, remaining)
        return tool

    def advance_tick(self) -> list[Tool]:
        """
        Count every finite duration down by one tick.

        Returns:
            Tools that expired on this tick (removed from the active set).
        """
        self._tick += 1
        expired: list[Tool] = []

        for name, tool in list(self._tools.items()):
            if tool.is_unbounded:
                continue
            updated = tool.with_tick_elapsed()
            if updated.ticks_remaining == 0:
                del self._tools[name]
                expired.append(updated)
                log_tool(logger, self._tick, name, "EXPIRED")
            else:
                self._tools[name] = updated

        return expired

    def active_tools(self) -> list[Tool]:
        """Running tools sorted by priority index (lowest runs first)."""
        return sorted(self._tools.values(), key=lambda t: (t.priority_index, t.tool))

    def get(self, name: str) -> Tool | None:
        """Get the running instance of a tool."""
        return self._tools.get(name)

    def clear(self) -> None:
        """Drop every running tool."""
        self._tools.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
