"""
ScriptSession - the per-script execution context handed to an executor.

Wires the registry, matcher, active tool tracker and check coordinator
together for one running script:

1. invoke() validates a script line's tokens and applies the match
2. advance_tick() counts active tool durations down
3. evaluate_checks() compares the player against the next tick's check
4. restart() discards per-run state for a replay, keeping the replay budget
"""

import logging
from typing import Sequence

from tastools.config import ScriptConfig
from tastools.domain import ErrorKind, MatchResult, PlayerState, Token, Tool
from tastools.logging_config import log_match, log_tick
from tastools.runtime.matcher import match
from tastools.services.active_tools import ActiveToolTracker
from tastools.services.check_coordinator import (
    CHECK_TOOL,
    CheckCoordinator,
    CheckOutcome,
    CheckResult,
    ReplayBudget,
)
from tastools.services.tool_registry import TOOL_REGISTRY, ToolRegistry


logger = logging.getLogger(__name__)


class ScriptSession:
    """
    State of one script execution.

    Each concurrently running script gets its own session; nothing is
    shared between sessions except the read-only registry.
    """

    def __init__(
        self,
        registry: ToolRegistry | None = None,
        config: ScriptConfig | None = None,
    ):
        self._registry = registry if registry is not None else TOOL_REGISTRY
        self._config = config if config is not None else ScriptConfig()
        self._budget = ReplayBudget(self._config.check_max_replays)
        self._tracker = ActiveToolTracker()
        self._checks = CheckCoordinator(self._budget, self._config)
        self._run_count = 1

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    @property
    def config(self) -> ScriptConfig:
        return self._config

    @property
    def tracker(self) -> ActiveToolTracker:
        return self._tracker

    @property
    def checks(self) -> CheckCoordinator:
        return self._checks

    @property
    def budget(self) -> ReplayBudget:
        return self._budget

    @property
    def run_count(self) -> int:
        """How many times the script has been started (1 + replays)."""
        return self._run_count

    # =========================================================================
    # Script lines
    # =========================================================================

    def validate(self, tokens: Sequence[Token]) -> MatchResult:
        """
        Validate one invocation without touching session state.

        Args:
            tokens: The tool name token followed by its arguments

        Returns:
            MatchResult (failed with UNKNOWN_TOOL if the name is not registered)
        """
        if not tokens:
            raise ValueError("an invocation needs at least the tool name token")

        name_token, arguments = tokens[0], tokens[1:]
        schema = self._registry.lookup(name_token.text)
        if schema is None:
            return MatchResult.fail(
                name_token.text,
                ErrorKind.UNKNOWN_TOOL,
                f"unknown tool '{name_token.text}'",
                name_token.span,
            )
        return match(schema, arguments, name_token)

    def invoke(self, tokens: Sequence[Token], tick: int) -> MatchResult:
        """
        Validate one invocation and apply it on `tick`.

        Failed matches only affect this invocation; the script carries on.
        """
        result = self.validate(tokens)
        details = str(result.error) if result.error else ("off" if result.is_off else None)
        log_match(logger, tick, result.tool, result.success, details)

        if not result.success:
            return result

        self._tracker.apply(result, tick)
        if result.tool == CHECK_TOOL:
            self._checks.schedule(result, tick)
        return result

    # =========================================================================
    # Ticks
    # =========================================================================

    def advance_tick(self) -> list[Tool]:
        """Advance the tracker one tick; returns tools that expired."""
        expired = self._tracker.advance_tick()
        if expired:
            log_tick(logger, self._tracker.tick, "EXPIRED", ", ".join(t.tool for t in expired))
        return expired

    def active_tools(self) -> list[Tool]:
        """Running tools in execution order."""
        return self._tracker.active_tools()

    def evaluate_checks(self, current_tick: int, player: PlayerState) -> CheckResult | None:
        """Run the check due on the next tick, if any."""
        result = self._checks.evaluate(current_tick, player)
        if result is not None and result.outcome is CheckOutcome.REPLAY_EXHAUSTED:
            logger.warning(
                f"Check on tick {result.target.tick} failed with no replays left "
                f"({self._budget.used}/{self._budget.max_replays}); continuing"
            )
        return result

    def restart(self) -> None:
        """Start the script over for a replay.

        Active tools and scheduled checks are discarded; the replay budget
        carries over so the replay limit applies to the whole run.
        """
        self._tracker = ActiveToolTracker()
        self._checks = CheckCoordinator(self._budget, self._config)
        self._run_count += 1
        logger.info(f"Script restarted | run={self._run_count} | replays_used={self._budget.used}")
