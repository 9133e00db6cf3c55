"""
Check/replay coordinator - turns `check` invocations into replay requests.

A `check` asserts where the player should be on a given tick. On the tick
immediately before, the coordinator compares the player state supplied by
the executor against the target:

- position is close when the Euclidean distance is within posepsilon
- angles are close when each wrapped per-axis difference is within angepsilon

A failed check asks the executor to replay the script, at most
`check_max_replays` times per script run. The ReplayBudget outlives the
coordinator: a replay recreates the coordinator but keeps the budget.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from tastools.config import ScriptConfig
from tastools.domain import Angles, MatchResult, PlayerState, SourceSpan, Vector
from tastools.logging_config import log_check


logger = logging.getLogger(__name__)

CHECK_TOOL = "check"


class CheckOutcome(Enum):
    """What the executor should do after a check."""

    PASS = "pass"
    REPLAY_REQUESTED = "replay_requested"
    REPLAY_EXHAUSTED = "replay_exhausted"


@dataclass(frozen=True)
class CheckTarget:
    """A scheduled `check`: where the player must be on `tick`."""

    tick: int
    position: Vector | None
    angles: Angles | None
    pos_epsilon: float
    ang_epsilon: float
    span: SourceSpan | None = None

    @classmethod
    def from_match(cls, match: MatchResult, tick: int, config: ScriptConfig) -> CheckTarget:
        """Read the target out of a successful `check` match."""
        values = match.named()
        position = None
        if "x" in values:
            position = Vector(values["x"], values["y"], values["z"])
        angles = None
        if "pitch" in values:
            angles = Angles(values["pitch"], values["yaw"])
        return cls(
            tick=tick,
            position=position,
            angles=angles,
            pos_epsilon=values.get("posepsilon", config.default_pos_epsilon),
            ang_epsilon=values.get("angepsilon", config.default_ang_epsilon),
            span=match.span,
        )


@dataclass(frozen=True)
class CheckResult:
    """Outcome of evaluating one check against the player state."""

    outcome: CheckOutcome
    target: CheckTarget
    replays_used: int
    position_error: float | None = None
    angle_error: float | None = None

    @property
    def passed(self) -> bool:
        return self.outcome is CheckOutcome.PASS


class ReplayBudget:
    """Replays left for one script run (survives the replays themselves)."""

    def __init__(self, max_replays: int):
        if max_replays < 0:
            raise ValueError(f"max_replays must be >= 0, got {max_replays}")
        self._max_replays = max_replays
        self._used = 0

    @property
    def max_replays(self) -> int:
        return self._max_replays

    @property
    def used(self) -> int:
        return self._used

    @property
    def remaining(self) -> int:
        return self._max_replays - self._used

    @property
    def exhausted(self) -> bool:
        return self._used >= self._max_replays

    def consume(self) -> bool:
        """Spend one replay. Returns False if none were left."""
        if self.exhausted:
            return False
        self._used += 1
        return True


class CheckCoordinator:
    """
    Schedules `check` targets and evaluates them before their tick.

    One coordinator per script execution; recreated on every replay.
    """

    def __init__(self, budget: ReplayBudget | None = None, config: ScriptConfig | None = None):
        self._config = config if config is not None else ScriptConfig()
        self._budget = budget if budget is not None else ReplayBudget(self._config.check_max_replays)
        self._targets: dict[int, CheckTarget] = {}

    @property
    def budget(self) -> ReplayBudget:
        return self._budget

    def schedule(self, match: MatchResult, tick: int) -> CheckTarget:
        """Record a `check` invocation for `tick`.

        A later check on the same tick replaces the earlier one.
        """
        if not match.success or match.tool != CHECK_TOOL:
            raise ValueError(f"not a successful '{CHECK_TOOL}' match: {match.tool}")
        target = CheckTarget.from_match(match, tick, self._config)
        self._targets[tick] = target
        logger.debug(f"TICK {tick:05d} | CHECK | scheduled | pos={target.position} ang={target.angles}")
        return target

    def pending(self) -> list[CheckTarget]:
        """Scheduled checks not yet evaluated, in tick order."""
        return [self._targets[tick] for tick in sorted(self._targets)]

    def evaluate(self, current_tick: int, player: PlayerState) -> CheckResult | None:
        """
        Evaluate the check scheduled for the tick after `current_tick`.

        Args:
            current_tick: The tick that just ran
            player: Player state at the end of `current_tick`

        Returns:
            CheckResult, or None if no check is due on the next tick.
        """
        target = self._targets.pop(current_tick + 1, None)
        if target is None:
            return None

        position_error = None
        if target.position is not None:
            position_error = player.position.distance_to(target.position)
        angle_error = None
        if target.angles is not None:
            angle_error = player.angles.max_difference(target.angles)

        close = (
            (position_error is None or position_error <= target.pos_epsilon)
            and (angle_error is None or angle_error <= target.ang_epsilon)
        )

        if close:
            outcome = CheckOutcome.PASS
        elif self._budget.consume():
            outcome = CheckOutcome.REPLAY_REQUESTED
        else:
            outcome = CheckOutcome.REPLAY_EXHAUSTED

        log_check(
            logger,
            current_tick,
            outcome.value,
            self._budget.used,
            f"pos_error={position_error} ang_error={angle_error}",
        )
        return CheckResult(
            outcome=outcome,
            target=target,
            replays_used=self._budget.used,
            position_error=position_error,
            angle_error=angle_error,
        )
