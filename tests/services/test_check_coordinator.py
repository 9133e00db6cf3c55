"""Tests for tastools.services.check_coordinator module."""

import pytest

from tastools.config import ScriptConfig
from tastools.domain import Angles, PlayerState, Vector
from tastools.services.check_coordinator import (
    CheckCoordinator,
    CheckOutcome,
    CheckTarget,
    ReplayBudget,
)


def player_at(x: float, y: float, z: float, pitch: float = 0.0, yaw: float = 0.0) -> PlayerState:
    """Helper to build a player state."""
    return PlayerState(position=Vector(x, y, z), angles=Angles(pitch, yaw))


class TestReplayBudget:
    """Tests for ReplayBudget."""

    def test_consume_until_exhausted(self):
        """Test a budget of two allows exactly two replays."""
        budget = ReplayBudget(2)
        assert budget.consume()
        assert budget.consume()
        assert budget.exhausted
        assert not budget.consume()
        assert budget.used == 2
        assert budget.remaining == 0

    def test_zero_budget(self):
        """Test a zero budget never allows a replay."""
        assert not ReplayBudget(0).consume()

    def test_negative_budget_rejected(self):
        """Test a negative budget is an error."""
        with pytest.raises(ValueError):
            ReplayBudget(-1)


class TestCheckTarget:
    """Tests for reading targets out of matches."""

    def test_defaults(self, match_line, config: ScriptConfig):
        """Test default epsilons apply when not given."""
        target = CheckTarget.from_match(match_line("check pos 100 250 312.7"), 10, config)

        assert target.tick == 10
        assert target.position == Vector(100.0, 250.0, 312.7)
        assert target.angles is None
        assert target.pos_epsilon == 0.5
        assert target.ang_epsilon == 0.2

    def test_explicit_values(self, match_line, config: ScriptConfig):
        """Test every part of a full check."""
        target = CheckTarget.from_match(
            match_line("check pos 1 2 3 ang 10 20 posepsilon 2 angepsilon 1"), 0, config
        )
        assert target.angles == Angles(10.0, 20.0)
        assert target.pos_epsilon == 2.0
        assert target.ang_epsilon == 1.0


class TestCheckCoordinator:
    """Tests for check evaluation and replay requests."""

    def test_schedule_rejects_other_tools(self, coordinator: CheckCoordinator, match_line):
        """Test only check matches can be scheduled."""
        with pytest.raises(ValueError):
            coordinator.schedule(match_line("duck 20"), 0)

    def test_nothing_due(self, coordinator: CheckCoordinator):
        """Test evaluation without a due check returns None."""
        assert coordinator.evaluate(0, player_at(0, 0, 0)) is None

    def test_evaluated_the_tick_before(self, coordinator: CheckCoordinator, match_line):
        """Test a check on tick 10 is evaluated after tick 9."""
        coordinator.schedule(match_line("check pos 100 250 312.7"), 10)

        assert coordinator.evaluate(8, player_at(0, 0, 0)) is None
        result = coordinator.evaluate(9, player_at(100, 250, 312.7))
        assert result is not None
        assert result.passed
        assert coordinator.pending() == []

    def test_pass_within_epsilon(self, coordinator: CheckCoordinator, match_line):
        """Test a position within posepsilon passes."""
        coordinator.schedule(match_line("check pos 100 250 312.7"), 1)
        result = coordinator.evaluate(0, player_at(100.3, 250.3, 312.7))
        assert result.outcome is CheckOutcome.PASS
        assert result.position_error == pytest.approx(0.4243, abs=1e-3)

    def test_euclidean_distance(self, coordinator: CheckCoordinator, match_line):
        """Test per-axis offsets inside epsilon can still fail in total."""
        coordinator.schedule(match_line("check pos 0 0 0"), 1)
        result = coordinator.evaluate(0, player_at(0.4, 0.4, 0.0))
        assert result.outcome is CheckOutcome.REPLAY_REQUESTED

    def test_angles_per_axis(self, coordinator: CheckCoordinator, match_line):
        """Test angle checks compare each axis with wraparound."""
        coordinator.schedule(match_line("check ang 0 179.9"), 1)
        assert coordinator.evaluate(0, player_at(0, 0, 0, pitch=0.1, yaw=-179.95)).passed

        coordinator.schedule(match_line("check ang 0 0"), 2)
        assert not coordinator.evaluate(1, player_at(0, 0, 0, pitch=0.3, yaw=0)).passed

    def test_custom_epsilon(self, coordinator: CheckCoordinator, match_line):
        """Test posepsilon overrides the default tolerance."""
        coordinator.schedule(match_line("check pos 0 0 0 posepsilon 5"), 1)
        assert coordinator.evaluate(0, player_at(3, 3, 0)).passed

    def test_replay_budget(self, coordinator: CheckCoordinator, match_line):
        """Test fifteen replays are requested, the sixteenth is refused."""
        far = player_at(1000, 0, 0)
        outcomes = []
        for _ in range(16):
            coordinator.schedule(match_line("check pos 100 250 312.7"), 1)
            outcomes.append(coordinator.evaluate(0, far).outcome)

        assert outcomes[:15] == [CheckOutcome.REPLAY_REQUESTED] * 15
        assert outcomes[15] is CheckOutcome.REPLAY_EXHAUSTED
        assert coordinator.budget.used == 15

    def test_budget_shared_across_coordinators(self, match_line, config: ScriptConfig):
        """Test a recreated coordinator keeps spending the same budget."""
        budget = ReplayBudget(1)
        first = CheckCoordinator(budget, config)
        first.schedule(match_line("check pos 0 0 0"), 1)
        assert first.evaluate(0, player_at(9, 9, 9)).outcome is CheckOutcome.REPLAY_REQUESTED

        second = CheckCoordinator(budget, config)
        second.schedule(match_line("check pos 0 0 0"), 1)
        assert second.evaluate(0, player_at(9, 9, 9)).outcome is CheckOutcome.REPLAY_EXHAUSTED

    def test_budget_from_config(self, match_line):
        """Test the default budget follows the configuration."""
        coordinator = CheckCoordinator(config=ScriptConfig(check_max_replays=3))
        assert coordinator.budget.max_replays == 3

    def test_given_budget_is_kept(self):
        """Test a supplied budget is used even when already exhausted."""
        budget = ReplayBudget(0)
        coordinator = CheckCoordinator(budget, ScriptConfig(check_max_replays=5))
        assert coordinator.budget is budget
