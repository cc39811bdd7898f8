"""Tests for turning and jump parameter derivation."""

import math
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from tests.helpers.fake_host import FakeHost, RecordingStepper
from worms.actions.jump import initial_jump_velocity, jump_force
from worms.actions.turn import turn_cost
from worms.core.exceptions import IllegalJumpError
from worms.core.geometry import Position

ORIGIN = Position(5.0, 5.0)


class TestTurnCost:
    def test_half_rotation_costs_thirty(self):
        assert turn_cost(math.pi, 60) == 30

    def test_full_rotation_costs_sixty(self):
        assert turn_cost(2 * math.pi, 60) == 60

    def test_sign_does_not_matter(self):
        assert turn_cost(-0.5, 60) == turn_cost(0.5, 60) == 5

    def test_zero_is_free(self):
        assert turn_cost(0.0, 60) == 0


class TestTurn:
    def test_turn_pi(self):
        worm = FakeHost().worm(direction=0.0)
        assert worm.can_turn(math.pi)
        worm.turn(math.pi)
        assert worm.direction == pytest.approx(math.pi)
        assert worm.action_points == 120 - 30

    def test_negative_turn_wraps(self):
        worm = FakeHost().worm(direction=0.25)
        worm.turn(-0.5)
        assert worm.direction == pytest.approx(2 * math.pi - 0.25)

    def test_cannot_afford(self):
        worm = FakeHost().worm()
        worm.use_action_points(110)
        assert not worm.can_turn(math.pi)
        assert worm.can_turn(0.5)

    def test_no_points_at_all(self):
        worm = FakeHost().worm()
        worm.use_action_points(worm.action_points)
        assert not worm.can_turn(0.0)

    def test_non_finite_angle(self):
        worm = FakeHost().worm()
        assert not worm.can_turn(math.nan)
        assert not worm.can_turn(math.inf)

    def test_illegal_turn_is_a_contract_violation(self):
        worm = FakeHost().worm()
        worm.use_action_points(worm.action_points)
        with pytest.raises(AssertionError):
            worm.turn(1.0)

    def test_turn_advance_check(self):
        host = FakeHost(next_turn=True)
        host.worm().turn(0.1)
        assert host.turns_started == 1


class TestJumpParameters:
    def test_force_formula(self):
        assert jump_force(100, 120.0, 9.8) == pytest.approx(5 * 100 + 120.0 * 9.8)

    def test_velocity_formula(self):
        assert initial_jump_velocity(240.0, 120.0) == pytest.approx(1.0)

    def test_worm_force_uses_world_gravity(self):
        host = FakeHost(gravity=2.0)
        worm = host.worm()
        assert worm.jump_force == pytest.approx(5 * worm.action_points + worm.mass * 2.0)

    def test_worm_velocity(self):
        worm = FakeHost().worm()
        force = worm.jump_force
        assert worm.initial_jump_velocity(force) == pytest.approx(force / worm.mass * 0.5)

    def test_force_drops_with_points(self):
        worm = FakeHost().worm()
        before = worm.jump_force
        worm.use_action_points(20)
        assert worm.jump_force == pytest.approx(before - 100)


class TestJump:
    def test_jump_drains_points_and_delegates(self):
        stepper = RecordingStepper(landing=Position(7.0, 5.0))
        host = FakeHost()
        worm = host.worm(ballistics=stepper)
        worm.jump(0.05)
        assert stepper.calls == [(worm, 0.05)]
        assert worm.position == Position(7.0, 5.0)
        assert worm.action_points == 0

    def test_default_time_step_from_config(self):
        stepper = RecordingStepper()
        worm = FakeHost().worm(ballistics=stepper)
        worm.jump()
        assert stepper.calls[0][1] == worm.config.jump_time_step

    def test_cannot_jump_from_impassable_spot(self):
        stepper = RecordingStepper()
        worm = FakeHost(passable=lambda p, r: False).worm(ballistics=stepper)
        assert not worm.can_jump()
        with pytest.raises(IllegalJumpError):
            worm.jump(0.01)
        assert stepper.calls == []
        assert worm.action_points == worm.max_action_points

    def test_cannot_jump_without_points(self):
        worm = FakeHost().worm()
        worm.use_action_points(worm.action_points)
        with pytest.raises(IllegalJumpError):
            worm.jump(0.01)

    def test_turn_advance_after_jump(self):
        host = FakeHost(next_turn=True)
        host.worm().jump(0.01)
        assert host.turns_started == 1


class TestJumpFinished:
    def test_adjacent_finishes(self):
        worm = FakeHost(adjacent=lambda p, r: p.y < 1.0).worm(position=ORIGIN)
        assert not worm.is_jump_finished(Position(6.0, 3.0))
        assert worm.is_jump_finished(Position(6.0, 0.5))

    def test_leaving_the_world_finishes(self):
        host = FakeHost(adjacent=lambda p, r: False, within=lambda p, r: p.x < 10)
        worm = host.worm(position=ORIGIN)
        assert worm.is_jump_finished(Position(11.0, 5.0))

    def test_impassable_finishes(self):
        host = FakeHost(adjacent=lambda p, r: False, passable=lambda p, r: p.y > 2.0)
        worm = host.worm(position=ORIGIN)
        assert not worm.is_jump_finished(Position(6.0, 3.0))
        assert worm.is_jump_finished(Position(6.0, 1.0))

    def test_inactive_worm_is_always_finished(self):
        worm = FakeHost(adjacent=lambda p, r: False).worm(position=ORIGIN)
        worm.terminate()
        assert worm.is_jump_finished(Position(6.0, 3.0))
