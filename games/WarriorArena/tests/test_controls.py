"""Tests for directional control state."""

import pytest

from arena.games.input import InputAction, InputEvent
from games.WarriorArena.game.controls import ControlState


class TestVelocity:

    @pytest.mark.parametrize("held,expected", [
        ({}, (0, 0)),
        ({'right': True}, (5, 0)),
        ({'left': True, 'up': True}, (-5, -5)),
        ({'left': True, 'right': True}, (0, 0)),
        ({'up': True, 'down': True, 'right': True}, (5, 0)),
    ])
    def test_velocity(self, held, expected):
        assert ControlState(**held).velocity(5) == expected


class TestApply:

    def test_press_and_release(self):
        controls = ControlState()
        assert controls.apply(InputEvent(InputAction.UP, pressed=True))
        assert controls.up
        controls.apply(InputEvent(InputAction.UP, pressed=False))
        assert not controls.up

    def test_press_ignored_when_not_accepted(self):
        controls = ControlState()
        controls.apply(InputEvent(InputAction.LEFT, pressed=True), accept_presses=False)
        assert not controls.left

    def test_release_always_applies(self):
        controls = ControlState(left=True)
        controls.apply(InputEvent(InputAction.LEFT, pressed=False), accept_presses=False)
        assert not controls.left

    def test_non_direction_ignored(self):
        controls = ControlState()
        assert not controls.apply(InputEvent(InputAction.START))
        assert controls == ControlState()

    def test_clear(self):
        controls = ControlState(up=True, down=True, left=True, right=True)
        controls.clear()
        assert controls.velocity(5) == (0, 0)
