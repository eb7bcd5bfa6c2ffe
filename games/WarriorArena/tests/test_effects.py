"""Tests for timed stat effects."""

from types import SimpleNamespace

from games.WarriorArena.game.effects import (
    TimedEffect, apply_effect, expire_effects, clear_effects,
)


def target(speed=5.0):
    return SimpleNamespace(speed=speed, effects=[])


class TestTimedEffect:

    def test_tick_counts_down(self):
        effect = TimedEffect('speed', 2, 3)
        assert not effect.tick()
        assert not effect.tick()
        assert effect.tick()
        assert effect.remaining == 0

    def test_tick_past_zero_stays_expired(self):
        effect = TimedEffect('speed', 2, 0)
        assert effect.tick()
        assert effect.remaining == 0


class TestApplyAndExpire:

    def test_apply_adds_amount(self):
        t = target()
        apply_effect(t, TimedEffect('speed', 2, 10))
        assert t.speed == 7
        assert len(t.effects) == 1

    def test_expire_removes_exact_amount(self):
        t = target()
        apply_effect(t, TimedEffect('speed', 2, 2))
        assert expire_effects(t) == []
        assert t.speed == 7
        expired = expire_effects(t)
        assert len(expired) == 1
        assert t.speed == 5
        assert t.effects == []

    def test_stacked_effects_expire_independently(self):
        t = target()
        apply_effect(t, TimedEffect('speed', 2, 2))
        apply_effect(t, TimedEffect('speed', 2, 4))
        assert t.speed == 9

        expire_effects(t)
        expire_effects(t)
        assert t.speed == 7
        expire_effects(t)
        expire_effects(t)
        assert t.speed == 5

    def test_clear_reverts_everything(self):
        t = target()
        apply_effect(t, TimedEffect('speed', 2, 100))
        apply_effect(t, TimedEffect('speed', 2, 50))
        clear_effects(t)
        assert t.speed == 5
        assert t.effects == []
