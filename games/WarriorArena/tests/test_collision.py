"""Tests for box overlap, arena clamping and direction helpers."""

from types import SimpleNamespace

import pytest

from games.WarriorArena.game.physics import overlaps, clamp_to_arena, direction_between


def box(x, y, w=10, h=10):
    return SimpleNamespace(x=x, y=y, w=w, h=h)


class TestOverlaps:
    """Open-interval AABB test."""

    def test_intersecting_boxes_overlap(self):
        assert overlaps(box(0, 0), box(5, 5))

    def test_contained_box_overlaps(self):
        assert overlaps(box(0, 0, 100, 100), box(10, 10))

    def test_touching_edges_do_not_overlap(self):
        assert not overlaps(box(0, 0), box(10, 0))
        assert not overlaps(box(0, 0), box(0, 10))

    def test_separate_boxes_do_not_overlap(self):
        assert not overlaps(box(0, 0), box(50, 50))

    @pytest.mark.parametrize("a,b", [
        (box(0, 0), box(5, 5)),
        (box(0, 0), box(10, 0)),
        (box(3, 4, 20, 2), box(10, -5, 2, 20)),
        (box(0, 0), box(100, 100)),
    ])
    def test_symmetric(self, a, b):
        assert overlaps(a, b) == overlaps(b, a)


class TestClampToArena:
    """Keeping boxes inside the arena."""

    def test_inside_unchanged(self):
        b = box(100, 100, 50, 60)
        clamp_to_arena(b, 800, 600)
        assert (b.x, b.y) == (100, 100)

    def test_clamps_negative(self):
        b = box(-20, -5, 50, 60)
        clamp_to_arena(b, 800, 600)
        assert (b.x, b.y) == (0, 0)

    def test_clamps_far_edges(self):
        b = box(790, 590, 50, 60)
        clamp_to_arena(b, 800, 600)
        assert (b.x, b.y) == (750, 540)


class TestDirectionBetween:
    """Unit vector and distance between top-left corners."""

    def test_unit_vector_and_distance(self):
        nx, ny, dist = direction_between(box(0, 0), box(30, 40))
        assert dist == pytest.approx(50)
        assert nx == pytest.approx(0.6)
        assert ny == pytest.approx(0.8)

    def test_zero_distance(self):
        assert direction_between(box(5, 5), box(5, 5)) == (0.0, 0.0, 0.0)
