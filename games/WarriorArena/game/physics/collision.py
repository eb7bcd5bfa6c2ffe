"""Collision detection for WarriorArena.

Every entity is an axis-aligned box with x, y (top-left), w and h, so the
helpers here accept any of them.
"""

import math
from typing import Protocol, Tuple


class Box(Protocol):
    x: float
    y: float
    w: float
    h: float


def overlaps(a: Box, b: Box) -> bool:
    """Check whether two boxes overlap.

    Edges that only touch do not count as overlapping.

    Args:
        a: First box
        b: Second box

    Returns:
        True if the interiors intersect
    """
    return (
        a.x < b.x + b.w
        and a.x + a.w > b.x
        and a.y < b.y + b.h
        and a.y + a.h > b.y
    )


def clamp_to_arena(entity: Box, width: float, height: float) -> None:
    """Keep the whole box inside the arena, in place.

    Args:
        entity: Box to clamp
        width: Arena width in pixels
        height: Arena height in pixels
    """
    entity.x = max(0.0, min(width - entity.w, entity.x))
    entity.y = max(0.0, min(height - entity.h, entity.y))


def direction_between(source: Box, target: Box) -> Tuple[float, float, float]:
    """Unit vector and distance from source to target (top-left corners).

    Returns:
        Tuple of (nx, ny, distance). Coincident corners give (0, 0, 0).
    """
    dx = target.x - source.x
    dy = target.y - source.y
    dist = math.hypot(dx, dy)
    if dist == 0:
        return 0.0, 0.0, 0.0
    return dx / dist, dy / dist, dist
