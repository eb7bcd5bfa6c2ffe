"""WarriorArena physics and collision detection."""

from .collision import (
    overlaps,
    clamp_to_arena,
    direction_between,
)

__all__ = [
    'overlaps',
    'clamp_to_arena',
    'direction_between',
]
