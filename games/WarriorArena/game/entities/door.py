"""Exit door entity."""

from dataclasses import dataclass

from games.WarriorArena.config import (
    DOOR_WIDTH,
    DOOR_HEIGHT,
    DOOR_RIGHT_OFFSET,
    DOOR_BOTTOM_OFFSET,
)


@dataclass
class Door:
    """Level exit, anchored relative to the bottom-right of the arena."""

    x: float = 0.0
    y: float = 0.0
    w: float = DOOR_WIDTH
    h: float = DOOR_HEIGHT

    def reset(self, arena_width: float, arena_height: float) -> None:
        """Move to the spawn point for the given arena size."""
        self.x = arena_width - DOOR_RIGHT_OFFSET
        self.y = arena_height - DOOR_BOTTOM_OFFSET
