"""Warrior entity - the player character."""

from dataclasses import dataclass, field
from typing import List, Tuple

from games.WarriorArena.config import (
    WARRIOR_SPAWN,
    WARRIOR_WIDTH,
    WARRIOR_HEIGHT,
    WARRIOR_BASE_SPEED,
    WARRIOR_MAX_HEALTH,
)
from games.WarriorArena.game.effects import TimedEffect, clear_effects


@dataclass
class Warrior:
    """Player-controlled warrior.

    Position is the top-left corner of the bounding box (pygame convention).
    Health always stays within [0, max_health].
    """

    x: float = WARRIOR_SPAWN[0]
    y: float = WARRIOR_SPAWN[1]
    w: float = WARRIOR_WIDTH
    h: float = WARRIOR_HEIGHT
    dx: float = 0.0
    dy: float = 0.0
    speed: float = WARRIOR_BASE_SPEED
    health: int = WARRIOR_MAX_HEALTH
    max_health: int = WARRIOR_MAX_HEALTH
    score: int = 0
    treasures: int = 0
    invincible: bool = False
    invincibility_timer: int = 0
    effects: List[TimedEffect] = field(default_factory=list)

    @property
    def center(self) -> Tuple[float, float]:
        """Center point of the bounding box."""
        return (self.x + self.w / 2, self.y + self.h / 2)

    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    def damage(self, amount: int) -> int:
        """Take damage, clamped at zero.

        Returns:
            Health remaining
        """
        self.health = max(0, self.health - amount)
        return self.health

    def heal(self, amount: int) -> int:
        """Restore health, clamped at max_health.

        Returns:
            Health after healing
        """
        self.health = min(self.max_health, self.health + amount)
        return self.health

    def grant_invincibility(self, ticks: int) -> None:
        self.invincible = True
        self.invincibility_timer = ticks

    def tick_invincibility(self) -> None:
        """Count the invincibility timer down; the flag clears at zero."""
        if self.invincibility_timer > 0:
            self.invincibility_timer -= 1
            if self.invincibility_timer == 0:
                self.invincible = False

    def reset_for_level(self) -> None:
        """Move back to the spawn point for a new level.

        Score, health, speed and active effects carry over.
        """
        self.x, self.y = WARRIOR_SPAWN
        self.dx = 0.0
        self.dy = 0.0
        self.treasures = 0

    def reset(self) -> None:
        """Restore default stats for a new game."""
        clear_effects(self)
        self.reset_for_level()
        self.speed = WARRIOR_BASE_SPEED
        self.health = self.max_health
        self.score = 0
        self.invincible = False
        self.invincibility_timer = 0
