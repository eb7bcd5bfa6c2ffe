"""Collectible entities: treasures and powerups."""

from dataclasses import dataclass
from enum import Enum

from games.WarriorArena.config import TREASURE_SIZE, POWERUP_SIZE


class PowerupKind(Enum):
    """Powerup effect types."""

    HEALTH = "health"
    SPEED = "speed"
    INVINCIBILITY = "invincibility"


@dataclass
class Treasure:
    """Gold treasure. Once collected it stays collected."""

    x: float
    y: float
    w: float = TREASURE_SIZE
    h: float = TREASURE_SIZE
    collected: bool = False
    floating: bool = True

    def collect(self) -> bool:
        """Mark collected.

        Returns:
            True if this call collected it, False if already collected
        """
        if self.collected:
            return False
        self.collected = True
        return True


@dataclass
class Powerup:
    """Powerup pickup. Once consumed it stays inactive."""

    x: float
    y: float
    kind: PowerupKind = PowerupKind.HEALTH
    w: float = POWERUP_SIZE
    h: float = POWERUP_SIZE
    active: bool = True

    def consume(self) -> bool:
        """Deactivate the powerup.

        Returns:
            True if this call consumed it, False if already inactive
        """
        if not self.active:
            return False
        self.active = False
        return True
