"""Enemy entity.

Enemies patrol horizontally and switch to chasing the warrior when it
comes close. The kind only changes how an enemy looks.
"""

from dataclasses import dataclass
from enum import Enum

from games.WarriorArena.config import ENEMY_WIDTH, ENEMY_HEIGHT


class EnemyKind(Enum):
    """Cosmetic enemy variants."""

    NORMAL = "normal"
    FAST = "fast"
    BIG = "big"


class EnemyMode(Enum):
    """Movement mode, recomputed every tick."""

    PATROL = "patrol"
    CHASE = "chase"


@dataclass
class Enemy:
    """A patrolling/chasing enemy."""

    x: float
    y: float
    speed: float
    direction: int = 1  # +1 right, -1 left
    kind: EnemyKind = EnemyKind.NORMAL
    mode: EnemyMode = EnemyMode.PATROL
    w: float = ENEMY_WIDTH
    h: float = ENEMY_HEIGHT

    def flip(self) -> None:
        self.direction = -self.direction
