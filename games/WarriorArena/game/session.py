"""Play session state.

ArenaSession is the one object the simulation step reads and writes:
the warrior, every spawned entity, the level table and the random
source used for placement and particles.
"""

from dataclasses import dataclass, field
import random
from typing import List, Optional

from games.WarriorArena.config import SCREEN_WIDTH, SCREEN_HEIGHT
from .controls import ControlState
from .entities import Warrior, Enemy, Treasure, Powerup, Door, Particle
from .level_loader import LevelConfig, LevelTable


@dataclass
class ArenaSession:
    """Everything that changes while playing.

    Attributes:
        levels: Ordered level table
        width: Arena width in pixels
        height: Arena height in pixels
        rng: Random source (seed it for reproducible runs)
        level_index: Zero-based current level
        tick: Ticks simulated since the game started
    """

    levels: LevelTable
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    rng: random.Random = field(default_factory=random.Random)
    warrior: Warrior = field(default_factory=Warrior)
    enemies: List[Enemy] = field(default_factory=list)
    treasures: List[Treasure] = field(default_factory=list)
    powerups: List[Powerup] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    door: Door = field(default_factory=Door)
    controls: ControlState = field(default_factory=ControlState)
    level_index: int = 0
    tick: int = 0

    def __post_init__(self):
        self.door.reset(self.width, self.height)

    @classmethod
    def create(
        cls,
        levels: LevelTable,
        width: float = SCREEN_WIDTH,
        height: float = SCREEN_HEIGHT,
        seed: Optional[int] = None,
    ) -> 'ArenaSession':
        """Build a fresh session with a (optionally) seeded random source."""
        return cls(levels=levels, width=width, height=height, rng=random.Random(seed))

    @property
    def level(self) -> LevelConfig:
        """Configuration of the current level."""
        return self.levels[self.level_index]

    @property
    def treasure_quota(self) -> int:
        return self.level.treasure_count

    @property
    def is_last_level(self) -> bool:
        return self.levels.is_last(self.level_index)
