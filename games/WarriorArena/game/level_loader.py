"""Level loader for WarriorArena game.

Each level file sets how many enemies, treasures and powerups spawn and
how fast enemies move. A level group (campaign.yaml) fixes the order.
Entity placement is random per level load.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from arena.games.levels import LevelLoader as BaseLevelLoader
from arena.logging import get_logger

from games.WarriorArena.config import (
    DEFAULT_LEVEL_GROUP,
    ENEMY_SPAWN_MARGIN,
    TREASURE_SPAWN_MARGIN,
    POWERUP_SPAWN_MARGIN,
)
from .entities import Enemy, EnemyKind, Treasure, Powerup, PowerupKind

if TYPE_CHECKING:
    from .session import ArenaSession

log = get_logger('level_loader')


class LevelConfigError(ValueError):
    """A level file has missing or invalid values."""

    def __init__(self, message: str, file_path: Optional[Path] = None):
        self.file_path = file_path
        super().__init__(message)


class LevelConfig(BaseModel):
    """Immutable per-level spawn configuration.

    Attributes:
        name: Display name
        description: Short description
        difficulty: 1-5 rating used in level listings
        enemy_count: Enemies spawned on load
        treasure_count: Treasures spawned, also the quota to open the door
        powerup_count: Powerups spawned on load
        enemy_speed: Enemy speed in pixels per tick
    """
    name: str = "Untitled"
    description: str = ""
    difficulty: int = Field(default=1, ge=1, le=5)
    enemy_count: int = Field(..., ge=0)
    treasure_count: int = Field(..., ge=0)
    powerup_count: int = Field(..., ge=0)
    enemy_speed: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)


class LevelTable(Sequence):
    """Ordered, immutable sequence of level configurations."""

    def __init__(self, levels: Iterable[LevelConfig]):
        self._levels: Tuple[LevelConfig, ...] = tuple(levels)

    def __getitem__(self, index):
        return self._levels[index]

    def __len__(self) -> int:
        return len(self._levels)

    def __repr__(self) -> str:
        return f"LevelTable({len(self._levels)} levels)"

    def is_last(self, index: int) -> bool:
        """True if index is the final level."""
        return index == len(self._levels) - 1


class WarriorArenaLevelLoader(BaseLevelLoader[LevelConfig]):
    """Loads and parses WarriorArena levels from YAML."""

    def _parse_level_data(self, data: Dict[str, Any], file_path: Path) -> LevelConfig:
        """Parse YAML data into LevelConfig.

        Raises:
            LevelConfigError: If counts or speed are missing or out of range
        """
        spawn = data.get('spawn', {})
        try:
            return LevelConfig(
                name=data.get('name', file_path.stem),
                description=data.get('description', ''),
                difficulty=data.get('difficulty', 1),
                enemy_count=spawn.get('enemies'),
                treasure_count=spawn.get('treasures'),
                powerup_count=spawn.get('powerups'),
                enemy_speed=data.get('enemy_speed'),
            )
        except ValidationError as e:
            raise LevelConfigError(
                f"Invalid level file {file_path.name}: {e}", file_path
            ) from e

    def load_table(self, group: str = DEFAULT_LEVEL_GROUP) -> LevelTable:
        """Load every level of a group, in group order.

        Args:
            group: Level group slug

        Returns:
            LevelTable for the group
        """
        level_group = self.load_group(group)
        table = LevelTable(self.load_level(slug) for slug in level_group.levels)
        log.debug("Loaded %d levels from group '%s'", len(table), group)
        return table


def _random_position(rng, margin: float, width: float, height: float) -> Tuple[float, float]:
    """Uniform position inset from every arena edge by margin."""
    x = margin + rng.random() * (width - 2 * margin)
    y = margin + rng.random() * (height - 2 * margin)
    return x, y


def populate_level(session: 'ArenaSession', index: int) -> LevelConfig:
    """Spawn the entities for one level into the session.

    Replaces enemies, treasures and powerups, resets the door and clears
    particles. The warrior is left alone.

    Args:
        session: Session to fill
        index: Zero-based level index

    Returns:
        The LevelConfig that was loaded

    Raises:
        IndexError: If index is outside the level table
        ValueError: If the arena is too small for the spawn margins
    """
    if not 0 <= index < len(session.levels):
        raise IndexError(
            f"Level index {index} out of range (0..{len(session.levels) - 1})"
        )

    width, height = session.width, session.height
    margin = max(ENEMY_SPAWN_MARGIN, TREASURE_SPAWN_MARGIN, POWERUP_SPAWN_MARGIN)
    if width <= 2 * margin or height <= 2 * margin:
        raise ValueError(
            f"Arena {width}x{height} too small for spawn margin {margin}"
        )

    config = session.levels[index]
    rng = session.rng
    enemy_kinds = list(EnemyKind)
    powerup_kinds = list(PowerupKind)

    session.enemies = []
    for _ in range(config.enemy_count):
        x, y = _random_position(rng, ENEMY_SPAWN_MARGIN, width, height)
        session.enemies.append(Enemy(
            x=x,
            y=y,
            speed=config.enemy_speed,
            direction=1 if rng.random() > 0.5 else -1,
            kind=rng.choice(enemy_kinds),
        ))

    session.treasures = []
    for _ in range(config.treasure_count):
        x, y = _random_position(rng, TREASURE_SPAWN_MARGIN, width, height)
        session.treasures.append(Treasure(x=x, y=y))

    session.powerups = []
    for _ in range(config.powerup_count):
        x, y = _random_position(rng, POWERUP_SPAWN_MARGIN, width, height)
        session.powerups.append(Powerup(x=x, y=y, kind=rng.choice(powerup_kinds)))

    session.door.reset(width, height)
    session.particles.clear()
    session.level_index = index

    log.info(
        "Level %d loaded: %d enemies, %d treasures, %d powerups",
        index + 1, config.enemy_count, config.treasure_count, config.powerup_count,
    )
    return config
