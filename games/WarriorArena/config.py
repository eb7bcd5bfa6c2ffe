"""Configuration for WarriorArena game.

Contains arena dimensions, timing, gameplay constants, asset paths and
color definitions. Values that players commonly tweak can be overridden
from a .env file in the game directory.
"""
import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_optional_int(key: str) -> Optional[int]:
    """Get integer from environment, or None when unset/empty."""
    val = os.getenv(key, '').strip()
    return int(val) if val else None


# Arena dimensions (default, can be overridden)
SCREEN_WIDTH: int = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT: int = _get_int('SCREEN_HEIGHT', 600)

# Timing: all gameplay constants below are in ticks at TICK_RATE
FPS: int = _get_int('FPS', 60)
TICK_RATE: int = 60
TICK_SECONDS: float = 1.0 / TICK_RATE
MAX_TICKS_PER_FRAME: int = 5
LOADING_HOLD_TICKS: int = 30       # 0.5s after the asset barrier
LEVEL_COMPLETE_HOLD_TICKS: int = 120  # 2s

# Random seed (None = nondeterministic)
RANDOM_SEED: Optional[int] = _get_optional_int('RANDOM_SEED')

# Audio
AUDIO_ENABLED: bool = _get_bool('AUDIO_ENABLED', True)
MUSIC_VOLUME: float = _get_float('MUSIC_VOLUME', 0.3)
SFX_VOLUME: float = _get_float('SFX_VOLUME', 0.5)

# Warrior
WARRIOR_SPAWN: Tuple[float, float] = (50.0, 400.0)
WARRIOR_WIDTH: float = 50.0
WARRIOR_HEIGHT: float = 60.0
WARRIOR_BASE_SPEED: float = 5.0
WARRIOR_MAX_HEALTH: int = 100

# Enemies
ENEMY_WIDTH: float = 50.0
ENEMY_HEIGHT: float = 60.0
ENEMY_CHASE_DISTANCE: float = 200.0
ENEMY_PATROL_MARGIN: float = 100.0
ENEMY_DAMAGE: int = 10
KNOCKBACK_DISTANCE: float = 20.0
HIT_PARTICLE_COUNT: int = 10

# Pickups
TREASURE_SIZE: float = 30.0
TREASURE_SCORE: int = 100
PICKUP_PARTICLE_COUNT: int = 15
POWERUP_SIZE: float = 30.0
HEALTH_POWERUP_AMOUNT: int = 30
SPEED_BOOST_AMOUNT: float = 2.0
SPEED_BOOST_TICKS: int = 600       # 10s
INVINCIBILITY_TICKS: int = 300     # 5s

# Spawn insets from the arena edges
ENEMY_SPAWN_MARGIN: float = 100.0
TREASURE_SPAWN_MARGIN: float = 150.0
POWERUP_SPAWN_MARGIN: float = 100.0

# Door (offset from the bottom-right corner)
DOOR_WIDTH: float = 50.0
DOOR_HEIGHT: float = 100.0
DOOR_RIGHT_OFFSET: float = 50.0
DOOR_BOTTOM_OFFSET: float = 220.0

# Level complete bonus: floor(health / 10) * 50
HEALTH_BONUS_STEP: int = 10
HEALTH_BONUS_POINTS: int = 50

# Level group played by default
DEFAULT_LEVEL_GROUP: str = 'campaign'

# Asset locations
GAME_DIR = Path(__file__).parent
LEVELS_DIR = GAME_DIR / 'levels'
ASSETS_DIR = Path(os.getenv('WARRIOR_ASSETS_DIR', str(GAME_DIR / 'assets')))
IMAGES_DIR = ASSETS_DIR / 'images'
SOUNDS_DIR = ASSETS_DIR / 'sounds'

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (52, 73, 94)
HUD_TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)
OVERLAY_COLOR: Tuple[int, int, int, int] = (0, 0, 0, 170)

# Placeholder fill per asset category
PLACEHOLDER_COLORS: Dict[str, str] = {
    'warrior': '#3498db',
    'enemy': '#e74c3c',
    'treasure': '#f1c40f',
    'door': '#2ecc71',
    'powerup': '#9b59b6',
    'background': '#34495e',
}
PLACEHOLDER_DEFAULT_COLOR: str = '#999999'
PLACEHOLDER_SIZE: Tuple[int, int] = (50, 60)
