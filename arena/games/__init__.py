"""
Arena Game Framework.

Provides:
- base_game: BaseGame class that all games should inherit from
- game_state: Standard GameState enum
- levels: YAML-based level loading and level groups
- input: Keyboard action input handling
"""

from arena.games.game_state import GameState
from arena.games.base_game import BaseGame
from arena.games.levels import (
    LevelInfo,
    LevelGroup,
    LevelLoader,
)

__all__ = [
    'GameState',
    'BaseGame',
    'LevelInfo',
    'LevelGroup',
    'LevelLoader',
]
