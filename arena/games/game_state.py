"""Common GameState enum for arena games.

Games report one of these states via their `state` property. The state
machine in each game owns all transitions; collaborators (skins, HUD,
main loop) only read it.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states.

    States:
        LOADING: Assets are still being loaded (or replaced by placeholders)
        MENU: Start screen, waiting for the start action
        PLAYING: Active gameplay in progress, simulation ticks run
        LEVEL_COMPLETE: Level exit reached, holding before the next level
        GAME_OVER: Game ended, either by death or by finishing every level

    Usage in game_mode.py:
        from arena.games.game_state import GameState

        class MyGameMode(BaseGame):
            def __init__(self):
                super().__init__()
                self._internal_state = GameState.LOADING

            def _get_internal_state(self) -> GameState:
                return self._internal_state
    """
    LOADING = "loading"
    MENU = "menu"
    PLAYING = "playing"
    LEVEL_COMPLETE = "level_complete"
    GAME_OVER = "game_over"

    @property
    def accepts_movement(self) -> bool:
        """Whether directional input may change the player's velocity."""
        return self is GameState.PLAYING
