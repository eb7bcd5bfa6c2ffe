"""Status display hooks.

The game mode pushes status changes (health, score, overlays) through a
StatusDisplay. The base class ignores them; HudDisplay records them for
the skin to draw each frame.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Overlay(Enum):
    """Full-screen panel shown over the arena."""

    NONE = "none"
    LOADING = "loading"
    MENU = "menu"
    GAME_OVER = "game_over"
    LEVEL_COMPLETE = "level_complete"


class StatusDisplay:
    """Receives status updates from the game. Every hook is a no-op."""

    def set_loading_progress(self, progress: float) -> None:
        pass

    def set_health(self, health: int, max_health: int) -> None:
        pass

    def set_score(self, score: int) -> None:
        pass

    def set_level(self, level_number: int) -> None:
        """Level number is 1-based."""
        pass

    def set_treasures(self, collected: int, quota: int) -> None:
        pass

    def show_menu(self) -> None:
        pass

    def show_game_over(self, score: int, victory: bool = False) -> None:
        pass

    def show_level_complete(self, next_level: int) -> None:
        pass

    def hide_overlays(self) -> None:
        pass


@dataclass
class HudDisplay(StatusDisplay):
    """StatusDisplay that keeps the latest values for rendering."""

    health: int = 100
    max_health: int = 100
    score: int = 0
    level_number: int = 1
    treasures: int = 0
    treasure_quota: int = 0
    loading_progress: float = 0.0
    overlay: Overlay = Overlay.LOADING
    final_score: int = 0
    victory: bool = False
    next_level: Optional[int] = None

    def set_loading_progress(self, progress: float) -> None:
        self.loading_progress = max(0.0, min(1.0, progress))

    def set_health(self, health: int, max_health: int) -> None:
        self.health = health
        self.max_health = max_health

    def set_score(self, score: int) -> None:
        self.score = score

    def set_level(self, level_number: int) -> None:
        self.level_number = level_number

    def set_treasures(self, collected: int, quota: int) -> None:
        self.treasures = collected
        self.treasure_quota = quota

    def show_menu(self) -> None:
        self.overlay = Overlay.MENU

    def show_game_over(self, score: int, victory: bool = False) -> None:
        self.overlay = Overlay.GAME_OVER
        self.final_score = score
        self.victory = victory

    def show_level_complete(self, next_level: int) -> None:
        self.overlay = Overlay.LEVEL_COMPLETE
        self.next_level = next_level

    def hide_overlays(self) -> None:
        self.overlay = Overlay.NONE

    @property
    def health_fraction(self) -> float:
        if self.max_health <= 0:
            return 0.0
        return max(0.0, min(1.0, self.health / self.max_health))
