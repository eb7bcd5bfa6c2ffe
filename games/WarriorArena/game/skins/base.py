"""Base class for WarriorArena game skins.

Skins handle ALL rendering - the game only manages state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

import pygame

from ..hud import Overlay

if TYPE_CHECKING:
    from ..entities import Warrior, Enemy, Treasure, Powerup, Door, Particle
    from ..hud import HudDisplay


class WarriorArenaSkin(ABC):
    """Base class for game skins.

    Entity renderers are abstract. Screen panels (HUD, loading bar, menu
    and overlays) default to drawing nothing.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_background(self, screen: pygame.Surface, level_index: int) -> None:
        """Fill the screen with the background for a level."""
        pass

    @abstractmethod
    def render_door(self, door: 'Door', screen: pygame.Surface) -> None:
        pass

    @abstractmethod
    def render_treasure(self, treasure: 'Treasure', screen: pygame.Surface, tick: int) -> None:
        """Render a treasure (skip it once collected).

        Args:
            treasure: Treasure to render
            screen: Pygame surface to draw on
            tick: Animation tick for the float effect
        """
        pass

    @abstractmethod
    def render_powerup(self, powerup: 'Powerup', screen: pygame.Surface, tick: int) -> None:
        pass

    @abstractmethod
    def render_enemy(self, enemy: 'Enemy', screen: pygame.Surface) -> None:
        pass

    @abstractmethod
    def render_warrior(self, warrior: 'Warrior', screen: pygame.Surface, tick: int) -> None:
        """Render the warrior, flickering while invincible."""
        pass

    @abstractmethod
    def render_particles(self, particles: List['Particle'], screen: pygame.Surface) -> None:
        pass

    def render_hud(self, screen: pygame.Surface, hud: 'HudDisplay') -> None:
        """Render health, score, level and treasure progress."""
        pass

    def render_loading(self, screen: pygame.Surface, progress: float) -> None:
        pass

    def render_menu(self, screen: pygame.Surface) -> None:
        pass

    def render_game_over(self, screen: pygame.Surface, score: int, victory: bool) -> None:
        pass

    def render_level_complete(self, screen: pygame.Surface, next_level: int) -> None:
        pass

    def render_overlay(self, screen: pygame.Surface, hud: 'HudDisplay') -> None:
        """Draw whichever panel the HUD currently shows."""
        if hud.overlay == Overlay.MENU:
            self.render_menu(screen)
        elif hud.overlay == Overlay.GAME_OVER:
            self.render_game_over(screen, hud.final_score, hud.victory)
        elif hud.overlay == Overlay.LEVEL_COMPLETE and hud.next_level is not None:
            self.render_level_complete(screen, hud.next_level)
