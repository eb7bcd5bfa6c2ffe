"""Classic skin - sprite images from the asset provider."""

import math
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

import pygame

from .base import WarriorArenaSkin
from ..entities import EnemyKind
from ...config import BACKGROUND_COLOR, HUD_TEXT_COLOR, OVERLAY_COLOR

if TYPE_CHECKING:
    from ..assets import AssetProvider
    from ..entities import Warrior, Enemy, Treasure, Powerup, Door, Particle
    from ..hud import HudDisplay


class ClassicSkin(WarriorArenaSkin):
    """Draws the arena with the loaded images.

    - Treasures and powerups bob up and down
    - Enemies are tinted by kind
    - The warrior blinks at half opacity while invincible
    - Particles fade out with their remaining life
    """

    NAME = "classic"
    DESCRIPTION = "Sprite images with floating pickups"

    # Multiplicative tint per enemy kind (None = untinted)
    ENEMY_TINTS: Dict[EnemyKind, Optional[Tuple[int, int, int]]] = {
        EnemyKind.NORMAL: None,
        EnemyKind.FAST: (120, 160, 255),
        EnemyKind.BIG: (255, 230, 120),
    }

    FLOAT_AMPLITUDE = 5.0
    TREASURE_FLOAT_PERIOD = 10.0
    POWERUP_FLOAT_PERIOD = 8.0
    FLICKER_TICKS = 5

    HEALTH_BAR_SIZE = (200, 16)
    HEALTH_COLOR = (46, 204, 113)
    HEALTH_LOW_COLOR = (231, 76, 60)
    HEALTH_BG_COLOR = (40, 40, 50)
    GAME_OVER_COLOR = (255, 60, 60)
    VICTORY_COLOR = (255, 215, 0)

    def __init__(self, assets: 'AssetProvider'):
        self._assets = assets
        self._scaled: Dict[Tuple[str, int, int], pygame.Surface] = {}
        self._tinted: Dict[EnemyKind, pygame.Surface] = {}
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _image(self, name: str, width: float, height: float) -> Optional[pygame.Surface]:
        """Asset scaled to an entity's size (cached)."""
        key = (name, int(width), int(height))
        if key not in self._scaled:
            image = self._assets.get(name)
            if image is None:
                return None
            if image.get_size() != (key[1], key[2]):
                image = pygame.transform.scale(image, (key[1], key[2]))
            self._scaled[key] = image
        return self._scaled[key]

    def _text(self, screen: pygame.Surface, text: str, size: int, color, center) -> None:
        surface = self._font(size).render(text, True, color)
        screen.blit(surface, surface.get_rect(center=center))

    def _dim(self, screen: pygame.Surface) -> None:
        shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        shade.fill(OVERLAY_COLOR)
        screen.blit(shade, (0, 0))

    # =========================================================================
    # Entities
    # =========================================================================

    def render_background(self, screen: pygame.Surface, level_index: int) -> None:
        image = self._assets.background(level_index)
        if image is None:
            screen.fill(BACKGROUND_COLOR)
            return
        if image.get_size() != screen.get_size():
            image = pygame.transform.scale(image, screen.get_size())
        screen.blit(image, (0, 0))

    def render_door(self, door: 'Door', screen: pygame.Surface) -> None:
        image = self._image('door', door.w, door.h)
        if image:
            screen.blit(image, (door.x, door.y))

    def render_treasure(self, treasure: 'Treasure', screen: pygame.Surface, tick: int) -> None:
        if treasure.collected:
            return
        image = self._image('treasure', treasure.w, treasure.h)
        if image:
            offset = 0.0
            if treasure.floating:
                offset = math.sin(tick / self.TREASURE_FLOAT_PERIOD) * self.FLOAT_AMPLITUDE
            screen.blit(image, (treasure.x, treasure.y + offset))

    def render_powerup(self, powerup: 'Powerup', screen: pygame.Surface, tick: int) -> None:
        if not powerup.active:
            return
        image = self._image(f"{powerup.kind.value}_powerup", powerup.w, powerup.h)
        if image:
            offset = math.sin(tick / self.POWERUP_FLOAT_PERIOD) * self.FLOAT_AMPLITUDE
            screen.blit(image, (powerup.x, powerup.y + offset))

    def render_enemy(self, enemy: 'Enemy', screen: pygame.Surface) -> None:
        image = self._image('enemy', enemy.w, enemy.h)
        if image is None:
            return
        tint = self.ENEMY_TINTS.get(enemy.kind)
        if tint is not None:
            tinted = self._tinted.get(enemy.kind)
            if tinted is None or tinted.get_size() != image.get_size():
                tinted = image.copy()
                tinted.fill(tint + (255,), special_flags=pygame.BLEND_RGBA_MULT)
                self._tinted[enemy.kind] = tinted
            image = tinted
        screen.blit(image, (enemy.x, enemy.y))

    def render_warrior(self, warrior: 'Warrior', screen: pygame.Surface, tick: int) -> None:
        image = self._image('warrior', warrior.w, warrior.h)
        if image is None:
            return
        if warrior.invincible and (tick // self.FLICKER_TICKS) % 2 == 0:
            image = image.copy()
            image.set_alpha(128)
        screen.blit(image, (warrior.x, warrior.y))

    def render_particles(self, particles: List['Particle'], screen: pygame.Surface) -> None:
        for particle in particles:
            radius = max(1, int(particle.size))
            dot = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
            alpha = int(255 * particle.alpha)
            pygame.draw.circle(dot, particle.color + (alpha,), (radius, radius), radius)
            screen.blit(dot, (particle.x - radius, particle.y - radius))

    # =========================================================================
    # Panels
    # =========================================================================

    def render_hud(self, screen: pygame.Surface, hud: 'HudDisplay') -> None:
        font = self._font(24)
        bar_w, bar_h = self.HEALTH_BAR_SIZE

        pygame.draw.rect(screen, self.HEALTH_BG_COLOR, (10, 10, bar_w, bar_h))
        fill_color = self.HEALTH_COLOR if hud.health_fraction > 0.3 else self.HEALTH_LOW_COLOR
        pygame.draw.rect(screen, fill_color, (10, 10, int(bar_w * hud.health_fraction), bar_h))
        pygame.draw.rect(screen, HUD_TEXT_COLOR, (10, 10, bar_w, bar_h), 1)

        lines = [
            f"Health: {hud.health}",
            f"Score: {hud.score}",
            f"Level: {hud.level_number}",
            f"Treasures: {hud.treasures}/{hud.treasure_quota}",
        ]
        y = 10 + bar_h + 6
        for line in lines:
            text = font.render(line, True, HUD_TEXT_COLOR)
            screen.blit(text, (10, y))
            y += text.get_height() + 2

    def render_loading(self, screen: pygame.Surface, progress: float) -> None:
        screen.fill(BACKGROUND_COLOR)
        w, h = screen.get_size()
        bar_w, bar_h = w // 2, 20
        x, y = (w - bar_w) // 2, h // 2

        self._text(screen, "Loading...", 36, HUD_TEXT_COLOR, (w // 2, y - 30))
        pygame.draw.rect(screen, self.HEALTH_BG_COLOR, (x, y, bar_w, bar_h))
        pygame.draw.rect(screen, self.HEALTH_COLOR, (x, y, int(bar_w * progress), bar_h))
        pygame.draw.rect(screen, HUD_TEXT_COLOR, (x, y, bar_w, bar_h), 1)
        self._text(screen, f"{int(progress * 100)}%", 24, HUD_TEXT_COLOR, (w // 2, y + bar_h + 20))

    def render_menu(self, screen: pygame.Surface) -> None:
        self._dim(screen)
        w, h = screen.get_size()
        self._text(screen, "WARRIOR ARENA", 64, self.VICTORY_COLOR, (w // 2, h // 2 - 80))
        self._text(screen, "Collect the treasure, then find the door", 28,
                   HUD_TEXT_COLOR, (w // 2, h // 2 - 20))
        self._text(screen, "Arrows/WASD to move  -  M to mute", 24,
                   HUD_TEXT_COLOR, (w // 2, h // 2 + 20))
        self._text(screen, "Press ENTER or SPACE to start", 32,
                   HUD_TEXT_COLOR, (w // 2, h // 2 + 70))

    def render_game_over(self, screen: pygame.Surface, score: int, victory: bool) -> None:
        self._dim(screen)
        w, h = screen.get_size()
        if victory:
            self._text(screen, "YOU WIN!", 48, self.VICTORY_COLOR, (w // 2, h // 2 - 80))
            self._text(screen, "Congratulations! You completed all levels!", 28,
                       HUD_TEXT_COLOR, (w // 2, h // 2 - 35))
        else:
            self._text(screen, "GAME OVER!", 48, self.GAME_OVER_COLOR, (w // 2, h // 2 - 50))
        self._text(screen, f"Final Score: {score}", 24, HUD_TEXT_COLOR, (w // 2, h // 2))
        self._text(screen, "Press R to return to the menu", 24,
                   HUD_TEXT_COLOR, (w // 2, h // 2 + 40))

    def render_level_complete(self, screen: pygame.Surface, next_level: int) -> None:
        self._dim(screen)
        w, h = screen.get_size()
        self._text(screen, "LEVEL COMPLETE!", 48, self.VICTORY_COLOR, (w // 2, h // 2 - 50))
        self._text(screen, f"Preparing level {next_level}...", 24,
                   HUD_TEXT_COLOR, (w // 2, h // 2))
