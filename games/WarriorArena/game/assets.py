"""Image loading for WarriorArena.

Images load one at a time so the loading screen can show progress. Any
image that fails to load is replaced by a colored placeholder with its
name written on it, so the game always has something to draw.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import pygame
from pydantic import BaseModel, ConfigDict, Field

from arena.logging import get_logger
from games.WarriorArena import config
from models import Color

log = get_logger('assets')

BACKGROUND_COUNT = 5


class AssetManifest(BaseModel):
    """Image paths for every sprite plus one background per level.

    Relative paths resolve against the provider's images directory.
    """
    warrior: str = "warrior.png"
    enemy: str = "enemy.png"
    treasure: str = "treasure.png"
    door: str = "door.png"
    health_powerup: str = "health_powerup.png"
    speed_powerup: str = "speed_powerup.png"
    invincibility_powerup: str = "invincibility_powerup.png"
    backgrounds: List[str] = Field(
        default_factory=lambda: [f"background{i}.png" for i in range(1, BACKGROUND_COUNT + 1)]
    )

    model_config = ConfigDict(frozen=True)

    def items(self) -> List[Tuple[str, str]]:
        """(asset name, path) pairs in load order."""
        named = [
            (name, getattr(self, name))
            for name in (
                'warrior', 'enemy', 'treasure', 'door',
                'health_powerup', 'speed_powerup', 'invincibility_powerup',
            )
        ]
        named.extend(
            (f"background{i}", path) for i, path in enumerate(self.backgrounds, start=1)
        )
        return named


def asset_category(name: str) -> str:
    """Placeholder category for an asset name."""
    if name.startswith('background'):
        return 'background'
    if name.endswith('_powerup'):
        return 'powerup'
    return name


class AssetProvider:
    """Loads manifest images incrementally and hands out surfaces.

    Usage:
        provider = AssetProvider(800, 600)
        provider.begin(AssetManifest())
        while not provider.is_complete:
            provider.load_next()
        screen.blit(provider.background(level_index), (0, 0))
    """

    def __init__(
        self,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
        images_dir: Optional[Union[str, Path]] = None,
    ):
        self._width = width
        self._height = height
        self._images_dir = Path(images_dir) if images_dir else config.IMAGES_DIR
        self._images: Dict[str, pygame.Surface] = {}
        self._pending: List[Tuple[str, str]] = []
        self._total = 0
        self._loaded = 0
        self._background_names: List[str] = []
        self.placeholders: List[str] = []

    def begin(self, manifest: AssetManifest) -> None:
        """Queue every manifest image for loading."""
        self._images.clear()
        self.placeholders.clear()
        self._pending = manifest.items()
        self._total = len(self._pending)
        self._loaded = 0
        self._background_names = [
            name for name, _ in self._pending if asset_category(name) == 'background'
        ]
        log.debug("Queued %d images from %s", self._total, self._images_dir)

    def load_next(self) -> Optional[str]:
        """Load the next queued image.

        Returns:
            Name of the asset handled, or None if nothing was queued
        """
        if not self._pending:
            return None
        name, path = self._pending.pop(0)
        self._images[name] = self._load_image(name, path)
        self._loaded += 1
        return name

    def load_all(self) -> None:
        while self.load_next() is not None:
            pass

    @property
    def progress(self) -> float:
        """Fraction of queued images handled, 0..1."""
        if self._total == 0:
            return 1.0
        return self._loaded / self._total

    @property
    def is_complete(self) -> bool:
        return not self._pending

    def get(self, name: str) -> Optional[pygame.Surface]:
        return self._images.get(name)

    def background(self, index: int) -> Optional[pygame.Surface]:
        """Background for a level index, wrapping past the last one."""
        if not self._background_names:
            return None
        name = self._background_names[index % len(self._background_names)]
        return self._images.get(name)

    def _load_image(self, name: str, path: str) -> pygame.Surface:
        image_path = Path(path)
        if not image_path.is_absolute():
            image_path = self._images_dir / image_path

        if not image_path.exists():
            log.warning("Image '%s' not found at %s, using placeholder", name, image_path)
            return self._make_placeholder(name)

        try:
            surface = pygame.image.load(str(image_path))
        except (pygame.error, OSError) as e:
            log.warning("Failed to load image '%s': %s", name, e)
            return self._make_placeholder(name)

        # convert_alpha() needs a display mode
        if pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        return surface

    def _make_placeholder(self, name: str) -> pygame.Surface:
        """Solid block in the category color with the name on it."""
        self.placeholders.append(name)
        category = asset_category(name)
        if category == 'background':
            size = (self._width, self._height)
        else:
            size = config.PLACEHOLDER_SIZE

        hex_color = config.PLACEHOLDER_COLORS.get(category, config.PLACEHOLDER_DEFAULT_COLOR)
        surface = pygame.Surface(size, pygame.SRCALPHA)
        surface.fill(Color.from_hex(hex_color).as_tuple)

        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(None, 14)
        label = font.render(name, True, (255, 255, 255))
        surface.blit(label, label.get_rect(center=(size[0] // 2, size[1] // 2)))
        return surface
