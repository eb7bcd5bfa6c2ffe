"""Particle entity for hit and pickup bursts."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Particle:
    """A short-lived visual particle.

    Attributes:
        x, y: Position
        vx, vy: Velocity in pixels per tick
        size: Square size in pixels
        color: RGB tuple
        life: Ticks left
        max_life: Starting life, used for fading
    """

    x: float
    y: float
    vx: float
    vy: float
    size: float
    color: Tuple[int, int, int]
    life: float
    max_life: float

    @property
    def alpha(self) -> float:
        """Opacity in [0, 1], fading with remaining life."""
        if self.max_life <= 0:
            return 0.0
        return max(0.0, min(1.0, self.life / self.max_life))

    @property
    def is_alive(self) -> bool:
        return self.life > 0

    def update(self) -> None:
        self.x += self.vx
        self.y += self.vy
        self.life -= 1
