"""Particle bursts for hits and pickups."""

import math
import random
from typing import List, Tuple

from models import Color

from .entities import Particle, PowerupKind


class ParticleColors:
    """Burst colors for each game event."""

    HIT = Color.from_hex('#ff0000')
    TREASURE = Color.from_hex('#ffcc00')
    POWERUP = {
        PowerupKind.HEALTH: Color.from_hex('#00ff00'),
        PowerupKind.SPEED: Color.from_hex('#00aaff'),
        PowerupKind.INVINCIBILITY: Color.from_hex('#ffff00'),
    }

    @classmethod
    def for_powerup(cls, kind: PowerupKind) -> Color:
        return cls.POWERUP[kind]


def spawn_burst(
    particles: List[Particle],
    rng: random.Random,
    x: float,
    y: float,
    color: Color,
    count: int,
) -> None:
    """Append count particles flying out from (x, y) in random directions.

    Speed is 1-4 px/tick, size 2-6 px and life 20-50 ticks.
    """
    rgb: Tuple[int, int, int] = color.as_rgb_tuple
    for _ in range(count):
        angle = rng.random() * math.pi * 2
        speed = 1 + rng.random() * 3
        size = 2 + rng.random() * 4
        life = 20 + rng.random() * 30
        particles.append(Particle(
            x=x,
            y=y,
            vx=math.cos(angle) * speed,
            vy=math.sin(angle) * speed,
            size=size,
            color=rgb,
            life=life,
            max_life=life,
        ))


def update_particles(particles: List[Particle]) -> List[Particle]:
    """Advance every particle one tick and drop the expired ones, in place.

    Returns:
        The same list, for chaining
    """
    for particle in particles:
        particle.update()
    particles[:] = [p for p in particles if p.is_alive]
    return particles
