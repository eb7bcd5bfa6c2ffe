"""Tests for particle bursts."""

import math
import random

from games.WarriorArena.game.entities import Particle, PowerupKind
from games.WarriorArena.game.particles import ParticleColors, spawn_burst, update_particles


class TestSpawnBurst:

    def test_spawns_count_within_ranges(self):
        particles = []
        spawn_burst(particles, random.Random(5), 100, 200, ParticleColors.TREASURE, 50)

        assert len(particles) == 50
        for p in particles:
            assert (p.x, p.y) == (100, 200)
            assert 1 <= math.hypot(p.vx, p.vy) <= 4
            assert 2 <= p.size <= 6
            assert 20 <= p.life <= 50
            assert p.life == p.max_life
            assert p.color == (255, 204, 0)

    def test_appends_to_existing(self):
        particles = []
        rng = random.Random(1)
        spawn_burst(particles, rng, 0, 0, ParticleColors.HIT, 10)
        spawn_burst(particles, rng, 0, 0, ParticleColors.HIT, 15)
        assert len(particles) == 25


class TestUpdateParticles:

    def test_removes_expired(self):
        particles = [
            Particle(0, 0, 1, 0, 2, (0, 0, 0), life=1, max_life=30),
            Particle(0, 0, 1, 0, 2, (0, 0, 0), life=5, max_life=30),
        ]
        result = update_particles(particles)
        assert result is particles
        assert len(particles) == 1
        assert particles[0].life == 4
        assert particles[0].x == 1


class TestParticleColors:

    def test_powerup_colors(self):
        assert ParticleColors.for_powerup(PowerupKind.HEALTH).as_rgb_tuple == (0, 255, 0)
        assert ParticleColors.for_powerup(PowerupKind.SPEED).as_rgb_tuple == (0, 170, 255)
        assert ParticleColors.for_powerup(PowerupKind.INVINCIBILITY).as_rgb_tuple == (255, 255, 0)
