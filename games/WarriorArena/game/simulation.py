"""Per-tick simulation step.

step() advances the session by exactly one tick and reports what happened
as GameEvents. It does not touch audio, the HUD or the state machine; the
game mode reacts to the returned events.
"""

from enum import Enum
from typing import List

from games.WarriorArena.config import (
    ENEMY_CHASE_DISTANCE,
    ENEMY_PATROL_MARGIN,
    ENEMY_DAMAGE,
    KNOCKBACK_DISTANCE,
    HIT_PARTICLE_COUNT,
    TREASURE_SCORE,
    PICKUP_PARTICLE_COUNT,
    HEALTH_POWERUP_AMOUNT,
    SPEED_BOOST_AMOUNT,
    SPEED_BOOST_TICKS,
    INVINCIBILITY_TICKS,
)
from .effects import TimedEffect, apply_effect, expire_effects
from .entities import Enemy, EnemyMode, Powerup, PowerupKind
from .particles import ParticleColors, spawn_burst, update_particles
from .physics import overlaps, clamp_to_arena, direction_between
from .session import ArenaSession


class GameEvent(Enum):
    """Things that can happen during one tick."""

    HIT = "hit"
    COLLECT = "collect"
    POWERUP = "powerup"
    DOOR = "door"
    DIED = "died"
    LEVEL_CLEARED = "level_cleared"


def step(session: ArenaSession) -> List[GameEvent]:
    """Advance the session by one tick.

    Only call while playing. The step stops early on DIED or
    LEVEL_CLEARED, so nothing else changes in the tick that ends a life
    or a level.

    Args:
        session: Session to advance

    Returns:
        Events in the order they happened
    """
    events: List[GameEvent] = []
    warrior = session.warrior
    session.tick += 1

    # Movement
    warrior.dx, warrior.dy = session.controls.velocity(warrior.speed)
    warrior.x += warrior.dx
    warrior.y += warrior.dy
    clamp_to_arena(warrior, session.width, session.height)

    # Timers
    expire_effects(warrior)
    warrior.tick_invincibility()

    # Enemies
    for enemy in session.enemies:
        if _update_enemy(session, enemy, events):
            events.append(GameEvent.DIED)
            return events

    # Treasures
    for treasure in session.treasures:
        if not treasure.collected and overlaps(warrior, treasure):
            treasure.collect()
            warrior.treasures += 1
            warrior.score += TREASURE_SCORE
            events.append(GameEvent.COLLECT)
            spawn_burst(
                session.particles, session.rng,
                treasure.x + treasure.w / 2, treasure.y + treasure.h / 2,
                ParticleColors.TREASURE, PICKUP_PARTICLE_COUNT,
            )

    # Powerups
    for powerup in session.powerups:
        if powerup.active and overlaps(warrior, powerup):
            powerup.consume()
            _apply_powerup(session, powerup)
            events.append(GameEvent.POWERUP)

    # Door
    if warrior.treasures >= session.treasure_quota and overlaps(warrior, session.door):
        events.append(GameEvent.DOOR)
        events.append(GameEvent.LEVEL_CLEARED)
        return events

    update_particles(session.particles)
    return events


def _update_enemy(session: ArenaSession, enemy: Enemy, events: List[GameEvent]) -> bool:
    """Move one enemy and resolve contact with the warrior.

    Returns:
        True if the warrior died from this enemy
    """
    warrior = session.warrior
    nx, ny, dist = direction_between(enemy, warrior)

    if dist < ENEMY_CHASE_DISTANCE:
        enemy.mode = EnemyMode.CHASE
        enemy.x += nx * enemy.speed
        enemy.y += ny * enemy.speed
    else:
        enemy.mode = EnemyMode.PATROL
        enemy.x += enemy.direction * enemy.speed
        if enemy.x < ENEMY_PATROL_MARGIN or enemy.x > session.width - ENEMY_PATROL_MARGIN:
            enemy.flip()

    if warrior.invincible or not overlaps(warrior, enemy):
        return False

    warrior.damage(ENEMY_DAMAGE)
    events.append(GameEvent.HIT)
    cx, cy = warrior.center
    spawn_burst(
        session.particles, session.rng, cx, cy,
        ParticleColors.HIT, HIT_PARTICLE_COUNT,
    )

    # Pushed away from the enemy; (0, 0) at zero distance
    warrior.x += nx * KNOCKBACK_DISTANCE
    warrior.y += ny * KNOCKBACK_DISTANCE
    clamp_to_arena(warrior, session.width, session.height)

    return warrior.is_dead


def _apply_powerup(session: ArenaSession, powerup: Powerup) -> None:
    warrior = session.warrior
    if powerup.kind == PowerupKind.HEALTH:
        warrior.heal(HEALTH_POWERUP_AMOUNT)
    elif powerup.kind == PowerupKind.SPEED:
        apply_effect(warrior, TimedEffect('speed', SPEED_BOOST_AMOUNT, SPEED_BOOST_TICKS))
    elif powerup.kind == PowerupKind.INVINCIBILITY:
        warrior.grant_invincibility(INVINCIBILITY_TICKS)

    spawn_burst(
        session.particles, session.rng,
        powerup.x + powerup.w / 2, powerup.y + powerup.h / 2,
        ParticleColors.for_powerup(powerup.kind), PICKUP_PARTICLE_COUNT,
    )
