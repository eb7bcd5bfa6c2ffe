"""WarriorArena game entities."""

from .warrior import Warrior
from .enemy import Enemy, EnemyKind, EnemyMode
from .pickups import Treasure, Powerup, PowerupKind
from .door import Door
from .particle import Particle

__all__ = [
    'Warrior',
    'Enemy', 'EnemyKind', 'EnemyMode',
    'Treasure', 'Powerup', 'PowerupKind',
    'Door',
    'Particle',
]
