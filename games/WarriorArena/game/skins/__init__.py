"""WarriorArena skins for rendering."""

from .base import WarriorArenaSkin
from .classic import ClassicSkin

__all__ = [
    'WarriorArenaSkin',
    'ClassicSkin',
]
