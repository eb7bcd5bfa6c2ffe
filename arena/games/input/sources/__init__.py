"""
Input source implementations.
"""

from arena.games.input.sources.base import InputSource
from arena.games.input.sources.keyboard import KeyboardInputSource, DEFAULT_KEY_MAP

__all__ = ['InputSource', 'KeyboardInputSource', 'DEFAULT_KEY_MAP']
