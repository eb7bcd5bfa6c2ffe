"""
Input abstraction layer for arena games.

Provides unified action-based input handling. Games react to InputActions
and never look at raw key codes, so the same game runs with any source.
"""

from arena.games.input.input_event import InputAction, InputEvent
from arena.games.input.input_manager import InputManager

__all__ = ['InputAction', 'InputEvent', 'InputManager']
