"""
Shared models library for the arena games.

Provides the pydantic primitives used across the framework and games:
- Color: validated RGBA color with hex parsing

Usage:
    >>> from models import Color
"""

from .primitives import (
    Color,
)

__all__ = [
    'Color',
]
