"""
Arena Game Framework

Shared runtime for single-screen pygame arcade games: logging, game state,
base game class, YAML level loading and keyboard input.
"""

__version__ = "1.0.0"

__all__ = ['__version__']
