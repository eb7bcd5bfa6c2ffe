"""WarriorArena - Game Info for Registry.

Required for auto-discovery by a game registry.
"""


def get_game_mode(**kwargs):
    """Factory function to create WarriorArena game instance.

    Args:
        **kwargs: Game configuration options (from CLI)

    Returns:
        WarriorArenaMode instance
    """
    from games.WarriorArena.game_mode import WarriorArenaMode
    return WarriorArenaMode(**kwargs)
