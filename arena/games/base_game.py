"""Base class for arena games.

A game declares its metadata and command-line options as class attributes
and implements the frame interface (handle_input / update / render). The
standalone runner builds its argparse parser from get_arguments() and
passes the parsed values back as constructor keyword arguments.

Games that ship YAML levels set LEVELS_DIR and override
_create_level_loader() and _apply_level_group(); the base class then adds
--level-group and --list-levels and loads the chosen group on startup.
"""
from abc import ABC, abstractmethod
from pathlib import Path
import sys
from typing import Any, ClassVar, Dict, List, Optional, TYPE_CHECKING

import pygame

from arena.games.game_state import GameState
from arena.logging import get_logger

if TYPE_CHECKING:
    from arena.games.levels import LevelGroup, LevelLoader

log = get_logger('base_game')

ArgumentSpec = Dict[str, Any]


class BaseGame(ABC):
    """Common interface between a game and its runner.

    Subclasses implement _get_internal_state, get_score, handle_input,
    update and render.
    """

    NAME: ClassVar[str] = "Unnamed Game"
    DESCRIPTION: ClassVar[str] = ""
    VERSION: ClassVar[str] = "1.0.0"
    AUTHOR: ClassVar[str] = "Unknown"

    # argparse definitions: {'name': '--flag', **add_argument kwargs}
    ARGUMENTS: ClassVar[List[ArgumentSpec]] = []

    LEVELS_DIR: ClassVar[Optional[Path]] = None
    DEFAULT_LEVEL_GROUP: ClassVar[Optional[str]] = None

    LEVEL_ARGUMENTS: ClassVar[List[ArgumentSpec]] = [
        {
            'name': '--level-group',
            'type': str,
            'default': None,
            'help': 'Level group to play (default: the game\'s campaign)',
        },
        {
            'name': '--list-levels',
            'action': 'store_true',
            'default': False,
            'help': 'Print the available levels and groups, then exit',
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[ArgumentSpec]:
        """Game arguments followed by the level arguments, first name wins."""
        specs = list(cls.ARGUMENTS)
        if cls.LEVELS_DIR is not None:
            specs += cls.LEVEL_ARGUMENTS

        unique: Dict[str, ArgumentSpec] = {}
        for spec in specs:
            unique.setdefault(spec['name'], spec)
        return list(unique.values())

    def __init__(self, level_group: Optional[str] = None, list_levels: bool = False, **kwargs):
        self._level_loader: Optional['LevelLoader'] = None
        self._current_group: Optional['LevelGroup'] = None

        if self.LEVELS_DIR is None:
            return

        self._level_loader = self._create_level_loader()
        if list_levels:
            self._print_levels()
            sys.exit(0)
        self._load_level_group(level_group or self.DEFAULT_LEVEL_GROUP)

    def _load_level_group(self, slug: Optional[str]) -> None:
        if not slug or self._level_loader is None:
            return
        try:
            group = self._level_loader.load_group(slug)
        except (FileNotFoundError, ValueError) as e:
            log.error("Cannot load level group '%s': %s", slug, e)
            return
        self._current_group = group
        self._apply_level_group(group)

    # =========================================================================
    # Frame interface
    # =========================================================================

    @property
    def state(self) -> GameState:
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        pass

    @abstractmethod
    def get_score(self) -> int:
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Apply this frame's InputEvents."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance by dt seconds of wall time."""

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        pass

    def reset(self) -> None:
        pass

    # =========================================================================
    # Levels
    # =========================================================================

    def _create_level_loader(self) -> Optional['LevelLoader']:
        return None

    def _apply_level_group(self, group: 'LevelGroup') -> None:
        pass

    @property
    def current_group(self) -> Optional['LevelGroup']:
        return self._current_group

    def _print_levels(self) -> None:
        loader = self._level_loader
        if loader is None:
            print(f"{self.NAME} has no levels")
            return

        rows = []
        for slug in loader.list_levels():
            info = loader.get_level_info(slug)
            stars = "*" * info.difficulty if info else ""
            rows.append(f"  {slug:24} {stars:5}  {info.name if info else ''}")
        for slug in loader.list_groups():
            info = loader.get_level_info(slug)
            count = len(info.levels) if info else 0
            rows.append(f"  {slug:24} group  {count} levels")

        print(f"\n{self.NAME} levels ({loader.levels_dir}):")
        print("\n".join(rows) if rows else "  (none)")
        print()
