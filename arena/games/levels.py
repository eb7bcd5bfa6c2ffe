"""
YAML level files and level groups.

A levels directory holds one file per level plus group files that list
levels in play order:

    # campaign.yaml
    group: true
    name: "Campaign"
    levels: [level_01, level_02, level_03]

Files are found by slug (file name without extension) anywhere under the
directory. A .json file with the same stem wins over the .yaml one.
Files whose name starts with "_" or "." are ignored when listing.

Each game subclasses LevelLoader and turns the raw mapping into its own
level type in _parse_level_data().
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

import yaml

from arena.logging import get_logger

log = get_logger('levels')

LEVEL_SUFFIXES = ('.json', '.yaml')


def read_level_file(path: Path) -> Dict[str, Any]:
    """Parse a level file, preferring a .json sibling of a .yaml path.

    Raises:
        FileNotFoundError: If neither file exists
    """
    json_path = path.with_suffix('.json')
    if json_path.exists():
        with open(json_path, 'r', encoding='utf-8') as f:
            return json.load(f) or {}
    if path.suffix == '.yaml' and path.exists():
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    raise FileNotFoundError(f"No level file at {path}")


@dataclass
class LevelInfo:
    """Listing metadata shared by every game's levels."""
    name: str
    slug: str
    description: str = ""
    difficulty: int = 1
    author: str = "unknown"
    file_path: Optional[Path] = None
    is_group: bool = False
    levels: List[str] = field(default_factory=list)

    @classmethod
    def from_data(cls, slug: str, data: Dict[str, Any], path: Path) -> 'LevelInfo':
        is_group = bool(data.get('group', False))
        return cls(
            name=data.get('name', slug),
            slug=slug,
            description=data.get('description', ''),
            difficulty=data.get('difficulty', 1),
            author=data.get('author', 'unknown'),
            file_path=path,
            is_group=is_group,
            levels=list(data.get('levels', [])) if is_group else [],
        )


@dataclass
class LevelGroup:
    """Ordered level slugs making up a campaign."""
    name: str
    slug: str
    description: str = ""
    author: str = "unknown"
    levels: List[str] = field(default_factory=list)
    file_path: Optional[Path] = None

    def __len__(self) -> int:
        return len(self.levels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.levels)


T = TypeVar('T')


class LevelLoader(Generic[T], ABC):
    """Finds, lists and loads the levels of one game."""

    def __init__(self, levels_dir: Path):
        self._levels_dir = Path(levels_dir)
        self._info_cache: Dict[str, LevelInfo] = {}
        self._group_cache: Dict[str, LevelGroup] = {}

    @property
    def levels_dir(self) -> Path:
        return self._levels_dir

    @abstractmethod
    def _parse_level_data(self, data: Dict[str, Any], file_path: Path) -> T:
        """Build the game's level object from a raw level mapping."""

    # -------------------------------------------------------------------------
    # Discovery
    # -------------------------------------------------------------------------

    def _find_level_file(self, slug: str) -> Optional[Path]:
        for suffix in LEVEL_SUFFIXES:
            direct = self._levels_dir / f"{slug}{suffix}"
            if direct.exists():
                return direct
        for suffix in LEVEL_SUFFIXES:
            match = next(self._levels_dir.rglob(f"{slug}{suffix}"), None)
            if match is not None:
                return match
        return None

    def _slugs(self) -> List[str]:
        if not self._levels_dir.is_dir():
            return []
        return sorted({
            path.stem
            for suffix in LEVEL_SUFFIXES
            for path in self._levels_dir.rglob(f"*{suffix}")
            if not path.name.startswith(('_', '.'))
        })

    def _infos(self) -> Iterator[LevelInfo]:
        for slug in self._slugs():
            info = self.get_level_info(slug)
            if info is not None:
                yield info

    def list_levels(self) -> List[str]:
        """Slugs of playable levels, sorted."""
        return [info.slug for info in self._infos() if not info.is_group]

    def list_groups(self) -> List[str]:
        """Slugs of level groups, sorted."""
        return [info.slug for info in self._infos() if info.is_group]

    def get_level_info(self, slug: str) -> Optional[LevelInfo]:
        """Metadata for a level or group, or None if missing or unreadable."""
        cached = self._info_cache.get(slug)
        if cached is not None:
            return cached

        path = self._find_level_file(slug)
        if path is None:
            return None
        try:
            data = read_level_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            log.warning("Skipping unreadable level '%s': %s", slug, e)
            return None

        info = LevelInfo.from_data(slug, data, path)
        self._info_cache[slug] = info
        return info

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def _read(self, slug: str, kind: str) -> Tuple[Dict[str, Any], Path]:
        path = self._find_level_file(slug)
        if path is None:
            raise FileNotFoundError(f"{kind} not found: {slug}")
        data = read_level_file(path)
        if not data:
            raise ValueError(f"Empty {kind.lower()} file: {slug}")
        return data, path

    def load_level(self, slug: str) -> T:
        """Load and parse one level.

        Raises:
            FileNotFoundError: No file for the slug
            ValueError: The file is empty or is a level group
        """
        data, path = self._read(slug, "Level")
        if data.get('group', False):
            raise ValueError(f"'{slug}' is a level group, not a level")
        return self._parse_level_data(data, path)

    def load_group(self, slug: str) -> LevelGroup:
        """Load a level group (cached).

        Raises:
            FileNotFoundError: No file for the slug
            ValueError: The file is empty, is not a group, or lists no levels
        """
        if slug in self._group_cache:
            return self._group_cache[slug]

        data, path = self._read(slug, "Level group")
        if not data.get('group', False):
            raise ValueError(f"'{slug}' is a level, not a group")
        info = LevelInfo.from_data(slug, data, path)
        if not info.levels:
            raise ValueError(f"Level group '{slug}' lists no levels")

        group = LevelGroup(
            name=info.name,
            slug=slug,
            description=info.description,
            author=info.author,
            levels=info.levels,
            file_path=path,
        )
        self._group_cache[slug] = group
        return group
