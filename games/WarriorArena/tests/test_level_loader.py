"""Tests for level YAML loading and level population."""

import pytest
from pydantic import ValidationError

from games.WarriorArena.config import LEVELS_DIR
from games.WarriorArena.game.entities import Particle, EnemyKind, PowerupKind
from games.WarriorArena.game.level_loader import (
    LevelConfig,
    LevelConfigError,
    LevelTable,
    WarriorArenaLevelLoader,
    populate_level,
)
from games.WarriorArena.game.session import ArenaSession


@pytest.fixture
def loader():
    return WarriorArenaLevelLoader(LEVELS_DIR)


def write_level(path, name, enemies=1, treasures=1, powerups=1, speed=1.5):
    path.write_text(
        f"name: {name}\n"
        f"enemy_speed: {speed}\n"
        "spawn:\n"
        f"  enemies: {enemies}\n"
        f"  treasures: {treasures}\n"
        f"  powerups: {powerups}\n"
    )


class TestCampaign:
    """The shipped five-level campaign."""

    def test_campaign_table(self, loader):
        table = loader.load_table('campaign')
        rows = [
            (c.enemy_count, c.treasure_count, c.powerup_count, c.enemy_speed)
            for c in table
        ]
        assert rows == [
            (2, 3, 1, 1.5),
            (3, 4, 2, 1.5),
            (4, 5, 2, 2.0),
            (5, 6, 3, 2.1),
            (6, 7, 3, 2.2),
        ]

    def test_is_last(self, loader):
        table = loader.load_table()
        assert len(table) == 5
        assert table.is_last(4)
        assert not table.is_last(3)

    def test_levels_and_groups_listed(self, loader):
        assert loader.list_levels() == [f"level_0{i}" for i in range(1, 6)]
        assert loader.list_groups() == ['campaign']


class TestLevelFiles:
    """Validation of hand-written level files."""

    def test_missing_count_raises(self, tmp_path):
        (tmp_path / 'broken.yaml').write_text("name: Broken\nenemy_speed: 1.0\nspawn:\n  enemies: 2\n")
        with pytest.raises(LevelConfigError):
            WarriorArenaLevelLoader(tmp_path).load_level('broken')

    def test_negative_count_raises(self, tmp_path):
        write_level(tmp_path / 'neg.yaml', 'Neg', enemies=-1)
        with pytest.raises(LevelConfigError):
            WarriorArenaLevelLoader(tmp_path).load_level('neg')

    def test_zero_speed_raises(self, tmp_path):
        write_level(tmp_path / 'still.yaml', 'Still', speed=0)
        with pytest.raises(ValueError):
            WarriorArenaLevelLoader(tmp_path).load_level('still')

    def test_missing_level_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            WarriorArenaLevelLoader(tmp_path).load_level('nope')

    def test_group_loaded_as_level_raises(self, loader):
        with pytest.raises(ValueError, match="level group"):
            loader.load_level('campaign')

    def test_custom_group_order(self, tmp_path):
        write_level(tmp_path / 'a.yaml', 'A', enemies=1)
        write_level(tmp_path / 'b.yaml', 'B', enemies=4)
        (tmp_path / 'reverse.yaml').write_text("group: true\nname: Reverse\nlevels:\n  - b\n  - a\n")

        table = WarriorArenaLevelLoader(tmp_path).load_table('reverse')
        assert [c.name for c in table] == ['B', 'A']

    def test_config_is_frozen(self):
        config = LevelConfig(enemy_count=1, treasure_count=1, powerup_count=1, enemy_speed=1.0)
        with pytest.raises(ValidationError):
            config.enemy_count = 5


class TestPopulateLevel:
    """Spawning entities for a level."""

    def test_counts_for_first_level(self, loader):
        session = ArenaSession.create(loader.load_table(), seed=1)
        config = populate_level(session, 0)

        assert config.enemy_count == 2
        assert len(session.enemies) == 2
        assert len(session.treasures) == 3
        assert len(session.powerups) == 1
        assert session.level_index == 0

    def test_spawn_margins(self, loader):
        session = ArenaSession.create(loader.load_table(), seed=99)
        populate_level(session, 4)

        for enemy in session.enemies:
            assert 100 <= enemy.x <= 700 and 100 <= enemy.y <= 500
            assert enemy.direction in (1, -1)
            assert enemy.speed == 2.2
            assert isinstance(enemy.kind, EnemyKind)
        for treasure in session.treasures:
            assert 150 <= treasure.x <= 650 and 150 <= treasure.y <= 450
            assert not treasure.collected
        for powerup in session.powerups:
            assert 100 <= powerup.x <= 700 and 100 <= powerup.y <= 500
            assert powerup.active
            assert isinstance(powerup.kind, PowerupKind)

    def test_resets_door_and_particles_only(self, loader):
        session = ArenaSession.create(loader.load_table(), seed=3)
        session.door.x = 0
        session.particles.append(Particle(0, 0, 0, 0, 2, (0, 0, 0), 10, 10))
        session.warrior.x = 321
        session.warrior.score = 400

        populate_level(session, 1)

        assert (session.door.x, session.door.y) == (750, 380)
        assert session.particles == []
        assert session.warrior.x == 321
        assert session.warrior.score == 400

    def test_seeded_placement_is_reproducible(self, loader):
        table = loader.load_table()
        a = ArenaSession.create(table, seed=42)
        b = ArenaSession.create(table, seed=42)
        populate_level(a, 2)
        populate_level(b, 2)
        assert [(e.x, e.y, e.kind) for e in a.enemies] == [(e.x, e.y, e.kind) for e in b.enemies]

    @pytest.mark.parametrize("index", [-1, 5, 12])
    def test_index_out_of_range(self, loader, index):
        session = ArenaSession.create(loader.load_table(), seed=1)
        with pytest.raises(IndexError):
            populate_level(session, index)

    def test_arena_too_small(self, loader):
        session = ArenaSession.create(loader.load_table(), width=300, height=600, seed=1)
        with pytest.raises(ValueError):
            populate_level(session, 0)

    def test_empty_level(self):
        table = LevelTable([LevelConfig(enemy_count=0, treasure_count=0, powerup_count=0, enemy_speed=1)])
        session = ArenaSession.create(table, seed=1)
        populate_level(session, 0)
        assert session.enemies == [] and session.treasures == [] and session.powerups == []
