"""Shared fixtures for WarriorArena tests."""

import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from unittest.mock import MagicMock, Mock, patch

import pygame
import pytest

from games.WarriorArena.config import TICK_SECONDS
from games.WarriorArena.game.assets import AssetProvider
from games.WarriorArena.game.audio import AudioCuePlayer
from games.WarriorArena.game.level_loader import LevelConfig, LevelTable
from games.WarriorArena.game.session import ArenaSession
from games.WarriorArena.game_mode import WarriorArenaMode


@pytest.fixture
def pygame_init():
    """Initialize pygame for testing."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def levels():
    """Two small levels: one treasure needed on the first."""
    return LevelTable([
        LevelConfig(name="One", enemy_count=2, treasure_count=1, powerup_count=1, enemy_speed=1.5),
        LevelConfig(name="Two", enemy_count=3, treasure_count=2, powerup_count=2, enemy_speed=2.0),
    ])


@pytest.fixture
def session(levels):
    """Empty session: no enemies, treasures or powerups spawned."""
    return ArenaSession.create(levels, 800, 600, seed=1234)


@pytest.fixture
def mock_mixer():
    """Mock pygame.mixer to prevent actual audio initialization."""
    with patch('pygame.mixer.init') as mock_init, \
         patch('pygame.mixer.Sound') as mock_sound, \
         patch('pygame.sndarray.make_sound') as mock_make, \
         patch('pygame.mixer.music') as mock_music:
        generated = MagicMock()
        mock_make.return_value = generated
        yield {
            'init': mock_init,
            'sound': mock_sound,
            'make_sound': mock_make,
            'generated': generated,
            'music': mock_music,
        }


@pytest.fixture
def mock_audio():
    return Mock(spec=AudioCuePlayer)


@pytest.fixture
def loaded_assets():
    """Asset provider stand-in that has already finished loading."""
    assets = Mock(spec=AssetProvider)
    assets.is_complete = True
    assets.progress = 1.0
    assets.placeholders = []
    assets.load_next.return_value = None
    return assets


@pytest.fixture
def game(mock_audio, loaded_assets):
    """Game mode on the real campaign with mocked audio and assets."""
    return WarriorArenaMode(seed=7, mute=False, audio=mock_audio, assets=loaded_assets)


def run_ticks(game, count):
    """Advance a game mode by exactly count fixed ticks."""
    for _ in range(count):
        game.update(TICK_SECONDS)


@pytest.fixture
def advance():
    """Callable that advances a game mode by a number of ticks."""
    return run_ticks
