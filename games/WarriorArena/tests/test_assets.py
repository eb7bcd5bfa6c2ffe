"""Tests for incremental image loading and placeholders."""

import pygame
import pytest

from games.WarriorArena.game.assets import AssetManifest, AssetProvider, asset_category


@pytest.fixture
def provider(pygame_init, tmp_path):
    return AssetProvider(800, 600, images_dir=tmp_path)


class TestManifest:

    def test_default_items(self):
        names = [name for name, _ in AssetManifest().items()]
        assert names[:7] == [
            'warrior', 'enemy', 'treasure', 'door',
            'health_powerup', 'speed_powerup', 'invincibility_powerup',
        ]
        assert names[7:] == [f"background{i}" for i in range(1, 6)]

    @pytest.mark.parametrize("name,category", [
        ('warrior', 'warrior'),
        ('speed_powerup', 'powerup'),
        ('background3', 'background'),
        ('banner', 'banner'),
    ])
    def test_category(self, name, category):
        assert asset_category(name) == category


class TestLoading:

    def test_progress_is_incremental(self, provider):
        provider.begin(AssetManifest())
        assert provider.progress == 0.0
        assert not provider.is_complete

        assert provider.load_next() == 'warrior'
        assert provider.progress == pytest.approx(1 / 12)

        provider.load_all()
        assert provider.is_complete
        assert provider.progress == 1.0
        assert provider.load_next() is None

    def test_missing_images_become_placeholders(self, provider):
        provider.begin(AssetManifest())
        provider.load_all()

        assert len(provider.placeholders) == 12
        assert provider.get('warrior').get_size() == (50, 60)
        assert provider.get('background2').get_size() == (800, 600)
        assert provider.get('warrior').get_at((0, 0))[:3] == (52, 152, 219)
        assert provider.get('enemy').get_at((0, 0))[:3] == (231, 76, 60)
        assert provider.get('speed_powerup').get_at((0, 0))[:3] == (155, 89, 182)
        assert provider.get('background1').get_at((0, 0))[:3] == (52, 73, 94)

    def test_existing_image_is_loaded(self, provider, tmp_path):
        image = pygame.Surface((12, 14))
        image.fill((10, 20, 30))
        pygame.image.save(image, str(tmp_path / 'warrior.png'))

        provider.begin(AssetManifest())
        provider.load_all()

        assert 'warrior' not in provider.placeholders
        assert provider.get('warrior').get_size() == (12, 14)

    def test_corrupt_image_becomes_placeholder(self, provider, tmp_path):
        (tmp_path / 'door.png').write_bytes(b'not an image')
        provider.begin(AssetManifest())
        provider.load_all()
        assert 'door' in provider.placeholders
        assert provider.get('door').get_at((0, 0))[:3] == (46, 204, 113)

    def test_background_wraps(self, provider):
        provider.begin(AssetManifest(backgrounds=['a.png', 'b.png']))
        provider.load_all()
        assert provider.background(0) is provider.get('background1')
        assert provider.background(1) is provider.get('background2')
        assert provider.background(2) is provider.get('background1')

    def test_empty_manifest_is_complete(self, provider):
        provider.begin(AssetManifest(backgrounds=[]))
        provider.load_all()
        assert provider.background(0) is None
        assert provider.is_complete
