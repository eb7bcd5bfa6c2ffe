"""Rendering smoke tests for the classic skin and HUD."""

from unittest.mock import patch

import pygame
import pytest

from arena.games import GameState
from arena.games.input import InputAction, InputEvent
from games.WarriorArena.game.assets import AssetManifest, AssetProvider
from games.WarriorArena.game.entities import Particle, Warrior
from games.WarriorArena.game.hud import HudDisplay, Overlay, StatusDisplay
from games.WarriorArena.game.skins import ClassicSkin
from games.WarriorArena.game_mode import WarriorArenaMode


@pytest.fixture
def screen(pygame_init):
    return pygame.display.set_mode((800, 600))


@pytest.fixture
def real_game(screen, mock_audio, tmp_path):
    assets = AssetProvider(800, 600, images_dir=tmp_path)
    return WarriorArenaMode(seed=3, mute=False, audio=mock_audio, assets=assets)


class TestGameRendering:

    def test_renders_every_state(self, real_game, screen, advance):
        real_game.render(screen)
        while real_game.state == GameState.LOADING:
            advance(real_game, 1)
        real_game.render(screen)

        real_game.handle_input([InputEvent(InputAction.START)])
        advance(real_game, 3)
        real_game.render(screen)

        real_game.session.warrior.health = 10
        real_game.session.enemies[0].x = real_game.session.warrior.x
        real_game.session.enemies[0].y = real_game.session.warrior.y
        advance(real_game, 1)
        assert real_game.state == GameState.GAME_OVER
        real_game.render(screen)

    def test_loading_reports_progress(self, real_game):
        real_game.update(0.0)
        assert real_game.hud.loading_progress == pytest.approx(1 / 12)


class TestClassicSkin:

    def test_invincible_warrior_flickers(self, screen, tmp_path):
        assets = AssetProvider(800, 600, images_dir=tmp_path)
        assets.begin(AssetManifest())
        assets.load_all()
        skin = ClassicSkin(assets)

        warrior = Warrior(x=100, y=100)
        warrior.grant_invincibility(300)

        screen.fill((0, 0, 0))
        skin.render_warrior(warrior, screen, tick=0)
        faded = screen.get_at((101, 101))
        screen.fill((0, 0, 0))
        skin.render_warrior(warrior, screen, tick=5)
        solid = screen.get_at((101, 101))

        assert solid[2] == 219
        assert faded[2] < solid[2]

    def test_particles_draw_with_alpha(self, screen, tmp_path):
        skin = ClassicSkin(AssetProvider(800, 600, images_dir=tmp_path))
        screen.fill((0, 0, 0))
        particle = Particle(x=50, y=50, vx=0, vy=0, size=4, color=(255, 0, 0), life=10, max_life=20)
        skin.render_particles([particle], screen)
        red = screen.get_at((50, 50))[0]
        assert 0 < red < 255


class TestOverlayPanels:
    """Panels follow the HUD's overlay, not the game state."""

    @pytest.fixture
    def skin(self, screen, tmp_path):
        skin = ClassicSkin(AssetProvider(800, 600, images_dir=tmp_path))
        with patch.object(skin, 'render_menu'), \
             patch.object(skin, 'render_game_over'), \
             patch.object(skin, 'render_level_complete'), \
             patch.object(skin, 'render_hud'):
            yield skin

    def test_no_panel_while_hidden(self, skin, screen):
        skin.render_overlay(screen, HudDisplay())
        skin.render_menu.assert_not_called()
        skin.render_game_over.assert_not_called()
        skin.render_level_complete.assert_not_called()

    def test_each_overlay_draws_its_panel(self, skin, screen):
        hud = HudDisplay()
        hud.show_menu()
        skin.render_overlay(screen, hud)
        skin.render_menu.assert_called_once_with(screen)

        hud.show_game_over(1200, victory=True)
        skin.render_overlay(screen, hud)
        skin.render_game_over.assert_called_once_with(screen, 1200, True)

        hud.show_level_complete(3)
        skin.render_overlay(screen, hud)
        skin.render_level_complete.assert_called_once_with(screen, 3)

    def test_game_draws_from_hud_overlay(self, real_game, screen, advance):
        while real_game.state == GameState.LOADING:
            advance(real_game, 1)
        skin = real_game._skin
        with patch.object(skin, 'render_menu') as menu, \
             patch.object(skin, 'render_game_over') as game_over, \
             patch.object(skin, 'render_hud') as status:
            real_game.render(screen)
            menu.assert_called_once_with(screen)
            status.assert_not_called()

            real_game.hud.show_game_over(50)
            real_game.render(screen)
            game_over.assert_called_once_with(screen, 50, False)
            status.assert_called_once_with(screen, real_game.hud)
            assert menu.call_count == 1


class TestHudDisplay:

    def test_status_display_hooks_are_noops(self):
        display = StatusDisplay()
        display.set_health(10, 100)
        display.show_game_over(100, victory=True)
        display.hide_overlays()

    def test_records_values(self):
        hud = HudDisplay()
        hud.set_health(45, 100)
        hud.set_treasures(2, 5)
        hud.show_level_complete(3)
        assert hud.health_fraction == pytest.approx(0.45)
        assert (hud.treasures, hud.treasure_quota) == (2, 5)
        assert hud.overlay == Overlay.LEVEL_COMPLETE
        assert hud.next_level == 3

    def test_loading_progress_clamped(self):
        hud = HudDisplay()
        hud.set_loading_progress(1.5)
        assert hud.loading_progress == 1.0
