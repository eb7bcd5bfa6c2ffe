"""WarriorArena - Single-screen arena action game.

Features:
- Warrior moves with arrows/WASD, enemies patrol and chase
- Collect the level's treasure quota, then reach the door
- Health, speed and invincibility powerups
- Five-level campaign loaded from YAML level groups
"""

import time
from typing import Dict, List, Optional

import pygame

from arena.games import BaseGame, GameState
from arena.games.input import InputAction, InputEvent
from arena.logging import get_logger, emit_record

from .config import (
    SCREEN_WIDTH, SCREEN_HEIGHT,
    LEVELS_DIR, DEFAULT_LEVEL_GROUP,
    TICK_SECONDS, MAX_TICKS_PER_FRAME,
    LOADING_HOLD_TICKS, LEVEL_COMPLETE_HOLD_TICKS,
    HEALTH_BONUS_STEP, HEALTH_BONUS_POINTS,
    AUDIO_ENABLED, MUSIC_VOLUME, RANDOM_SEED,
)
from .game.assets import AssetManifest, AssetProvider
from .game.audio import AudioCue, AudioCuePlayer
from .game.hud import HudDisplay, Overlay, StatusDisplay
from .game.level_loader import LevelTable, WarriorArenaLevelLoader, populate_level
from .game.session import ArenaSession
from .game.simulation import GameEvent, step
from .game.skins import WarriorArenaSkin, ClassicSkin

log = get_logger('game_mode')

# Sound cue for each simulation event
_EVENT_CUES: Dict[GameEvent, AudioCue] = {
    GameEvent.HIT: AudioCue.HIT,
    GameEvent.COLLECT: AudioCue.COLLECT,
    GameEvent.POWERUP: AudioCue.POWERUP,
    GameEvent.DOOR: AudioCue.DOOR,
}


def level_bonus(health: int) -> int:
    """Score bonus for the health left when a level is cleared."""
    return (max(0, health) // HEALTH_BONUS_STEP) * HEALTH_BONUS_POINTS


class WarriorArenaMode(BaseGame):
    """Warrior Arena game mode.

    State machine:
        LOADING -> MENU          assets loaded, then a short hold
        MENU -> PLAYING          START
        PLAYING -> GAME_OVER     health reaches zero
        PLAYING -> LEVEL_COMPLETE  quota met and door reached
        LEVEL_COMPLETE -> PLAYING  after the hold, next level
        LEVEL_COMPLETE -> GAME_OVER  after the hold on the last level (victory)
        GAME_OVER -> MENU        RESTART

    Game logic runs at a fixed 60 ticks per second regardless of frame rate.
    """

    # Game metadata
    NAME = "Warrior Arena"
    DESCRIPTION = "Grab the treasure, dodge the guards, reach the door."
    VERSION = "1.0.0"
    AUTHOR = "WarriorArena Team"

    # Enable level support
    LEVELS_DIR = LEVELS_DIR
    DEFAULT_LEVEL_GROUP = DEFAULT_LEVEL_GROUP

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'classic',
            'choices': ['classic'],
            'help': 'Visual skin'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for entity placement'
        },
        {
            'name': '--mute',
            'action': 'store_true',
            'default': False,
            'help': 'Start with sound off (M toggles)'
        },
    ]

    def __init__(
        self,
        skin: str = 'classic',
        seed: Optional[int] = RANDOM_SEED,
        mute: bool = not AUDIO_ENABLED,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        audio: Optional[AudioCuePlayer] = None,
        hud: Optional[StatusDisplay] = None,
        assets: Optional[AssetProvider] = None,
        manifest: Optional[AssetManifest] = None,
        **kwargs,
    ):
        """Initialize WarriorArena game.

        Args:
            skin: Visual skin to use
            seed: Random seed (None = nondeterministic)
            mute: Start with audio switched off
            width: Arena width
            height: Arena height
            audio: Audio player (created if omitted)
            hud: Status display (HudDisplay if omitted)
            assets: Asset provider (created if omitted)
            manifest: Images to load (default manifest if omitted)
            **kwargs: Base game args (level_group, list_levels)
        """
        # Set before super().__init__() because it may call _apply_level_group
        self._width = width
        self._height = height
        self._seed = seed
        self._levels: Optional[LevelTable] = None

        super().__init__(**kwargs)

        if self._levels is None:
            self._levels = self._level_loader.load_table(DEFAULT_LEVEL_GROUP)

        self._session = ArenaSession.create(self._levels, width, height, seed)
        self._state = GameState.LOADING
        self._hold_ticks = LOADING_HOLD_TICKS
        self._accumulator = 0.0
        self._frame_tick = 0
        self._victory = False

        self._audio = audio if audio is not None else AudioCuePlayer(enabled=not mute)
        if mute:
            self._audio.set_enabled(False)
        self._hud = hud if hud is not None else HudDisplay()

        self._assets = assets if assets is not None else AssetProvider(width, height)
        self._assets.begin(manifest or AssetManifest())

        skin_class = {'classic': ClassicSkin}.get(skin, ClassicSkin)
        self._skin: WarriorArenaSkin = skin_class(self._assets)

    def _create_level_loader(self) -> WarriorArenaLevelLoader:
        return WarriorArenaLevelLoader(self.LEVELS_DIR)

    def _apply_level_group(self, group) -> None:
        self._levels = self._level_loader.load_table(group.slug)
        log.info("Playing '%s' (%d levels)", group.name, len(self._levels))

    # =========================================================================
    # Accessors
    # =========================================================================

    def _get_internal_state(self) -> GameState:
        return self._state

    def get_score(self) -> int:
        return self._session.warrior.score

    @property
    def session(self) -> ArenaSession:
        return self._session

    @property
    def levels(self) -> LevelTable:
        return self._levels

    @property
    def hud(self) -> StatusDisplay:
        return self._hud

    @property
    def audio(self) -> AudioCuePlayer:
        return self._audio

    @property
    def assets(self) -> AssetProvider:
        return self._assets

    @property
    def victory(self) -> bool:
        """True once the final level has been cleared."""
        return self._victory

    # =========================================================================
    # Input
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Apply input actions.

        Direction presses only count while playing; releases always apply.
        START and RESTART are ignored outside MENU and GAME_OVER.
        """
        controls = self._session.controls
        for event in events:
            if event.action.is_direction:
                controls.apply(event, accept_presses=self._state.accepts_movement)
                continue

            if not event.pressed:
                continue

            if event.action == InputAction.MUTE:
                enabled = self._audio.toggle()
                log.info("Sound %s", "on" if enabled else "off")
            elif event.action == InputAction.START and self._state == GameState.MENU:
                self._start_game()
            elif event.action == InputAction.RESTART and self._state == GameState.GAME_OVER:
                self._enter_menu()

    # =========================================================================
    # Update
    # =========================================================================

    def update(self, dt: float) -> None:
        """Feed elapsed time into the fixed-step clock and run due ticks.

        Loading advances one asset per call, independent of ticks.
        """
        if self._state == GameState.LOADING:
            self._load_next_asset()

        self._accumulator += dt
        ticks = int(self._accumulator / TICK_SECONDS)
        if ticks > MAX_TICKS_PER_FRAME:
            # Too far behind; drop the backlog instead of spiralling
            ticks = MAX_TICKS_PER_FRAME
            self._accumulator = 0.0
        else:
            self._accumulator -= ticks * TICK_SECONDS

        for _ in range(ticks):
            self._tick()

    def _tick(self) -> None:
        self._frame_tick += 1

        if self._state == GameState.LOADING:
            if self._assets.is_complete:
                self._hold_ticks -= 1
                if self._hold_ticks <= 0:
                    self._enter_menu()

        elif self._state == GameState.PLAYING:
            self._handle_events(step(self._session))

        elif self._state == GameState.LEVEL_COMPLETE:
            self._hold_ticks -= 1
            if self._hold_ticks <= 0:
                self._advance_level()

    def _load_next_asset(self) -> None:
        name = self._assets.load_next()
        if name is not None:
            log.trace("Loaded asset '%s'", name)
        self._hud.set_loading_progress(self._assets.progress)

    def _handle_events(self, events: List[GameEvent]) -> None:
        for event in events:
            cue = _EVENT_CUES.get(event)
            if cue is not None:
                self._audio.play(cue)

        if events:
            self._refresh_hud()

        if GameEvent.DIED in events:
            self._game_over()
        elif GameEvent.LEVEL_CLEARED in events:
            self._level_complete()

    # =========================================================================
    # Transitions
    # =========================================================================

    def _enter_menu(self) -> None:
        if self._assets.placeholders:
            log.info("Using placeholders for: %s", ", ".join(self._assets.placeholders))
        self._state = GameState.MENU
        self._hud.show_menu()

    def _start_game(self) -> None:
        session = self._session
        session.warrior.reset()
        session.controls.clear()
        session.tick = 0
        self._victory = False

        populate_level(session, 0)
        self._refresh_hud()
        self._hud.hide_overlays()
        self._audio.start_music(MUSIC_VOLUME)

        self._state = GameState.PLAYING
        log.info("New game started")

    def _game_over(self) -> None:
        warrior = self._session.warrior
        self._state = GameState.GAME_OVER
        self._audio.pause_music()
        self._audio.play(AudioCue.HIT)
        self._hud.show_game_over(warrior.score, victory=False)

        log.info("Game over on level %d, score %d", self._session.level_index + 1, warrior.score)
        self._record('game_over', victory=False)

    def _level_complete(self) -> None:
        warrior = self._session.warrior
        bonus = level_bonus(warrior.health)
        warrior.score += bonus

        self._state = GameState.LEVEL_COMPLETE
        self._hold_ticks = LEVEL_COMPLETE_HOLD_TICKS
        self._audio.play(AudioCue.WIN)
        self._hud.set_score(warrior.score)
        self._hud.show_level_complete(self._session.level_index + 2)

        log.info(
            "Level %d complete, health bonus %d, score %d",
            self._session.level_index + 1, bonus, warrior.score,
        )
        self._record('level_complete', bonus=bonus)

    def _advance_level(self) -> None:
        session = self._session
        if session.is_last_level:
            self._victory = True
            self._state = GameState.GAME_OVER
            self._audio.pause_music()
            self._hud.show_game_over(session.warrior.score, victory=True)
            log.info("All levels complete, final score %d", session.warrior.score)
            self._record('game_over', victory=True)
            return

        session.warrior.reset_for_level()
        populate_level(session, session.level_index + 1)
        self._refresh_hud()
        self._hud.hide_overlays()
        self._state = GameState.PLAYING

    def _refresh_hud(self) -> None:
        session = self._session
        warrior = session.warrior
        self._hud.set_health(warrior.health, warrior.max_health)
        self._hud.set_score(warrior.score)
        self._hud.set_level(session.level_index + 1)
        self._hud.set_treasures(warrior.treasures, session.treasure_quota)

    def _record(self, event_type: str, **fields) -> None:
        session = self._session
        record = {
            'type': event_type,
            'timestamp': time.time(),
            'level': session.level_index + 1,
            'score': session.warrior.score,
            'health': session.warrior.health,
            'ticks': session.tick,
        }
        record.update(fields)
        emit_record('session', record)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        """Render the game."""
        skin = self._skin
        if self._state == GameState.LOADING:
            skin.render_loading(screen, self._assets.progress)
            return

        session = self._session
        tick = self._frame_tick
        skin.render_background(screen, session.level_index)
        skin.render_door(session.door, screen)
        for treasure in session.treasures:
            skin.render_treasure(treasure, screen, tick)
        for powerup in session.powerups:
            skin.render_powerup(powerup, screen, tick)
        for enemy in session.enemies:
            skin.render_enemy(enemy, screen)
        skin.render_warrior(session.warrior, screen, tick)
        skin.render_particles(session.particles, screen)

        # Panels are drawn from what the HUD was told to show
        hud = self._hud
        if not isinstance(hud, HudDisplay):
            return
        if hud.overlay != Overlay.MENU:
            skin.render_hud(screen, hud)
        skin.render_overlay(screen, hud)

    def reset(self) -> None:
        """Return to the menu with a fresh session."""
        self._session = ArenaSession.create(self._levels, self._width, self._height, self._seed)
        self._victory = False
        self._accumulator = 0.0
        self._audio.stop_music()
        if self._assets.is_complete:
            self._enter_menu()
        else:
            self._state = GameState.LOADING
            self._hold_ticks = LOADING_HOLD_TICKS
