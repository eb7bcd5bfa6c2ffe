"""
Audio cues and background music for WarriorArena.

Cues load from `<sounds_dir>/<cue>.wav` when the file exists and are
otherwise synthesised with numpy, so the game always has sound when a
mixer is available. Every failure degrades to silence with a warning.

Classes:
    AudioCue: The sound effects the game can trigger
    AudioCuePlayer: Plays cues and controls background music
"""

from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import numpy as np
import pygame

from arena.logging import get_logger
from games.WarriorArena import config

log = get_logger('audio')

SAMPLE_RATE = 22050
MUSIC_EXTENSIONS = ('.ogg', '.mp3', '.wav')


class AudioCue(Enum):
    """Sound effects, named after their sound file stem."""

    HIT = "hit"
    COLLECT = "collect"
    POWERUP = "powerup"
    WIN = "win"
    DOOR = "door"


# Synthesised fallback: list of (frequency Hz, duration s) notes, plus loudness
_TONES: Dict[AudioCue, Tuple[List[Tuple[float, float]], float]] = {
    AudioCue.HIT: ([(220.00, 0.08), (164.81, 0.10)], 0.35),
    AudioCue.COLLECT: ([(783.99, 0.06), (1046.50, 0.10)], 0.30),
    AudioCue.POWERUP: ([(523.25, 0.07), (659.25, 0.07), (783.99, 0.12)], 0.30),
    AudioCue.WIN: ([(523.25, 0.12), (659.25, 0.12), (783.99, 0.12), (1046.50, 0.25)], 0.35),
    AudioCue.DOOR: ([(392.00, 0.10), (293.66, 0.15)], 0.30),
}


def synthesize_tone(notes: List[Tuple[float, float]], loudness: float) -> np.ndarray:
    """Build a stereo int16 sample array for a short note sequence.

    Each note gets a short linear fade in and out to avoid clicks.

    Args:
        notes: (frequency, duration) pairs played back to back
        loudness: Peak amplitude as a fraction of full scale

    Returns:
        Array of shape (samples, 2)
    """
    parts = []
    for frequency, duration in notes:
        num_samples = int(SAMPLE_RATE * duration)
        t = np.linspace(0, duration, num_samples, False)
        wave = np.sin(2.0 * np.pi * frequency * t)

        envelope = np.ones(num_samples)
        fade_samples = max(1, int(num_samples * 0.1))
        envelope[:fade_samples] = np.linspace(0, 1, fade_samples)
        envelope[-fade_samples:] = np.linspace(1, 0, fade_samples)
        parts.append(wave * envelope)

    wave = np.concatenate(parts) if parts else np.zeros(1)
    wave = (wave * 32767 * loudness).astype(np.int16)
    return np.column_stack((wave, wave))


class AudioCuePlayer:
    """Fire-and-forget sound effects plus background music.

    Attributes:
        enabled: Global sound switch (the M key toggles it)
        available: Whether the mixer initialised
        sounds: Loaded cue sounds (None where loading failed)
    """

    def __init__(
        self,
        enabled: bool = True,
        sounds_dir: Optional[Union[str, Path]] = None,
        sfx_volume: float = config.SFX_VOLUME,
    ):
        self.enabled = enabled
        self.available = False
        self.sounds_dir = Path(sounds_dir) if sounds_dir else config.SOUNDS_DIR
        self.sfx_volume = sfx_volume
        self.sounds: Dict[AudioCue, Optional[pygame.mixer.Sound]] = {}
        self._music_path: Optional[Path] = None
        self._music_volume = config.MUSIC_VOLUME
        # Game-side music state, kept while muted so unmuting can catch up
        self._music_wanted = False
        self._music_paused = False
        # Whether the mixer has loaded and played the track
        self._music_started = False

        self._init_audio()

    def _init_audio(self) -> None:
        """Initialize the pygame mixer and load every cue."""
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            log.warning("Audio initialization failed, sound disabled: %s", e)
            self.enabled = False
            return

        self.available = True
        for cue in AudioCue:
            self.sounds[cue] = self._load_cue(cue)
            if self.sounds[cue] is not None:
                self.sounds[cue].set_volume(self.sfx_volume)

        self._music_path = self._find_music()

    def _load_cue(self, cue: AudioCue) -> Optional[pygame.mixer.Sound]:
        path = self.sounds_dir / f"{cue.value}.wav"
        if path.exists():
            try:
                return pygame.mixer.Sound(str(path))
            except (pygame.error, OSError) as e:
                log.warning("Could not load %s, using generated tone: %s", path, e)

        notes, loudness = _TONES[cue]
        try:
            return pygame.sndarray.make_sound(synthesize_tone(notes, loudness))
        except (pygame.error, ValueError) as e:
            log.warning("Could not generate %s sound: %s", cue.value, e)
            return None

    def _find_music(self) -> Optional[Path]:
        for ext in MUSIC_EXTENSIONS:
            path = self.sounds_dir / f"music{ext}"
            if path.exists():
                return path
        log.debug("No background music in %s", self.sounds_dir)
        return None

    def play(self, cue: AudioCue) -> None:
        """Play a cue.

        Safe to call even if audio is disabled or the cue failed to load.
        """
        if not self.enabled:
            return
        sound = self.sounds.get(cue)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as e:
            log.warning("Could not play %s sound: %s", cue.value, e)

    # =========================================================================
    # Music
    # =========================================================================

    def start_music(self, volume: float = config.MUSIC_VOLUME) -> None:
        """Start looping background music from the beginning.

        While muted the request is remembered and playback starts on unmute.
        """
        self._music_volume = volume
        self._music_wanted = True
        self._music_paused = False
        self._music_started = False
        if self.enabled:
            self._play_music()

    def pause_music(self) -> None:
        """Pause the music until the next start_music(). Unmuting keeps it paused."""
        self._music_paused = True
        self._mixer_pause()

    def stop_music(self) -> None:
        self._music_wanted = False
        self._music_paused = False
        if not self.available or not self._music_started:
            return
        try:
            pygame.mixer.music.stop()
        except pygame.error as e:
            log.warning("Could not stop music: %s", e)
        self._music_started = False

    def _play_music(self) -> None:
        """Bring the mixer in line with a wanted, unpaused track."""
        if not self._music_wanted or self._music_paused or self._music_path is None:
            return
        try:
            if self._music_started:
                pygame.mixer.music.unpause()
            else:
                pygame.mixer.music.load(str(self._music_path))
                pygame.mixer.music.set_volume(self._music_volume)
                pygame.mixer.music.play(loops=-1)
                self._music_started = True
        except pygame.error as e:
            log.warning("Could not play music %s: %s", self._music_path, e)

    def _mixer_pause(self) -> None:
        if not self.available or not self._music_started:
            return
        try:
            pygame.mixer.music.pause()
        except pygame.error as e:
            log.warning("Could not pause music: %s", e)

    # =========================================================================
    # Global switch
    # =========================================================================

    def set_enabled(self, enabled: bool) -> None:
        """Turn all sound on or off.

        Muting pauses the mixer but not the game's music state: unmuting
        resumes only music the game has not paused itself.
        """
        if enabled and not self.available:
            log.info("Audio unavailable, staying muted")
            return
        self.enabled = enabled
        if enabled:
            self._play_music()
        else:
            self._mixer_pause()

    def toggle(self) -> bool:
        """Flip the global sound switch.

        Returns:
            The new enabled state
        """
        self.set_enabled(not self.enabled)
        return self.enabled
