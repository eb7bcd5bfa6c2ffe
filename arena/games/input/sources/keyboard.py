"""
Keyboard Input Source - Maps keys to input actions.

This is a shared module used by all games.
"""
import time
from typing import Dict, Iterable, List, Optional

import pygame

from arena.games.input.input_event import InputAction, InputEvent
from arena.games.input.sources.base import InputSource


DEFAULT_KEY_MAP: Dict[int, InputAction] = {
    pygame.K_UP: InputAction.UP,
    pygame.K_w: InputAction.UP,
    pygame.K_DOWN: InputAction.DOWN,
    pygame.K_s: InputAction.DOWN,
    pygame.K_LEFT: InputAction.LEFT,
    pygame.K_a: InputAction.LEFT,
    pygame.K_RIGHT: InputAction.RIGHT,
    pygame.K_d: InputAction.RIGHT,
    pygame.K_RETURN: InputAction.START,
    pygame.K_KP_ENTER: InputAction.START,
    pygame.K_SPACE: InputAction.START,
    pygame.K_r: InputAction.RESTART,
    pygame.K_ESCAPE: InputAction.QUIT,
    pygame.K_m: InputAction.MUTE,
}


class KeyboardInputSource(InputSource):
    """Keyboard input source.

    Converts pygame KEYDOWN/KEYUP events into InputEvents using a key map.
    Unmapped keys are dropped. Non-key events are re-posted to the pygame
    event queue for the main loop.
    """

    def __init__(self, key_map: Optional[Dict[int, InputAction]] = None):
        self._key_map = dict(key_map or DEFAULT_KEY_MAP)
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect key presses/releases."""
        self.feed(pygame.event.get())

    def feed(self, events: Iterable) -> None:
        """Translate a batch of pygame events."""
        for event in events:
            if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                action = self._key_map.get(event.key)
                if action is None:
                    continue
                self._event_queue.append(InputEvent(
                    action=action,
                    pressed=event.type == pygame.KEYDOWN,
                    timestamp=time.monotonic(),
                ))
            else:
                # Re-post non-key events for the main loop to handle
                pygame.event.post(event)

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
