"""Routes InputEvents from the active source to the game."""
from typing import List, Optional

from arena.games.input.input_event import InputEvent
from arena.games.input.sources.base import InputSource


class InputManager:
    """Holds one swappable InputSource.

    Games only see InputEvents, so the source (keyboard today) can change
    at runtime without touching game logic. With no source every query is
    empty.
    """

    def __init__(self, source: Optional[InputSource] = None):
        self._source = source

    def set_source(self, source: Optional[InputSource]) -> None:
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        return self._source

    def has_source(self) -> bool:
        return self._source is not None

    def update(self, dt: float) -> None:
        """Let the source gather this frame's input."""
        if self._source:
            self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Events queued since the previous call."""
        return self._source.poll_events() if self._source else []

    def clear_events(self) -> None:
        """Discard anything queued, e.g. across a state change."""
        if self._source:
            self._source.clear()
