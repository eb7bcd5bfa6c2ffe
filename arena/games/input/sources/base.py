"""InputSource: the interface every input backend implements."""
from abc import ABC, abstractmethod
from typing import List

from arena.games.input.input_event import InputEvent


class InputSource(ABC):
    """Produces InputEvents for the InputManager."""

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Return and forget the events queued since the last poll."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Collect raw input for this frame."""

    def clear(self) -> None:
        self.poll_events()
