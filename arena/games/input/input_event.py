"""
Input Event - Represents a single input action.

This is a shared module used by all games.
"""
from dataclasses import dataclass
from enum import Enum


class InputAction(Enum):
    """Logical actions a player can trigger."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    START = "start"
    RESTART = "restart"
    QUIT = "quit"
    MUTE = "mute"

    @property
    def is_direction(self) -> bool:
        return self in (
            InputAction.UP, InputAction.DOWN,
            InputAction.LEFT, InputAction.RIGHT,
        )


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    Represents an action being pressed or released at a specific time.
    All input sources must convert their events to this common format.

    Attributes:
        action: The logical action
        pressed: True on press, False on release
        timestamp: Time when the event occurred (seconds, from monotonic clock)
    """
    action: InputAction
    pressed: bool = True
    timestamp: float = 0.0

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        """String representation for debugging."""
        state = "down" if self.pressed else "up"
        return f"InputEvent({self.action.value} {state}, t={self.timestamp:.3f})"
