"""Directional control state.

Holds which direction actions are currently held. The simulation samples
velocity() once per tick.
"""

from dataclasses import dataclass
from typing import Tuple

from arena.games.input import InputEvent


@dataclass
class ControlState:
    """Held direction flags, set by press and cleared by release."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def apply(self, event: InputEvent, accept_presses: bool = True) -> bool:
        """Update flags from a direction event.

        Releases always apply. Presses only apply when accept_presses is set.

        Returns:
            True if the event was a direction action
        """
        if not event.action.is_direction:
            return False
        if event.pressed and not accept_presses:
            return True
        setattr(self, event.action.value, event.pressed)
        return True

    def clear(self) -> None:
        self.up = self.down = self.left = self.right = False

    def velocity(self, speed: float) -> Tuple[float, float]:
        """Velocity for the held directions. Opposite keys cancel out."""
        dx = (int(self.right) - int(self.left)) * speed
        dy = (int(self.down) - int(self.up)) * speed
        return dx, dy
