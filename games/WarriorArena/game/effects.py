"""Timed stat effects.

A TimedEffect adds a fixed amount to one warrior attribute and takes back
exactly that amount when it runs out. Several effects on the same
attribute stack and expire independently.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class TimedEffect:
    """A temporary bonus on a numeric attribute.

    Attributes:
        attribute: Name of the attribute on the target (e.g. 'speed')
        amount: Value added while the effect is active
        remaining: Ticks left before the effect expires
    """

    attribute: str
    amount: float
    remaining: int

    def tick(self) -> bool:
        """Count down one tick.

        Returns:
            True once the effect has expired
        """
        if self.remaining > 0:
            self.remaining -= 1
        return self.remaining <= 0


def apply_effect(target, effect: TimedEffect) -> None:
    """Add the effect's bonus to the target and start tracking it."""
    setattr(target, effect.attribute, getattr(target, effect.attribute) + effect.amount)
    target.effects.append(effect)


def expire_effects(target) -> List[TimedEffect]:
    """Tick every active effect and revert the ones that ran out.

    Returns:
        The effects that expired this tick
    """
    expired = [effect for effect in target.effects if effect.tick()]
    for effect in expired:
        setattr(target, effect.attribute, getattr(target, effect.attribute) - effect.amount)
        target.effects.remove(effect)
    return expired


def clear_effects(target) -> None:
    """Revert every active effect immediately."""
    for effect in list(target.effects):
        setattr(target, effect.attribute, getattr(target, effect.attribute) - effect.amount)
    target.effects.clear()
