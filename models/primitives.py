"""
Primitive value types shared by the framework and the games.
"""

from typing import Annotated, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field


Channel = Annotated[int, Field(ge=0, le=255)]


class Color(BaseModel):
    """Frozen RGBA colour, channels 0-255, alpha defaults to opaque.

    Colours are usually written as hex in config and converted once:

        >>> Color.from_hex('#3498db').as_rgb_tuple
        (52, 152, 219)
        >>> Color.from_hex('#fc0').as_tuple
        (255, 204, 0, 255)
    """
    model_config = ConfigDict(frozen=True)

    r: Channel
    g: Channel
    b: Channel
    a: Channel = 255

    @classmethod
    def from_hex(cls, value: str, alpha: int = 255) -> 'Color':
        """Parse '#rgb' or '#rrggbb' (leading '#' optional)."""
        digits = value.strip().lstrip('#')
        if len(digits) == 3:
            digits = ''.join(c + c for c in digits)
        if len(digits) != 6:
            raise ValueError(f"Expected '#rgb' or '#rrggbb', got {value!r}")
        try:
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            raise ValueError(f"Invalid hex digits in {value!r}") from None
        return cls(r=r, g=g, b=b, a=alpha)

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """(r, g, b, a) for pygame fills on SRCALPHA surfaces."""
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)
