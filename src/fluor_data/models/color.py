"""RGB color value type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB color.

    Attributes:
        red: Red channel, 0-255.
        green: Green channel, 0-255.
        blue: Blue channel, 0-255.
    """

    red: int = 255
    green: int = 255
    blue: int = 255

    def __post_init__(self):
        """Validate channel ranges."""
        for channel in ("red", "green", "blue"):
            value = getattr(self, channel)
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {channel} must be in [0, 255], got {value}")

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the channels as an (r, g, b) tuple."""
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Return the color as a '#rrggbb' string."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
