"""Colour palette of the viewer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An opaque RGB colour with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def as_tuple(self):
        """Return the channels as an (r, g, b) tuple."""
        return (self.r, self.g, self.b)

    def hex(self):
        """Return the colour as a '#rrggbb' string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


PANEL_COLOR = Color(54, 61, 74)
BUTTON_COLOR = Color(37, 43, 52)
BACKGROUND_COLOR = Color(33, 38, 46)
FONT_COLOR = Color(255, 255, 255)
SELECTED_ITEM = Color(55, 79, 102)
HOVERED_ITEM = Color(42, 54, 68)