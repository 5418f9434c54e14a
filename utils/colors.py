"""
Colour helpers for Tkinter drawing (Tk accepts '#rrggbb' strings).
"""
from typing import Tuple

GREY_KEEP = 0.6   # share of the original colour kept when greying out
GREY_LEVEL = 0.5


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert 0-255 channels to a '#rrggbb' string."""
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Convert a '#rrggbb' string to 0-255 channels."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb colour, got {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def grey8(level: int) -> str:
    """Grey with all three channels at ``level``."""
    return rgb_to_hex(level, level, level)


def grey_color(color: str) -> str:
    """Blend a colour towards mid-grey, used for inactive toggle sides."""
    def _grey(c: int) -> int:
        blended = (c / 255.0) * GREY_KEEP + GREY_LEVEL * (1.0 - GREY_KEEP)
        return int(round(blended * 255))

    r, g, b = hex_to_rgb(color)
    return rgb_to_hex(_grey(r), _grey(g), _grey(b))
