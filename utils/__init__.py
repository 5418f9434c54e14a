"""
Tsumego Board Creator - Utilities Package
Coordinate and colour helper functions.
"""
from .colors import grey8, grey_color, hex_to_rgb, rgb_to_hex
from .coords import coordinate_to_string

__all__ = ['grey8', 'grey_color', 'hex_to_rgb', 'rgb_to_hex',
           'coordinate_to_string']
