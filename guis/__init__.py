# guis/__init__.py
"""
Tsumego Board Creator - GUI Package
Tkinter interface components and figure rendering.
"""
from .board_canvas import BoardCanvas
from .status_bar import EnhancedStatusBar
from .toggle_button import ActionButton, ToggleButton, ToggleSide

__all__ = ['BoardCanvas', 'EnhancedStatusBar', 'ActionButton', 'ToggleButton', 'ToggleSide']
