"""
Two-sided toggle button built from Tk labels.
The active side is drawn in full colour, the inactive side greyed out.
"""
import tkinter as tk
from dataclasses import dataclass
from typing import Callable, Optional

from utils.colors import grey_color


@dataclass
class ToggleSide:
    """One half of a toggle: label, colours and the state hooks."""
    text: str
    is_active: Callable[[], bool]
    on_click: Callable[[], None]
    button_color: str
    text_color: str


class ToggleButton:
    """Pair of clickable labels sharing one frame."""

    def __init__(self, parent: tk.Widget, left: ToggleSide, right: ToggleSide,
                 on_change: Optional[Callable[[], None]] = None):
        self.frame = tk.Frame(parent, bg=parent.cget("bg"))
        self.sides = [left, right]
        self.on_change = on_change
        self.labels = []

        for index, side in enumerate(self.sides):
            label = tk.Label(self.frame, text=side.text, padx=10, pady=5,
                             relief=tk.RAISED, bd=2, cursor="hand2")
            label.grid(row=0, column=index, sticky="nsew", padx=4)
            label.bind("<Button-1>", lambda _event, s=side: self._clicked(s))
            self.frame.columnconfigure(index, weight=1)
            self.labels.append(label)

        self.refresh()

    def pack(self, **kwargs):
        self.frame.pack(**kwargs)

    def _clicked(self, side: ToggleSide):
        side.on_click()
        if self.on_change:
            self.on_change()
        self.refresh()

    def refresh(self):
        """Redraw both sides from the current state."""
        for side, label in zip(self.sides, self.labels):
            active = side.is_active()
            label.config(
                bg=side.button_color if active else grey_color(side.button_color),
                fg=side.text_color,
                relief=tk.SUNKEN if active else tk.RAISED,
            )


class ActionButton:
    """Single clickable label styled like a toggle side."""

    def __init__(self, parent: tk.Widget, text: str, on_click: Callable[[], None],
                 button_color: str, text_color: str):
        self.label = tk.Label(parent, text=text, padx=10, pady=5, bg=button_color,
                              fg=text_color, relief=tk.RAISED, bd=2, cursor="hand2")
        self.label.bind("<Button-1>", lambda _event: on_click())

    def pack(self, **kwargs):
        self.label.pack(**kwargs)
