import tkinter as tk
from tkinter import ttk
from typing import Optional

from utils.coords import coordinate_to_string


class EnhancedStatusBar:
    """Status bar with main, consistency and position zones."""

    def __init__(self, parent: tk.Widget):
        self.frame = ttk.Frame(parent)
        self.frame.pack(side=tk.BOTTOM, fill=tk.X)

        self._create_status_zones()

    def _create_status_zones(self):
        """Create different zones of the status bar."""
        # Main status (left side)
        self.main_status = tk.StringVar(value="Ready")
        main_label = ttk.Label(self.frame, textvariable=self.main_status,
                               relief=tk.SUNKEN, anchor=tk.W, padding=3)
        main_label.pack(side=tk.LEFT, fill=tk.X, expand=True)

        ttk.Separator(self.frame, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=2)

        self.validation_var = tk.StringVar(value="Consistent")
        validation_label = ttk.Label(self.frame, textvariable=self.validation_var,
                                     relief=tk.SUNKEN, anchor=tk.CENTER, padding=3, width=15)
        validation_label.pack(side=tk.LEFT)

        ttk.Separator(self.frame, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=2)

        self.position_var = tk.StringVar(value="")
        position_label = ttk.Label(self.frame, textvariable=self.position_var,
                                   relief=tk.SUNKEN, anchor=tk.E, padding=3, width=12)
        position_label.pack(side=tk.RIGHT)

    def update_main_status(self, status: str):
        """Update main status message."""
        self.main_status.set(status)

    def update_validation_status(self, errors: int):
        """Update the board consistency zone."""
        if errors > 0:
            self.validation_var.set(f"❌ {errors} errors")
        else:
            self.validation_var.set("✅ Consistent")

    def update_position(self, row: Optional[int] = None, col: Optional[int] = None):
        """Update mouse position info."""
        if row is not None and col is not None:
            self.position_var.set(f"({coordinate_to_string(row, col)})")
        else:
            self.position_var.set("")
