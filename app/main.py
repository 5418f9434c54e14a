"""
Tsumego board creator application.
Builds the window: board canvas on the left, control panel on the right.
"""

import tkinter as tk
from tkinter import ttk, messagebox
import logging
import sys
import os
from typing import Optional

# Add project root to path first
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Then import project modules
from core.consts import DEFAULT_BOARD_SIZE, MAX_BOARD_SIZE, MIN_BOARD_SIZE
from core.game_state import GameState
from core.types import Mode, Player
from guis.board_canvas import BoardCanvas
from guis.status_bar import EnhancedStatusBar
from guis.toggle_button import ActionButton, ToggleButton, ToggleSide

CONTROLS_COLOR = "#808080"
CONTROLS_WIDTH = 220

logger = logging.getLogger(__name__)


class TsumegoApp:
    """Board editor/player for tsumego positions."""

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        """Initialize the application."""
        self.root = tk.Tk()
        self.root.title("Tsumego")
        self.root.resizable(False, False)

        # Application state
        self.game: GameState = GameState(size)

        # UI Components
        self.canvas: Optional[BoardCanvas] = None
        self.toggles = []
        self.size_var = tk.StringVar(value=str(size))
        self.enhanced_status_bar = EnhancedStatusBar(self.root)

        self._create_ui()
        self._update_status()

    def _create_ui(self):
        """Create the user interface."""
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True)

        board_panel = ttk.Frame(main_frame)
        board_panel.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        controls_panel = tk.Frame(main_frame, width=CONTROLS_WIDTH, bg=CONTROLS_COLOR)
        controls_panel.pack(side=tk.RIGHT, fill=tk.Y)
        controls_panel.pack_propagate(False)

        self.canvas = BoardCanvas(board_panel, self.game)
        self.canvas.set_change_callback(self._on_game_change)
        self.canvas.set_position_callback(self.enhanced_status_bar.update_position)

        self._create_control_panel(controls_panel)

    def _section_label(self, parent, text: str):
        tk.Label(parent, text=text, bg=CONTROLS_COLOR).pack(fill=tk.X, pady=(12, 4))

    def _add_toggle(self, parent, left: ToggleSide, right: ToggleSide):
        toggle = ToggleButton(parent, left, right, on_change=self._on_game_change)
        toggle.pack(fill=tk.X, padx=6)
        self.toggles.append(toggle)

    def _create_control_panel(self, parent):
        """Create the control panel: player, mode, numbers, reset, new board."""
        self._section_label(parent, "Current Player")
        self._add_toggle(
            parent,
            ToggleSide("Black", lambda: self.game.current_player == Player.BLACK,
                       lambda: self.game.set_current_player(Player.BLACK), "#000000", "#ffffff"),
            ToggleSide("White", lambda: self.game.current_player == Player.WHITE,
                       lambda: self.game.set_current_player(Player.WHITE), "#ffffff", "#000000"),
        )

        self._section_label(parent, "Mode")
        self._add_toggle(
            parent,
            ToggleSide("Setup", lambda: self.game.mode == Mode.SETUP,
                       lambda: self.game.set_mode(Mode.SETUP), "#00a000", "#ffffff"),
            ToggleSide("Play", lambda: self.game.mode == Mode.PLAY,
                       lambda: self.game.set_mode(Mode.PLAY), "#c00000", "#ffffff"),
        )

        self._section_label(parent, "Display Numbers")
        self._add_toggle(
            parent,
            ToggleSide("Yes", lambda: self.game.show_numbers,
                       lambda: self.game.set_show_numbers(True), "#000000", "#ffffff"),
            ToggleSide("No", lambda: not self.game.show_numbers,
                       lambda: self.game.set_show_numbers(False), "#000000", "#ffffff"),
        )

        tk.Frame(parent, height=12, bg=CONTROLS_COLOR).pack()
        ActionButton(parent, "Reset", self._reset_action, "#000000", "#ffffff").pack(padx=6, pady=4)
        ActionButton(parent, "Preview Figure", self._show_figure, "#000000", "#ffffff").pack(padx=6, pady=4)

        # New board section
        self._section_label(parent, f"Board Size ({MIN_BOARD_SIZE}-{MAX_BOARD_SIZE})")
        ttk.Entry(parent, textvariable=self.size_var, width=6).pack(pady=(0, 4))
        ActionButton(parent, "New Board", self._create_new_board, "#000000", "#ffffff").pack(padx=6)

    def _reset_action(self):
        """Clear recorded moves if there are any, otherwise start over."""
        what = self.game.handle_reset()
        logger.info("Reset button cleared %s", "recorded moves" if what == "moves" else "the board")
        self._on_game_change()

    def _create_new_board(self):
        """Replace the game with an empty board of the entered size."""
        try:
            size = int(self.size_var.get())
        except ValueError:
            messagebox.showerror("Invalid Input", "Please enter a valid integer board size.")
            return

        if size < MIN_BOARD_SIZE or size > MAX_BOARD_SIZE:
            messagebox.showerror("Invalid Size",
                                 f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}.")
            return

        # Confirm if the current board has stones
        if self.game.get_statistics()["empty"] != self.game.size ** 2:
            if not messagebox.askyesno("New Board", "Current position will be lost. Continue?"):
                return

        self.game = GameState(size)
        self.canvas.set_game(self.game)
        self._on_game_change()

    def _show_figure(self):
        """Open a matplotlib preview of the current position."""
        import matplotlib.pyplot as plt
        from guis.board_figure import BoardFigureRenderer

        BoardFigureRenderer().render_board(self.game)
        plt.tight_layout()
        plt.show(block=False)

    def _on_game_change(self):
        """Handle game state changes."""
        self.canvas.redraw()
        for toggle in self.toggles:
            toggle.refresh()
        self._update_status()

    def _update_status(self):
        """Update status bar with current board statistics."""
        stats = self.game.get_statistics()
        status_parts = [
            f"{self.game.mode.value.title()} Mode",
            f"To play: {self.game.current_player.value.title()}",
            f"Setup: {stats['black_setup']}B/{stats['white_setup']}W",
            f"Moves: {stats['moves']}",
        ]
        self.enhanced_status_bar.update_main_status(" | ".join(status_parts))

        errors = [e for e in self.game.validate() if e.severity == "error"]
        self.enhanced_status_bar.update_validation_status(len(errors))

    def run(self):
        """Start the application."""
        self.root.mainloop()


def main():
    """Main entry point."""
    logging.basicConfig(level=logging.INFO)
    try:
        app = TsumegoApp()
        app.run()
    except Exception as e:
        print(f"Error starting application: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
