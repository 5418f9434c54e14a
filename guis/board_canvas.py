"""
BoardCanvas - interactive Tk canvas for a GameState.
Forwards point clicks into the game and redraws from its state.
"""
import tkinter as tk
from typing import Callable, Optional

from core.game_state import GameState
from render.board_render import BOARD_COLOR, BoardRenderer


class BoardCanvas:
    """Interactive canvas for setting up and playing out a tsumego position."""

    def __init__(self, parent: tk.Widget, game: GameState, renderer: Optional[BoardRenderer] = None):
        """Initialize the board canvas."""
        self.renderer = renderer or BoardRenderer()
        side = self.renderer.board_pixels(game.size)
        self.canvas = tk.Canvas(parent, width=side, height=side, bg=BOARD_COLOR,
                                highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self.game: GameState = game

        # Callbacks
        self.on_game_change: Optional[Callable] = None
        self.position_callback: Optional[Callable] = None

        self._setup_event_bindings()
        self.redraw()

    def _setup_event_bindings(self):
        """Set up mouse event handlers."""
        self.canvas.bind("<Button-1>", self._on_left_click)
        self.canvas.bind("<Motion>", self._on_mouse_motion)
        self.canvas.bind("<Leave>", self._on_mouse_leave)

    def set_game(self, game: GameState):
        """Display and interact with a different game (e.g. after a new board)."""
        self.game = game
        side = self.renderer.board_pixels(game.size)
        self.canvas.config(width=side, height=side)
        self.redraw()

    def set_change_callback(self, callback: Callable):
        """Set callback function to be called when the game changes."""
        self.on_game_change = callback

    def set_position_callback(self, callback: Callable):
        """Set position update callback for status bar."""
        self.position_callback = callback

    def _notify_game_change(self):
        if self.on_game_change:
            self.on_game_change()

    def _on_left_click(self, event):
        """Handle left mouse clicks."""
        point = self.renderer.pixel_to_point(event.x, event.y, self.game.size)
        if point is None:
            return

        if self.game.handle_click(*point):
            self.redraw()
            self._notify_game_change()

    def _on_mouse_motion(self, event):
        if self.position_callback is None:
            return
        point = self.renderer.pixel_to_point(event.x, event.y, self.game.size)
        if point is None:
            self.position_callback()
        else:
            self.position_callback(*point)

    def _on_mouse_leave(self, event):
        if self.position_callback:
            self.position_callback()

    def redraw(self):
        """Completely redraw the board on the canvas."""
        self.canvas.delete("all")
        size = self.game.size

        for row in range(size):
            for col in range(size):
                self.renderer.draw_point_lines(self.canvas, row, col, size)

        for row in range(size):
            for col in range(size):
                point = self.game.point_at(row, col)
                if point.owner is None:
                    continue
                self.renderer.draw_stone(self.canvas, row, col, point.owner)
                if self.game.show_numbers and point.move_number is not None:
                    self.renderer.draw_number(self.canvas, row, col, point.move_number)

        last = self.game.last_move()
        if last is not None and not self.game.show_numbers:
            self.renderer.draw_last_move_marker(self.canvas, *last)
