"""
Board rendering utilities for Tkinter Canvas.
Maps board points to pixels and draws grid lines, stones and move numbers.
"""
from typing import Optional, Tuple
import tkinter as tk

from core.types import Player, StoneKind
from utils.colors import grey8

POINT_SIZE = 50.0          # Pixel size of one point's square cell
BOARD_COLOR = "#fcd060"
NUM_COLOR = "#b40000"
LAST_MOVE_COLOR = "#d03030"

LINE_WEIGHT = 5.0
LINE_COLOR = "black"

STONE_SIZE = 0.85          # Fraction of the largest stone that fits the cell
STONE_WEIGHT = 2.0         # Outline width


def stone_color(stone: StoneKind) -> str:
    """Fill colour for a stone; setup stones are drawn slightly muted."""
    if stone.as_player() is Player.BLACK:
        return grey8(40) if stone.setup else "#000000"
    return grey8(230) if stone.setup else "#ffffff"


def stone_outline_color(stone: StoneKind) -> str:
    """Outline colour for a stone."""
    if stone.as_player() is Player.BLACK:
        return grey8(65) if stone.setup else grey8(50)
    return grey8(200) if stone.setup else grey8(230)


class BoardRenderer:
    """Handles board geometry calculations and drawing on a Tk canvas."""

    def __init__(self, point_size: float = POINT_SIZE):
        """
        Initialize board renderer.

        Args:
            point_size: Width and height of one point's cell in pixels
        """
        self.point_size = point_size
        self.stone_radius = point_size / 2.0 * STONE_SIZE

    def board_pixels(self, size: int) -> float:
        """Width (and height) of a board with ``size`` points per side."""
        return self.point_size * size

    def point_to_pixel(self, row: int, col: int) -> Tuple[float, float]:
        """
        Convert board coordinates to the pixel centre of that point.

        Returns:
            (x, y) pixel coordinates
        """
        x = (col + 0.5) * self.point_size
        y = (row + 0.5) * self.point_size
        return x, y

    def pixel_to_point(self, pixel_x: float, pixel_y: float, size: int) -> Optional[Tuple[int, int]]:
        """
        Convert pixel coordinates to the board point whose cell contains them.
        Used for mouse click detection.

        Returns:
            (row, col), or None when the pixel lies outside the board
        """
        if pixel_x < 0 or pixel_y < 0:
            return None
        row = int(pixel_y // self.point_size)
        col = int(pixel_x // self.point_size)
        if row >= size or col >= size:
            return None
        return row, col

    def draw_point_lines(self, canvas: tk.Canvas, row: int, col: int, size: int) -> None:
        """
        Draw the two grid line segments crossing a point.

        Edge points only draw towards the board interior.
        """
        x, y = self.point_to_pixel(row, col)
        half = self.point_size / 2.0
        x0 = x if col == 0 else x - half
        x1 = x if col == size - 1 else x + half
        y0 = y if row == 0 else y - half
        y1 = y if row == size - 1 else y + half

        canvas.create_line(x, y0, x, y1, fill=LINE_COLOR, width=LINE_WEIGHT)
        canvas.create_line(x0, y, x1, y, fill=LINE_COLOR, width=LINE_WEIGHT)

    def draw_stone(self, canvas: tk.Canvas, row: int, col: int, stone: StoneKind) -> int:
        """
        Draw a stone centred on a point.

        Returns:
            Canvas item ID for the stone
        """
        x, y = self.point_to_pixel(row, col)
        r = self.stone_radius
        return canvas.create_oval(
            x - r, y - r, x + r, y + r,
            fill=stone_color(stone),
            outline=stone_outline_color(stone),
            width=STONE_WEIGHT
        )

    def draw_number(self, canvas: tk.Canvas, row: int, col: int, number: int,
                    color: str = NUM_COLOR) -> int:
        """
        Draw a move number in the centre of a point.

        Returns:
            Canvas item ID for the text
        """
        x, y = self.point_to_pixel(row, col)
        font_size = max(8, int(self.point_size / 3.5))
        return canvas.create_text(
            x, y,
            text=str(number),
            font=("Arial", font_size, "bold"),
            fill=color
        )

    def draw_last_move_marker(self, canvas: tk.Canvas, row: int, col: int) -> int:
        """Draw a small ring marking the most recent move."""
        x, y = self.point_to_pixel(row, col)
        r = self.stone_radius + 3
        return canvas.create_oval(x - r, y - r, x + r, y + r, outline=LAST_MOVE_COLOR, width=2)
