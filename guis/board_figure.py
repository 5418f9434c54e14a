# guis/board_figure.py
"""
Board Figure Renderer
Draws a GameState on a matplotlib axis for a static preview of the position.

Key features:
- Grid lines drawn from the board size
- Setup stones shown muted, play stones in full colour
- Optional move numbers and a last-move ring
"""

import numpy as np
import matplotlib.patches as patches
from typing import Optional

from core.game_state import GameState
from render.board_render import BOARD_COLOR, LAST_MOVE_COLOR, NUM_COLOR, STONE_SIZE, stone_color, stone_outline_color
from utils.coords import coordinate_to_string


class BoardFigureRenderer:
    """
    Render a tsumego board using matplotlib.
    One board point is one data unit; point (row, col) sits at x=col, y=row.
    """

    def __init__(self, padding: float = 0.75, text_weight: str = 'bold'):
        """
        Initialize the renderer.

        Args:
            padding: Margin around the outer grid lines, in point units
            text_weight: Font weight for move numbers ('normal' or 'bold')
        """
        self.pad = float(padding)
        self.tw = text_weight

    def _draw_grid(self, ax, size: int):
        """Draw the size x size grid of lines."""
        ticks = np.arange(size)
        last = size - 1
        ax.hlines(ticks, 0, last, colors='black', linewidth=1.5, zorder=1)
        ax.vlines(ticks, 0, last, colors='black', linewidth=1.5, zorder=1)

    def _draw_stone(self, ax, row: int, col: int, owner):
        circle = patches.Circle(
            (col, row), radius=0.5 * STONE_SIZE,
            facecolor=stone_color(owner),
            edgecolor=stone_outline_color(owner),
            linewidth=1.5,
            zorder=5
        )
        ax.add_patch(circle)

    def render_board(self, game: GameState, ax=None, *, show_numbers: Optional[bool] = None):
        """
        Render the complete board.

        Args:
            game: State to draw
            ax: Optional matplotlib axis (creates new figure if None)
            show_numbers: Override the game's number display setting

        Returns:
            Matplotlib axis object
        """
        if ax is None:
            import matplotlib.pyplot as plt
            fig, ax = plt.subplots(figsize=(6, 6))

        if show_numbers is None:
            show_numbers = game.show_numbers

        size = game.size
        ax.set_facecolor(BOARD_COLOR)
        self._draw_grid(ax, size)

        occupied = np.argwhere(game.as_array() != 0)
        for row, col in occupied:
            point = game.point_at(int(row), int(col))
            self._draw_stone(ax, int(row), int(col), point.owner)

            if show_numbers and point.move_number is not None:
                font_size = max(6, min(16, 72 / size))
                ax.text(col, row, str(point.move_number),
                        ha='center', va='center',
                        fontsize=font_size,
                        fontweight=self.tw,
                        color=NUM_COLOR,
                        zorder=6)

        last = game.last_move()
        if last is not None and not show_numbers:
            row, col = last
            ax.add_patch(patches.Circle((col, row), radius=0.5 * STONE_SIZE + 0.08,
                                        fill=False, edgecolor=LAST_MOVE_COLOR,
                                        linewidth=2, zorder=7))

        title = f"{game.mode.value.title()} - {game.current_player.value} to play"
        if last is not None:
            title += f" (last: {coordinate_to_string(*last)})"
        ax.set_title(title)

        ax.set_aspect('equal')
        ax.set_xlim(-self.pad, size - 1 + self.pad)
        ax.set_ylim(size - 1 + self.pad, -self.pad)  # Invert Y so row 0 is on top
        ax.set_xticks([])
        ax.set_yticks([])

        return ax


# Standalone preview
if __name__ == "__main__":
    import matplotlib.pyplot as plt

    from core.types import Mode

    demo = GameState(9)
    demo.handle_click(2, 2)
    demo.handle_click(2, 3)
    demo.set_mode(Mode.PLAY)
    demo.handle_click(3, 3)
    demo.handle_click(4, 4)

    BoardFigureRenderer().render_board(demo)
    plt.tight_layout()
    plt.show()
