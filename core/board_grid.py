"""
BoardGrid - fixed-size storage for board points.

Pure storage primitive: no rules live here. Every coordinate-taking method
raises OutOfRangeError for indices outside [0, size).
"""
from typing import Iterator, List, Tuple

import numpy as np

from core.types import OutOfRangeError, Player, Point


class BoardGrid:
    """
    Square matrix of Points.

    Attributes:
        size: Number of rows (and columns); never changes after construction
    """

    def __init__(self, size: int):
        """
        Initialize an empty board.

        Args:
            size: Side length (must be > 0)
        """
        if size <= 0:
            raise ValueError(f"Board size must be positive: {size}")

        self.size: int = size
        self._points: List[List[Point]] = [
            [Point() for _ in range(size)] for _ in range(size)
        ]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfRangeError(row, col, self.size)

    def get(self, row: int, col: int) -> Point:
        """
        Get the live point at a coordinate.

        Raises:
            OutOfRangeError: if (row, col) is off the board
        """
        self._check(row, col)
        return self._points[row][col]

    def set(self, row: int, col: int, point: Point) -> None:
        """Replace the point at a coordinate."""
        self._check(row, col)
        self._points[row][col] = point

    def coords(self) -> Iterator[Tuple[int, int]]:
        """Iterates over all coordinates in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield (row, col)

    def points(self) -> Iterator[Tuple[Tuple[int, int], Point]]:
        for row, col in self.coords():
            yield (row, col), self._points[row][col]

    def clear(self) -> None:
        for _, point in self.points():
            point.clear()

    def as_array(self) -> np.ndarray:
        """
        Occupancy matrix: 0 empty, 1 black, 2 white.

        Setup and play stones are not distinguished.
        """
        board = np.zeros((self.size, self.size), dtype=np.int8)
        for (row, col), point in self.points():
            if point.owner is not None:
                board[row, col] = 1 if point.owner.as_player() is Player.BLACK else 2
        return board
