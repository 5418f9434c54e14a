"""
Tsumego Board Creator - Core Package
Board storage, game state and shared types.
"""
from .board_grid import BoardGrid
from .game_state import GameState
from .types import Mode, OutOfRangeError, Player, Point, StoneKind, ValidationError

__all__ = ['BoardGrid', 'GameState', 'Mode', 'OutOfRangeError', 'Player', 'Point',
           'StoneKind', 'ValidationError']
