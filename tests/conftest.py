import os
import sys
import pytest

# Add project root to sys.path (so tests can import core.*)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(PROJECT_ROOT)

from core.game_state import GameState
from core.types import Mode


@pytest.fixture
def game():
    """Fresh 9x9 game in setup mode with Black to play."""
    return GameState(9)


@pytest.fixture
def play_position():
    """Returns a function that builds a game from setup clicks, then plays moves."""
    def _build(setup=(), moves=(), size=9):
        g = GameState(size)
        for row, col in setup:
            g.handle_click(row, col)
        g.set_mode(Mode.PLAY)
        for row, col in moves:
            g.handle_click(row, col)
        return g
    return _build
