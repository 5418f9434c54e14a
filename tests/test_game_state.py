"""
GameState transitions:
- Setup-mode toggling
- Play-mode placement, numbering and turn alternation
- Mode switching, resets and the Reset button policy
- Invariant checks, statistics and text output
"""

import numpy as np
import pytest

from core.game_state import GameState
from core.types import Mode, OutOfRangeError, Player, Point, StoneKind


def _snapshot(g: GameState):
    return {(r, c): g.point_at(r, c) for r in range(g.size) for c in range(g.size)}


# ---------------------------------------------------------------------------
# Setup mode
# ---------------------------------------------------------------------------

def test_initial_state(game):
    assert game.size == 9
    assert game.mode == Mode.SETUP
    assert game.current_player == Player.BLACK
    assert game.last_move_number == 0
    assert game.show_numbers is True
    assert not game.has_recorded_moves()
    assert game.last_move() is None


@pytest.mark.parametrize("row, col", [(0, 0), (4, 4), (8, 0), (3, 7)])
def test_setup_click_places_marker(game, row, col):
    game.handle_click(row, col)
    p = game.point_at(row, col)
    assert p.owner == StoneKind.setup_marker(Player.BLACK)
    assert p.move_number is None
    assert game.current_player == Player.BLACK, "Setup clicks never change the turn"


def test_setup_click_twice_toggles_off(game):
    game.handle_click(2, 5)
    game.handle_click(2, 5)
    assert game.point_at(2, 5) == Point()


def test_setup_overwrites_opponent_marker(game):
    game.handle_click(1, 1)
    game.set_current_player(Player.WHITE)
    game.handle_click(1, 1)
    assert game.point_at(1, 1).owner == StoneKind.setup_marker(Player.WHITE)

    # Second click by White removes White's marker entirely
    game.handle_click(1, 1)
    assert game.point_at(1, 1).is_empty()


def test_point_at_returns_copy(game):
    game.handle_click(0, 0)
    p = game.point_at(0, 0)
    p.clear()
    assert game.point_at(0, 0).owner == StoneKind.setup_marker(Player.BLACK)


# ---------------------------------------------------------------------------
# Play mode
# ---------------------------------------------------------------------------

def test_play_click_on_empty_numbers_and_flips(game):
    game.set_mode(Mode.PLAY)
    assert game.handle_click(4, 4) is True

    p = game.point_at(4, 4)
    assert p.owner == StoneKind.owned_by(Player.BLACK)
    assert p.move_number == 1
    assert game.last_move_number == 1
    assert game.current_player == Player.WHITE

    game.handle_click(4, 5)
    assert game.point_at(4, 5).owner == StoneKind.owned_by(Player.WHITE)
    assert game.point_at(4, 5).move_number == 2
    assert game.current_player == Player.BLACK
    assert game.last_move() == (4, 5)


def test_play_click_on_occupied_is_noop(play_position):
    g = play_position(setup=[(0, 0)], moves=[(1, 1)])
    before = _snapshot(g)
    player, number = g.current_player, g.last_move_number

    for target in [(0, 0), (1, 1)]:
        assert g.handle_click(*target) is False
        assert _snapshot(g) == before, f"Board changed after clicking occupied {target}"
        assert g.current_player == player
        assert g.last_move_number == number


def test_is_valid_checks_occupancy(play_position):
    g = play_position(setup=[(3, 3)], moves=[(4, 4)])
    assert not g.is_valid(3, 3)
    assert not g.is_valid(4, 4)
    assert g.is_valid(5, 5)


def test_manual_player_choice_in_play(game):
    game.set_mode(Mode.PLAY)
    game.set_current_player(Player.WHITE)
    game.handle_click(0, 1)
    assert game.point_at(0, 1).owner == StoneKind.owned_by(Player.WHITE)
    assert game.current_player == Player.BLACK


def test_out_of_range_click_raises(game):
    with pytest.raises(OutOfRangeError):
        game.handle_click(9, 0)
    game.set_mode(Mode.PLAY)
    with pytest.raises(OutOfRangeError):
        game.handle_click(0, -1)
    assert game.last_move_number == 0


# ---------------------------------------------------------------------------
# Modes and resets
# ---------------------------------------------------------------------------

def test_entering_play_keeps_setup(game):
    game.handle_click(2, 2)
    game.set_mode(Mode.PLAY)
    assert game.mode == Mode.PLAY
    assert game.point_at(2, 2).owner == StoneKind.setup_marker(Player.BLACK)


def test_leaving_play_clears_moves(play_position):
    g = play_position(setup=[(0, 0)], moves=[(1, 1), (2, 2)])
    g.set_mode(Mode.SETUP)
    assert g.mode == Mode.SETUP
    assert g.last_move_number == 0
    assert g.point_at(1, 1).is_empty() and g.point_at(2, 2).is_empty()
    assert g.point_at(0, 0).owner == StoneKind.setup_marker(Player.BLACK)
    assert g.validate() == []


def test_set_mode_rejects_non_mode(game):
    with pytest.raises(TypeError):
        game.set_mode("play")


def test_reset_to_setup_restores_setup_position(game):
    for coord in [(0, 0), (0, 1), (5, 5)]:
        game.handle_click(*coord)
    game.set_current_player(Player.WHITE)
    game.handle_click(6, 6)
    saved = _snapshot(game)

    game.set_mode(Mode.PLAY)
    for coord in [(1, 1), (2, 2), (3, 3), (4, 4), (7, 7)]:
        game.handle_click(*coord)
    assert game.last_move_number == 5

    game.reset_to_setup()
    assert game.mode == Mode.SETUP
    assert game.last_move_number == 0
    assert _snapshot(game) == saved, "reset_to_setup must restore the setup position exactly"


def test_reset_clears_everything(play_position):
    g = play_position(setup=[(0, 0), (8, 8)], moves=[(1, 1), (2, 2), (3, 3)])
    g.set_show_numbers(False)
    g.reset()

    assert g.mode == Mode.SETUP
    assert g.current_player == Player.BLACK
    assert g.last_move_number == 0
    assert g.show_numbers is True
    assert all(p == Point() for p in _snapshot(g).values())


def test_handle_reset_escalates(play_position):
    g = play_position(setup=[(0, 0)], moves=[(4, 4)])

    assert g.handle_reset() == "moves"
    assert g.point_at(0, 0).owner is not None, "First press keeps the setup stones"
    assert g.point_at(4, 4).is_empty()

    assert g.handle_reset() == "full"
    assert g.point_at(0, 0).is_empty()


def test_show_numbers_is_display_only(play_position):
    g = play_position(moves=[(1, 1)])
    before = _snapshot(g)
    g.set_show_numbers(False)
    assert g.show_numbers is False
    assert _snapshot(g) == before


# ---------------------------------------------------------------------------
# Full scenario
# ---------------------------------------------------------------------------

def test_setup_play_rollback_scenario(game):
    game.handle_click(0, 0)
    assert game.point_at(0, 0).owner == StoneKind.setup_marker(Player.BLACK)

    game.set_mode(Mode.PLAY)
    game.handle_click(0, 0)
    assert game.point_at(0, 0).owner == StoneKind.setup_marker(Player.BLACK)
    assert game.last_move_number == 0

    game.handle_click(1, 1)
    assert game.point_at(1, 1) == Point(StoneKind.owned_by(Player.BLACK), 1)
    assert game.current_player == Player.WHITE

    game.handle_click(1, 1)
    assert game.point_at(1, 1) == Point(StoneKind.owned_by(Player.BLACK), 1)
    assert game.current_player == Player.WHITE

    game.handle_click(2, 2)
    assert game.point_at(2, 2) == Point(StoneKind.owned_by(Player.WHITE), 2)
    assert game.current_player == Player.BLACK

    game.reset_to_setup()
    assert game.point_at(1, 1).is_empty()
    assert game.point_at(2, 2).is_empty()
    assert game.point_at(0, 0).owner == StoneKind.setup_marker(Player.BLACK)
    assert game.mode == Mode.SETUP
    assert game.last_move_number == 0


# ---------------------------------------------------------------------------
# Analysis helpers
# ---------------------------------------------------------------------------

def test_validate_stays_clean_through_operations(game):
    game.handle_click(0, 0)
    game.handle_click(0, 1)
    assert game.validate() == []
    game.set_mode(Mode.PLAY)
    for coord in [(0, 1), (1, 0), (1, 1), (2, 2)]:
        game.handle_click(*coord)
        assert game.validate() == [], game.pretty()
    game.reset_to_setup()
    assert game.validate() == []


def test_validate_detects_counter_mismatch(game):
    game.set_mode(Mode.PLAY)
    game.handle_click(3, 3)
    game._last_move_number = 2  # simulate corruption
    messages = [e.message for e in game.validate()]
    assert any("counter" in m for m in messages), messages


def test_statistics(play_position):
    g = play_position(setup=[(0, 0), (0, 1)], moves=[(5, 5), (6, 6), (7, 7)])
    stats = g.get_statistics()
    assert stats["black_setup"] == 2
    assert stats["white_setup"] == 0
    assert stats["black_played"] == 2
    assert stats["white_played"] == 1
    assert stats["moves"] == 3
    assert stats["empty"] == 81 - 5


def test_as_array_and_pretty(play_position):
    g = play_position(setup=[(0, 0)], moves=[(1, 1), (2, 2)], size=3)
    assert np.array_equal(g.as_array(), np.array([[1, 0, 0], [0, 1, 0], [0, 0, 2]]))
    assert g.pretty() == "x . .\n. X .\n. . O"
