"""
Board geometry and colours (no Tk window needed).
"""

import pytest

from core.types import Player, StoneKind
from render.board_render import POINT_SIZE, BoardRenderer, stone_color, stone_outline_color
from utils.colors import grey8, grey_color, hex_to_rgb, rgb_to_hex


def test_point_centres_map_back_to_points():
    r = BoardRenderer()
    for row in range(9):
        for col in range(9):
            x, y = r.point_to_pixel(row, col)
            assert r.pixel_to_point(x, y, 9) == (row, col)


def test_pixel_outside_board_is_none():
    r = BoardRenderer(point_size=40)
    assert r.board_pixels(9) == 360
    assert r.pixel_to_point(-1, 10, 9) is None
    assert r.pixel_to_point(10, 360, 9) is None
    assert r.pixel_to_point(359.9, 359.9, 9) == (8, 8)


def test_stone_radius_fits_cell():
    r = BoardRenderer()
    assert r.stone_radius < POINT_SIZE / 2


def test_setup_stones_drawn_differently():
    for player in Player:
        assert stone_color(StoneKind.setup_marker(player)) != stone_color(StoneKind.owned_by(player))
    assert stone_color(StoneKind.owned_by(Player.BLACK)) == "#000000"
    assert stone_outline_color(StoneKind.owned_by(Player.WHITE)) == grey8(230)


def test_color_helpers():
    assert rgb_to_hex(255, 0, 16) == "#ff0010"
    assert hex_to_rgb("#ff0010") == (255, 0, 16)
    with pytest.raises(ValueError):
        hex_to_rgb("#fff")

    # Greying pulls every channel towards the middle
    r, g, b = hex_to_rgb(grey_color("#ff0000"))
    assert 128 < r < 255
    assert 0 < g < 128 and g == b
