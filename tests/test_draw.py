# tests/test_draw.py
import pygame as pg
from viz.draw import BLOCK_SIZE, to_coord, to_coord_u32, draw_block, draw_rectangle

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

def test_to_coord_scales_by_block_size():
    assert to_coord(0) == 0.0
    assert to_coord(3) == 3 * BLOCK_SIZE
    assert to_coord(2, block_size=10) == 20.0
    assert to_coord_u32(4) == 100
    assert isinstance(to_coord_u32(4), int)

def test_draw_block_fills_one_cell(screen):
    bg = (0, 0, 0, 0)
    screen.fill(bg)
    color = (0, 204, 0)
    rect = draw_block(screen, color, 2, 1)
    assert rect == pg.Rect(50, 25, 25, 25)
    assert _rgb(screen.get_at((62, 37))) == color
    # neighbouring cell untouched
    assert screen.get_at((87, 37)) == pg.Color(*bg)

def test_draw_rectangle_spans_grid_units(screen):
    screen.fill((0, 0, 0, 0))
    color = (200, 30, 30)
    rect = draw_rectangle(screen, color, 1, 2, 3, 2, block_size=10)
    assert rect.size == (30, 20)
    assert rect.topleft == (10, 20)
    assert _rgb(screen.get_at((39, 39))) == color
    assert _rgb(screen.get_at((40, 40))) != color
