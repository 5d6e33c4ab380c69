# viz/draw.py
from __future__ import annotations
import pygame as pg

BLOCK_SIZE = 25

# scale discrete grid coordinates up to screen pixels
def to_coord(game_coord: int, block_size: int = BLOCK_SIZE) -> float:
    return float(game_coord * block_size)

def to_coord_u32(game_coord: int, block_size: int = BLOCK_SIZE) -> int:
    return int(to_coord(game_coord, block_size))

def draw_rectangle(
    surf: pg.Surface,
    color,
    x: int,
    y: int,
    width: int,
    height: int,
    block_size: int = BLOCK_SIZE,
) -> pg.Rect:
    """Fill a rectangle given in grid units: top-left (x, y), size width x height."""
    rect = pg.Rect(
        to_coord_u32(x, block_size),
        to_coord_u32(y, block_size),
        block_size * width,
        block_size * height,
    )
    pg.draw.rect(surf, color, rect)
    return rect

def draw_block(surf: pg.Surface, color, x: int, y: int, block_size: int = BLOCK_SIZE) -> pg.Rect:
    return draw_rectangle(surf, color, x, y, 1, 1, block_size)
