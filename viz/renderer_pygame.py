# viz/renderer_pygame.py
from __future__ import annotations
from functools import partial
import pygame as pg
from typing import Optional
from config import AppConfig
from core.snake import Snake
from viz.draw import draw_block, to_coord_u32
import viz.renderer_colors as theme

class PygameRenderer:
    def __init__(self):
        self.cell = 25
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.block_size

        pg.init()
        pg.display.set_caption(cfg.title)
        self.surf = pg.display.set_mode((
            to_coord_u32(cfg.grid_w, self.cell),
            to_coord_u32(cfg.grid_h, self.cell),
        ))
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, block_size: Optional[int] = None) -> None:
        if not pg.get_init():
            pg.init()
        self.surf = surface
        if block_size is not None:
            self.cell = block_size
        self.clock = None  # embedding surface controls timing
        self._auto_flip = False

    def draw(self, snake: Snake) -> None:
        assert self.surf is not None, "Renderer not opened"
        surf = self.surf
        surf.fill(theme.BG)

        snake.draw(partial(self._block, theme.SNAKE))
        hx, hy = snake.head_position()
        self._block(theme.HEAD, hx, hy)

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    def _block(self, color, x: int, y: int) -> None:
        draw_block(self.surf, color, x, y, self.cell)
