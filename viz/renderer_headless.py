# viz/renderer_headless.py
from __future__ import annotations
from typing import Optional
import numpy as np
from config import AppConfig
from core.snake import Snake

class HeadlessRenderer:
    """Rasterizes the snake into a (grid_h, grid_w, 2) array instead of a window.

    c0 -> body excluding head
    c1 -> head
    """
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.frame: Optional[np.ndarray] = None

    def open(self, cfg: AppConfig) -> None:
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.frame = np.zeros((cfg.grid_h, cfg.grid_w, 2), dtype=np.float32)

    def draw(self, snake: Snake) -> None:
        assert self.frame is not None, "Renderer not opened"
        self.frame.fill(0.0)
        snake.draw(self._block)
        hx, hy = snake.head_position()
        if self._inside(hx, hy):
            self.frame[hy, hx, 0] = 0.0
            self.frame[hy, hx, 1] = 1.0

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        self.frame = None

    def _block(self, x: int, y: int) -> None:
        if self._inside(x, y):
            self.frame[y, x, 0] = 1.0

    def _inside(self, x: int, y: int) -> bool:
        H, W = self.frame.shape[:2]
        return 0 <= x < W and 0 <= y < H
