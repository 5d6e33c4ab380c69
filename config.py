# config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # grid
    grid_w: int = 30
    grid_h: int = 30

    # snake start (head cell; body trails along -x)
    start_x: int = 5
    start_y: int = 5

    # render
    block_size: int = 25
    fps: int = 10
    title: str = "Snake"

    # move log (CSV); None disables
    log_path: Optional[str] = None

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
