# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Optional, Protocol

Cell = Tuple[int, int]

class Heading(Enum):
    # value is the unit (dx, dy) step; y grows downward
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> "Heading":
        return _OPPOSITES[self]

    def offset(self, cell: Cell) -> Cell:
        dx, dy = self.value
        return (cell[0] + dx, cell[1] + dy)

    @classmethod
    def from_name(cls, name: str) -> "Heading":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown heading: {name!r}") from None

_OPPOSITES = {
    Heading.UP: Heading.DOWN,
    Heading.DOWN: Heading.UP,
    Heading.LEFT: Heading.RIGHT,
    Heading.RIGHT: Heading.LEFT,
}

@dataclass(frozen=True)
class Snapshot:
    body: Tuple[Cell, ...]      # head first
    heading: Heading
    last_tail: Optional[Cell]
    step_count: int

class BlockDrawer(Protocol):
    def __call__(self, x: int, y: int) -> None: ...
