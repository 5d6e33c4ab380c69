# core/snake.py  (pure snake body/heading rules, no pygame)
from __future__ import annotations
from collections import deque
from typing import Iterator, Optional, Tuple

from .interfaces import Cell, Heading, Snapshot, BlockDrawer
from .logging import Logger, CSVLogger, MOVE_KEYS, make_move_logger
from config import AppConfig

START_LEN = 3


class SnakeError(Exception):
    """Base class for snake rule violations."""


class InvalidGrowth(SnakeError):
    """grow() called with no vacated tail cell to restore."""


class Snake:
    """Ordered body of grid cells (head first) moving one cell per step.

    The body is only mutated by step() and grow(); readers get tuples or
    iterators, never the underlying deque.
    """

    def __init__(self, x: int, y: int, logger: Optional[Logger] = None):
        self._heading = Heading.RIGHT
        self._body: deque[Cell] = deque((x - i, y) for i in range(START_LEN))
        self._last_tail: Optional[Cell] = None
        self._step_count = 0
        self.logger = logger
        self._on_move = make_move_logger(logger) if logger is not None else None

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "Snake":
        logger = CSVLogger(cfg.log_path, fieldnames=MOVE_KEYS) if cfg.log_path else None
        return cls(cfg.start_x, cfg.start_y, logger=logger)

    # ---- queries ----
    def head_position(self) -> Cell:
        return self._body[0]

    def tail_position(self) -> Cell:
        return self._body[-1]

    def current_heading(self) -> Heading:
        return self._heading

    @property
    def last_tail(self) -> Optional[Cell]:
        return self._last_tail

    @property
    def body(self) -> Tuple[Cell, ...]:
        return tuple(self._body)

    @property
    def step_count(self) -> int:
        return self._step_count

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(tuple(self._body))

    def is_reversal(self, heading: Heading) -> bool:
        """True if moving along `heading` would fold the head back into the neck."""
        return len(self._body) > 1 and heading is self._heading.opposite()

    def peek_next_head(self, heading: Optional[Heading] = None) -> Cell:
        return self._resolve(heading).offset(self.head_position())

    def overlaps(self, x: int, y: int) -> bool:
        # the tail is skipped: it vacates on the next step
        cell = (x, y)
        for i, block in enumerate(self._body):
            if i == len(self._body) - 1:
                break
            if block == cell:
                return True
        return False

    def snapshot(self) -> Snapshot:
        return Snapshot(
            body=tuple(self._body),
            heading=self._heading,
            last_tail=self._last_tail,
            step_count=self._step_count,
        )

    # ---- mutators ----
    def step(self, heading: Optional[Heading] = None) -> None:
        self._heading = self._resolve(heading)
        self._body.appendleft(self._heading.offset(self.head_position()))
        self._last_tail = self._body.pop()
        self._step_count += 1
        if self._on_move is not None:
            self._on_move("step", self.snapshot())

    def grow(self) -> None:
        if self._last_tail is None:
            raise InvalidGrowth("No vacated tail to restore; call step() before grow()")
        self._body.append(self._last_tail)
        self._last_tail = None
        if self._on_move is not None:
            self._on_move("grow", self.snapshot())

    # ---- rendering hook ----
    def draw(self, block: BlockDrawer) -> None:
        for x, y in self._body:
            block(x, y)

    # ---- helpers ----
    def _resolve(self, heading: Optional[Heading]) -> Heading:
        # Reversals are ignored: keep current heading
        if heading is None or self.is_reversal(heading):
            return self._heading
        return heading

    def __repr__(self) -> str:
        return f"Snake(heading={self._heading.name}, body={list(self._body)})"
