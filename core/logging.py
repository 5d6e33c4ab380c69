from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable

from core.interfaces import Snapshot

MOVE_KEYS = ["step", "event", "head_x", "head_y", "heading", "length"]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()


def make_move_logger(logger: Logger) -> Callable[[str, Snapshot], None]:
    """
    Returns a function(event: str, snap: Snapshot) -> None that writes one row
    per snake mutation ("step" or "grow"). The snapshot's step_count is used
    for the CSV 'step' column.
    """
    def _on_move(event: str, snap: Snapshot) -> None:
        hx, hy = snap.body[0]
        logger.log(snap.step_count, {
            "event": event,
            "head_x": hx,
            "head_y": hy,
            "heading": snap.heading.name.lower(),
            "length": len(snap.body),
        })
    return _on_move
