"""Cursor and scroll state tied to a buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Coord = Tuple[int, int]  # (x, y)


@dataclass(slots=True)
class Cursor:
    """Logical column/row plus the first visual row scrolled into view.

    ``y`` counts lines, not wrapped rows. ``v0``/``v1`` hold the selection
    bounds captured when Select mode starts.
    """

    x: int = 0
    y: int = 0
    v0: Coord = (-1, -1)
    v1: Coord = (-1, -1)
    starty: int = 0

    @property
    def position(self) -> Coord:
        return (self.x, self.y)

    def select(self, start: Coord, end: Coord) -> None:
        self.v0 = start
        self.v1 = end

    def clear_selection(self) -> None:
        self.v0 = (-1, -1)
        self.v1 = (-1, -1)

    def reset(self) -> None:
        self.x = 0
        self.y = 0
        self.starty = 0
        self.clear_selection()
