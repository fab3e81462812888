"""Cursor motion and scroll bookkeeping for wrapped lines.

A buffer's cursor row counts lines while ``starty`` counts visual rows, so
scrolling moves ``starty`` by the number of rows the line entering the view
occupies. Tabs are counted as one column here even though painting expands
them; a line full of tabs therefore reserves fewer rows than it draws.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from wrapedit.buffer import Buffer, Line


class Marker(Enum):
    """Named positions within a line."""

    START = "start"
    MIDDLE = "middle"
    END = "end"


@dataclass(slots=True)
class Viewport:
    """Size of the text area in terminal cells. A width of 0 means unbounded."""

    width: int = 80
    height: int = 22

    def resize(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(1, height)

    def visual_rows(self, line: Line, gutter: int) -> int:
        if self.width <= 0:
            return 1
        return max(1, -(-(line.length + gutter) // self.width))


def move(viewport: Viewport, buffer: Buffer, dx: int, dy: int) -> None:
    """Shift the cursor by ``dx`` columns and ``dy`` lines, scrolling as needed."""

    cursor = buffer.cursor
    cursor.x += dx

    if dy < 0:
        for _ in range(-dy):
            prev = buffer.current_line.prev
            if prev is None:
                break
            buffer.curline = prev
            cursor.y -= 1
            if cursor.y < cursor.starty:
                cursor.starty -= viewport.visual_rows(
                    buffer.current_line, buffer.linexoff
                )
    else:
        for _ in range(dy):
            nxt = buffer.current_line.next
            if nxt is None:
                break
            buffer.curline = nxt
            cursor.y += 1
            if cursor.y - cursor.starty >= viewport.height:
                cursor.starty += viewport.visual_rows(
                    buffer.current_line, buffer.linexoff
                )

    cursor.x = max(0, min(cursor.x, buffer.current_line.length))


def jump(buffer: Buffer, marker: Marker) -> None:
    length = buffer.current_line.length
    if marker is Marker.START:
        buffer.cursor.x = 0
    elif marker is Marker.MIDDLE:
        buffer.cursor.x = length // 2
    else:
        buffer.cursor.x = length


def center_on_cursor(viewport: Viewport, buffer: Buffer) -> None:
    buffer.cursor.starty = -(viewport.height // 2 - buffer.cursor.y)


def page_up(viewport: Viewport, buffer: Buffer) -> None:
    move(viewport, buffer, 0, -viewport.height)


def page_down(viewport: Viewport, buffer: Buffer) -> None:
    move(viewport, buffer, 0, viewport.height)


def click(viewport: Viewport, buffer: Buffer, x: int, y: int) -> None:
    """Move the cursor to a viewport-local cell.

    Wrapped continuation rows are not resolved; the row maps to a line
    offset from the cursor's own row.
    """

    cursor = buffer.cursor
    target_col = x - buffer.linexoff
    target_row = y - (cursor.y - cursor.starty)
    move(viewport, buffer, target_col - cursor.x, target_row)


def screen_position(buffer: Buffer, tab_width: int) -> Tuple[int, int]:
    """Return ``(row, col)`` of the cursor below a one-row status bar."""

    cursor = buffer.cursor
    tabs = buffer.current_line.text[: cursor.x].count("\t")
    row = cursor.y - cursor.starty + 1
    col = cursor.x + buffer.linexoff + tabs * (tab_width - 1)
    return row, col


__all__ = [
    "Marker",
    "Viewport",
    "move",
    "jump",
    "center_on_cursor",
    "page_up",
    "page_down",
    "click",
    "screen_position",
]
