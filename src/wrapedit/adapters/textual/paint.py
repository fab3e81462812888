"""Plain-text rendering of the editor screen.

The screen is a one-row status bar, the buffer area, and a one-row command
line. Everything here is pure so it can be exercised without a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from wrapedit.buffer import SCRATCH_NAME, Buffer, Line
from wrapedit.config import MODE_LABELS, EditorConfig, EditorMode
from wrapedit.context import EditorContext
from wrapedit.viewport import Viewport, screen_position

CHROME_ROWS = 2


@dataclass(frozen=True, slots=True)
class Frame:
    """One fully painted screen; ``cursor`` is ``(row, col)`` on that screen."""

    status: str
    rows: Tuple[str, ...]
    command: str
    cursor: Tuple[int, int]
    mode: str

    @property
    def text(self) -> str:
        return "\n".join((self.status, *self.rows, self.command))


class _Grid:
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells = [[" "] * width for _ in range(height)]

    def put(self, y: int, x: int, char: str) -> None:
        if 0 <= y < self.height and 0 <= x < self.width:
            self.cells[y][x] = char

    def write(self, y: int, x: int, text: str) -> None:
        for offset, char in enumerate(text):
            self.put(y, x + offset, char)

    def rows(self) -> List[str]:
        return ["".join(row).rstrip() for row in self.cells]


def paint_buffer(
    buffer: Optional[Buffer],
    width: int,
    height: int,
    config: EditorConfig,
    numbers: bool = True,
) -> List[str]:
    """Paint ``buffer`` into ``height`` rows of ``width`` cells.

    Lines are drawn from the cursor line downward, then from the cursor line
    upward; numbers in the gutter count lines away from the cursor.
    """

    if buffer is None or width <= 0 or height <= 0:
        return [""] * max(0, height)

    grid = _Grid(width, height)
    viewport = Viewport(width=width, height=height)
    cursor_row = buffer.cursor.y - buffer.cursor.starty
    show_numbers = numbers and config.line_numbers

    row = cursor_row
    distance = 0
    index = buffer.curline
    while row < height and index is not None:
        line = buffer.lines[index]
        _paint_line(grid, buffer, line, row, distance, show_numbers, config)
        row += viewport.visual_rows(line, buffer.linexoff)
        distance += 1
        index = line.next

    row = cursor_row
    distance = 0
    index = buffer.curline
    while row >= 0 and index is not None:
        line = buffer.lines[index]
        _paint_line(grid, buffer, line, row, distance, show_numbers, config)
        if line.prev is not None:
            row -= viewport.visual_rows(buffer.lines[line.prev], buffer.linexoff)
        else:
            row -= 1
        distance += 1
        index = line.prev

    return grid.rows()


def _paint_line(
    grid: _Grid,
    buffer: Buffer,
    line: Line,
    y: int,
    number: int,
    numbers: bool,
    config: EditorConfig,
) -> None:
    if numbers:
        grid.write(y, 0, str(number))
    x = buffer.linexoff
    for char in line.text:
        if x >= grid.width:
            x = buffer.linexoff
            y += 1
        if char in "\t\n\0":
            for _ in range(config.tab_width):
                grid.put(y, x, " ")
                x += 1
        else:
            grid.put(y, x, char)
            x += 1


def status_line(context: EditorContext, width: int) -> str:
    """``<name>, <n> lines`` on the left, ``<MODE> <y>:<x>`` on the right."""

    buffer = context.buffer
    name = buffer.name if buffer is not None else SCRATCH_NAME
    count = buffer.line_count if buffer is not None else 0
    y, x = (buffer.cursor.y, buffer.cursor.x) if buffer is not None else (0, 0)
    return _compose(f"{name}, {count} lines", f"{_mode_label(context)} {y}:{x}", width)


def command_line(context: EditorContext, width: int) -> str:
    """Command text on the left, the pending count on the right."""

    text = context.command_text.expandtabs(context.config.tab_width)
    return _compose(text, str(context.repcnt), width)


def cursor_cell(context: EditorContext, height: int) -> Tuple[int, int]:
    if context.mode == EditorMode.COMMAND.value:
        return height - 1, len(context.command_text)
    if context.buffer is None:
        return 1, 0
    return screen_position(context.buffer, context.config.tab_width)


def render_frame(context: EditorContext, width: int, height: int) -> Frame:
    """Paint the whole screen for a terminal of ``width`` by ``height`` cells."""

    area = max(0, height - CHROME_ROWS)
    rows = paint_buffer(context.buffer, width, area, context.config, numbers=True)
    return Frame(
        status=status_line(context, width),
        rows=tuple(rows),
        command=command_line(context, width),
        cursor=cursor_cell(context, height),
        mode=context.mode,
    )


def _mode_label(context: EditorContext) -> str:
    try:
        return MODE_LABELS[EditorMode(context.mode)]
    except ValueError:
        return context.mode.upper()


def _compose(left: str, right: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(right) >= width:
        return right[-width:]
    room = width - len(right)
    return left[:room].ljust(room) + right


__all__ = [
    "CHROME_ROWS",
    "Frame",
    "command_line",
    "cursor_cell",
    "paint_buffer",
    "render_frame",
    "status_line",
]
