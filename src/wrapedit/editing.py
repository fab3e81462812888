"""Character-level edits applied to a buffer's current line."""

from __future__ import annotations

from typing import Optional

from wrapedit.buffer import Buffer
from wrapedit.config import EditorMode
from wrapedit.context import EditorContext
from wrapedit.viewport import Marker, jump, move

BACKSPACE_KEYS = frozenset({"BACKSPACE", "\b", "\x7f"})
DELETE_KEYS = frozenset({"DELETE"})
NEWLINE_KEYS = frozenset({"ENTER", "\n", "\r"})


def insert(context: EditorContext, buffer: Optional[Buffer], key: str) -> None:
    """Apply ``key`` at the cursor of ``buffer``.

    Text past a line's capacity is dropped; the column is clamped so it never
    leaves ``[0, length]``.
    """

    if buffer is None:
        return

    if key in BACKSPACE_KEYS:
        _backspace(context, buffer)
    elif key in DELETE_KEYS:
        line = buffer.current_line
        x = buffer.cursor.x
        line.write(line.text[:x] + line.text[x + 1 :])
    elif key in NEWLINE_KEYS:
        if context.mode == EditorMode.COMMAND.value:
            context.interpreter().run(context.command_text)
        else:
            _split_line(context, buffer)
    elif key == "\t" or (len(key) == 1 and key.isprintable()):
        line = buffer.current_line
        x = buffer.cursor.x
        line.write(line.text[:x] + key + line.text[x:])
        buffer.cursor.x = min(x + 1, line.length)


def indent_width(text: str, limit: int, tab_width: int) -> int:
    """Columns of leading whitespace in ``text[:limit]``."""

    width = 0
    for char in text[:limit]:
        if char == "\t":
            width += tab_width
        elif char.isspace():
            width += 1
        else:
            break
    return width


def indent_prefix(width: int, tab_width: int) -> str:
    tabs, spaces = divmod(width, tab_width)
    return "\t" * tabs + " " * spaces


def _backspace(context: EditorContext, buffer: Buffer) -> None:
    line = buffer.current_line
    x = buffer.cursor.x
    if x > 0:
        line.write(line.text[: x - 1] + line.text[x:])
        buffer.cursor.x = x - 1
        return
    if line.prev is None:
        return

    old_index = buffer.curline
    previous = buffer.lines[line.prev]
    joined_at = previous.length
    previous.write(previous.text + line.text)
    move(context.viewport, buffer, joined_at + x, -1)
    buffer.lines.remove(old_index)


def _split_line(context: EditorContext, buffer: Buffer) -> None:
    config = context.config
    line = buffer.current_line
    x = buffer.cursor.x

    prefix = ""
    if config.auto_indent:
        width = indent_width(line.text, x, config.tab_width)
        prefix = indent_prefix(width, config.tab_width)

    buffer.lines.insert_after(buffer.curline, prefix + line.text[x:])
    line.write(line.text[:x])

    jump(buffer, Marker.START)
    move(context.viewport, buffer, 0, 1)
    buffer.cursor.x = min(len(prefix), buffer.current_line.length)


__all__ = ["insert", "indent_width", "indent_prefix"]
