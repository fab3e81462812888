"""Text-changing actions built on the line editor."""

from __future__ import annotations

from wrapedit import editing
from wrapedit.config import EditorMode
from wrapedit.context import EditorContext
from wrapedit.keymaps import Append, DeleteLine, InsertKey, NewLine, ReadString
from wrapedit.modes.base_mode import ModeResult
from wrapedit.viewport import Marker, jump


def insert_key(context: EditorContext, operation: InsertKey) -> None:
    editing.insert(context, context.buffer, operation.key)


def delete_line(context: EditorContext, operation: DeleteLine) -> None:
    del operation
    if context.buffer is not None:
        context.buffer.delete_line()


def append(context: EditorContext, operation: Append) -> ModeResult | None:
    del operation
    if context.buffer is None:
        return None
    jump(context.buffer, Marker.END)
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT.value)


def open_line(context: EditorContext, operation: NewLine) -> ModeResult | None:
    del operation
    buffer = context.buffer
    if buffer is None:
        return None
    jump(buffer, Marker.END)
    editing.insert(context, buffer, "\n")
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT.value)


def read_string(context: EditorContext, operation: ReadString) -> None:
    if not operation.argument:
        return
    for char in operation.argument:
        editing.insert(context, context.buffer, char)


__all__ = ["append", "delete_line", "insert_key", "open_line", "read_string"]
