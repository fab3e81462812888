"""Actions over the buffer registry: selection, closing, file I/O."""

from __future__ import annotations

from wrapedit.context import EditorContext
from wrapedit.keymaps import CloseBuffer, ReadFile, Save, SelectBuffer
from wrapedit.modes.base_mode import ModeResult


def select_buffer(context: EditorContext, operation: SelectBuffer) -> None:
    context.buffers.select(operation.step)


def close_buffer(context: EditorContext, operation: CloseBuffer) -> None:
    """Close the current buffer; only index 0 is supported."""

    if operation.index != 0 or context.buffer is None:
        return
    context.buffers.close()
    # the editor always shows a buffer
    context.buffers.ensure_current()


def save_buffer(context: EditorContext, operation: Save) -> ModeResult | None:
    buffer = context.buffer
    if buffer is None:
        return None
    config = context.config
    backup = config.backup_path if config.backup_on_write else None
    target = operation.argument or None
    if not buffer.save(target, backup_path=backup):
        return ModeResult(consumed=True, status="save_skipped", message="not saved")
    path = target or buffer.path
    context.bus.emit("buffer.saved", {"path": path, "lines": buffer.line_count})
    return ModeResult(consumed=True, status="saved", message=path)


def read_file(context: EditorContext, operation: ReadFile) -> ModeResult | None:
    path = operation.argument
    if not path:
        return None
    buffer = context.buffers.open(path)
    context.bus.emit("buffer.loaded", {"path": path, "lines": buffer.line_count})
    return ModeResult(consumed=True, status="loaded", message=path)


__all__ = ["close_buffer", "read_file", "save_buffer", "select_buffer"]
