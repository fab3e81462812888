"""Cursor motion and scrolling actions."""

from __future__ import annotations

from wrapedit import viewport
from wrapedit.context import EditorContext
from wrapedit.keymaps import CenterOnCursor, Jump, Motion, PageDown, PageUp


def move_cursor(context: EditorContext, operation: Motion) -> None:
    if context.buffer is None:
        return
    viewport.move(context.viewport, context.buffer, operation.dx, operation.dy)


def jump_to_marker(context: EditorContext, operation: Jump) -> None:
    if context.buffer is None:
        return
    viewport.jump(context.buffer, operation.marker)


def center_view(context: EditorContext, operation: CenterOnCursor) -> None:
    del operation
    if context.buffer is None:
        return
    viewport.center_on_cursor(context.viewport, context.buffer)


def page_up(context: EditorContext, operation: PageUp) -> None:
    del operation
    if context.buffer is None:
        return
    viewport.page_up(context.viewport, context.buffer)


def page_down(context: EditorContext, operation: PageDown) -> None:
    del operation
    if context.buffer is None:
        return
    viewport.page_down(context.viewport, context.buffer)


__all__ = ["center_view", "jump_to_marker", "move_cursor", "page_down", "page_up"]
