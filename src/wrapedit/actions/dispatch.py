"""Operation dispatch: one handler per operation type."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Type

from wrapedit.context import EditorContext
from wrapedit.errors import EditorError
from wrapedit.keymaps import (
    Action,
    Append,
    CenterOnCursor,
    CloseBuffer,
    DeleteLine,
    Find,
    InsertKey,
    Jump,
    Motion,
    NewLine,
    Operation,
    PageDown,
    PageUp,
    Quit,
    ReadFile,
    ReadString,
    Repaint,
    RunCommand,
    Save,
    SelectBuffer,
    SetMode,
)
from wrapedit.modes.base_mode import ModeResult
from wrapedit.runtime import telemetry

from .buffers import close_buffer, read_file, save_buffer, select_buffer
from .command import run_command
from .core import quit_editor, repaint, set_mode
from .editing import append, delete_line, insert_key, open_line, read_string
from .motion import center_view, jump_to_marker, move_cursor, page_down, page_up
from .search import find_pattern

ActionHandler = Callable[[EditorContext, Any], Optional[ModeResult]]

HANDLERS: Dict[Type[Operation], ActionHandler] = {
    SetMode: set_mode,
    Motion: move_cursor,
    Jump: jump_to_marker,
    CenterOnCursor: center_view,
    PageUp: page_up,
    PageDown: page_down,
    SelectBuffer: select_buffer,
    CloseBuffer: close_buffer,
    InsertKey: insert_key,
    DeleteLine: delete_line,
    Append: append,
    NewLine: open_line,
    Save: save_buffer,
    ReadFile: read_file,
    ReadString: read_string,
    Find: find_pattern,
    RunCommand: run_command,
    Repaint: repaint,
    Quit: quit_editor,
}


def handler_for(operation: Operation) -> ActionHandler:
    handler = HANDLERS.get(type(operation))
    if handler is None:
        raise KeyError(f"No handler registered for '{operation.name}'")
    return handler


def execute(context: EditorContext, action: Action, count: int = 1) -> ModeResult:
    """Run ``action`` ``count`` times (capped at ``max_cmd_repetition``).

    The last mode switch requested by any repetition wins. Editor errors end
    the run early and are reported as ``command.error``.
    """

    handler = handler_for(action.operation)
    repeat = min(count, context.config.max_cmd_repetition)
    switch_to: Optional[str] = None
    status = "ok"
    message: Optional[str] = None

    with telemetry.span(
        "actions::execute",
        component="actions",
        metadata={"action": action.id, "count": repeat},
    ) as handle:
        for _ in range(repeat):
            if not context.running:
                break
            try:
                outcome = handler(context, action.operation)
            except EditorError as exc:
                handle.warn(str(exc))
                report_error(context, exc)
                return ModeResult(
                    consumed=True,
                    switch_to=switch_to,
                    status="error",
                    message=str(exc),
                )
            if isinstance(outcome, ModeResult):
                switch_to = outcome.switch_to or switch_to
                status = outcome.status
                message = outcome.message
        handle.add_metadata("status", status)

    return ModeResult(
        consumed=True, switch_to=switch_to, status=status, message=message
    )


def report_error(context: EditorContext, error: Exception) -> None:
    telemetry.record_event(
        "command.error",
        level="warning",
        data={"kind": type(error).__name__, "message": str(error)},
    )
    context.bus.emit("command.error", str(error))


__all__ = ["ActionHandler", "HANDLERS", "execute", "handler_for", "report_error"]
