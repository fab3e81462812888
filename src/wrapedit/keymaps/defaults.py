"""Built-in action table.

Edit ``DEFAULT_ACTIONS`` (or pass ``extra_actions``) to rebind keys. Order
matters only in that every match fires in table order.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from wrapedit.config import EditorMode
from wrapedit.viewport import Marker

from .models import (
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
from .table import ActionTable

DEFAULT_ACTIONS: tuple[Action, ...] = (
    # modes
    Action(SetMode(EditorMode.NORMAL.value), key="ESC", description="Normal mode"),
    Action(
        SetMode(EditorMode.INSERT.value),
        key="i",
        command="insert",
        description="Insert mode",
    ),
    Action(
        SetMode(EditorMode.SELECT.value),
        key="v",
        command="select",
        description="Select mode",
    ),
    Action(SetMode(EditorMode.COMMAND.value), key=":", description="Command line"),
    # motion
    Action(Motion(-1, 0), key="h", command="left", description="Cursor left"),
    Action(Motion(0, 1), key="j", command="down", description="Cursor down"),
    Action(Motion(0, -1), key="k", command="up", description="Cursor up"),
    Action(Motion(1, 0), key="l", command="right", description="Cursor right"),
    Action(Motion(-1, 0), key="LEFT"),
    Action(Motion(0, 1), key="DOWN"),
    Action(Motion(0, -1), key="UP"),
    Action(Motion(1, 0), key="RIGHT"),
    Action(Jump(Marker.START), key="0", command="start", description="Line start"),
    Action(Jump(Marker.MIDDLE), key="M", command="middle", description="Line middle"),
    Action(Jump(Marker.END), key="$", command="end", description="Line end"),
    Action(CenterOnCursor(), key="z", command="center", description="Center view"),
    Action(PageUp(), key="PAGEUP", command="pgup", description="Page up"),
    Action(PageDown(), key="PAGEDOWN", command="pgdn", description="Page down"),
    Action(PageUp(), key="CTRL+b"),
    Action(PageDown(), key="CTRL+f"),
    # buffers
    Action(SelectBuffer(-1), key="[", command="bprev", description="Previous buffer"),
    Action(SelectBuffer(1), key="]", command="bnext", description="Next buffer"),
    Action(CloseBuffer(0), key="CTRL+w", command="close", description="Close buffer"),
    # editing
    Action(InsertKey("DELETE"), key="x", description="Delete character"),
    Action(InsertKey("BACKSPACE"), key="X", description="Delete previous character"),
    Action(DeleteLine(), key="D", command="dd", description="Delete line"),
    Action(Append(), key="A", command="append", description="Append at line end"),
    Action(NewLine(), key="o", command="newline", description="Open line below"),
    # files, text, search
    Action(Save(), key="CTRL+s", command="write", description="Save buffer"),
    Action(ReadFile(), command="edit", description="Open file in a new buffer"),
    Action(ReadString(), command="put", description="Insert a string"),
    Action(Find(), command="find", description="Regex search forward"),
    Action(RunCommand(), command="run", description="Run a command line"),
    # screen and exit
    Action(Repaint(), key="CTRL+l", command="repaint", description="Repaint"),
    Action(Quit(), key="CTRL+q", command="quit", description="Quit"),
)


def load_default_actions(
    table: ActionTable,
    *,
    extra_actions: Iterable[Action] | None = None,
    include_actions: Sequence[str] | None = None,
    exclude_actions: Sequence[str] | None = None,
) -> ActionTable:
    """Register the built-in actions (filtered by ``Action.id``) then extras."""

    allowed = _build_filters(include_actions, exclude_actions)
    for action in DEFAULT_ACTIONS:
        if _selected(action.id, allowed):
            table.register(action)

    for action in extra_actions or ():
        table.register(action)
    return table


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = ["DEFAULT_ACTIONS", "load_default_actions"]
