"""Action table: operations, their triggers, and the default bindings."""

from wrapedit.viewport import Marker

from .defaults import DEFAULT_ACTIONS, load_default_actions
from .models import (
    OPERATION_TYPES,
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
    TextOperation,
)
from .table import ActionTable, TableStats

__all__ = [
    "Action",
    "ActionTable",
    "Append",
    "CenterOnCursor",
    "CloseBuffer",
    "DEFAULT_ACTIONS",
    "DeleteLine",
    "Find",
    "InsertKey",
    "Jump",
    "Marker",
    "Motion",
    "NewLine",
    "OPERATION_TYPES",
    "Operation",
    "PageDown",
    "PageUp",
    "Quit",
    "ReadFile",
    "ReadString",
    "Repaint",
    "RunCommand",
    "Save",
    "SelectBuffer",
    "SetMode",
    "TableStats",
    "TextOperation",
    "load_default_actions",
]
