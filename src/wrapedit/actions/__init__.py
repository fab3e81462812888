"""Handlers behind every bindable operation."""

from .buffers import close_buffer, read_file, save_buffer, select_buffer
from .command import run_command
from .core import quit_editor, repaint, set_mode
from .dispatch import HANDLERS, ActionHandler, execute, handler_for, report_error
from .editing import append, delete_line, insert_key, open_line, read_string
from .motion import center_view, jump_to_marker, move_cursor, page_down, page_up
from .search import find_pattern, search_forward

__all__ = [
    "ActionHandler",
    "HANDLERS",
    "append",
    "center_view",
    "close_buffer",
    "delete_line",
    "execute",
    "find_pattern",
    "handler_for",
    "insert_key",
    "jump_to_marker",
    "move_cursor",
    "open_line",
    "page_down",
    "page_up",
    "quit_editor",
    "read_file",
    "read_string",
    "repaint",
    "report_error",
    "run_command",
    "save_buffer",
    "search_forward",
    "select_buffer",
    "set_mode",
]
