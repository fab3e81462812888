"""Textual front end: pure painting, an event controller and the app."""

from .controller import EditorController, TextualUIHooks, normalize_key
from .paint import Frame, command_line, paint_buffer, render_frame, status_line

__all__ = [
    "EditorController",
    "Frame",
    "TextualUIHooks",
    "command_line",
    "normalize_key",
    "paint_buffer",
    "render_frame",
    "status_line",
]
