"""Mode manager and the four editor modes."""

from .base_mode import KeyInput, Mode, ModeResult
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .select_mode import SelectMode
from .command_mode import CommandMode
from .mode_manager import ModeManager

__all__ = [
    "KeyInput",
    "Mode",
    "ModeResult",
    "ModeManager",
    "NormalMode",
    "InsertMode",
    "SelectMode",
    "CommandMode",
]
