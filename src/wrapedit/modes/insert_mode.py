"""Insert mode: keys go straight to the line editor."""

from __future__ import annotations

from wrapedit import editing
from wrapedit.config import EditorMode

from .base_mode import KeyInput, Mode, ModeResult
from .keymap_helpers import is_escape, key_to_token


class InsertMode(Mode):
    name = EditorMode.INSERT.value

    def handle_key(self, key: KeyInput) -> ModeResult:
        token = key_to_token(key)
        if is_escape(token):
            return ModeResult(
                consumed=True, switch_to=EditorMode.NORMAL.value, message="exit_insert"
            )
        if self.context.buffer is None:
            return ModeResult(consumed=False, status="no_buffer")
        editing.insert(self.context, self.context.buffer, token)
        return ModeResult(consumed=True, status="editing")


__all__ = ["InsertMode"]
