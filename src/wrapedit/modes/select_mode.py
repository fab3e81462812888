"""Select mode: holds the anchor captured on entry; keys are inert."""

from __future__ import annotations

from wrapedit.config import EditorMode

from .base_mode import KeyInput, Mode, ModeResult
from .keymap_helpers import is_escape, key_to_token


class SelectMode(Mode):
    name = EditorMode.SELECT.value

    def on_enter(self, previous: str | None) -> None:
        del previous
        buffer = self.context.buffer
        if buffer is not None:
            position = buffer.cursor.position
            buffer.cursor.select(position, position)

    def handle_key(self, key: KeyInput) -> ModeResult:
        if is_escape(key_to_token(key)):
            return ModeResult(
                consumed=True, switch_to=EditorMode.NORMAL.value, message="exit_select"
            )
        return ModeResult(consumed=False, status="inert")


__all__ = ["SelectMode"]
