"""Command-line mode: keys edit the command buffer, Enter runs it."""

from __future__ import annotations

from wrapedit import editing
from wrapedit.config import EditorMode
from wrapedit.editing import NEWLINE_KEYS

from .base_mode import KeyInput, Mode, ModeResult
from .keymap_helpers import is_escape, key_to_token


class CommandMode(Mode):
    name = EditorMode.COMMAND.value

    def on_enter(self, previous: str | None) -> None:
        del previous
        self.context.cmdbuf.clear()

    @property
    def current_command(self) -> str:
        return self.context.command_text

    def handle_key(self, key: KeyInput) -> ModeResult:
        token = key_to_token(key)
        if is_escape(token):
            return ModeResult(
                consumed=True,
                switch_to=EditorMode.NORMAL.value,
                message="command_cancel",
            )

        if token in NEWLINE_KEYS:
            command = self.current_command
            editing.insert(self.context, self.context.cmdbuf, token)
            self.context.cmdbuf.clear()
            return ModeResult(consumed=True, status="command_submit", message=command)

        editing.insert(self.context, self.context.cmdbuf, token)
        return ModeResult(consumed=True, status="editing")


__all__ = ["CommandMode"]
