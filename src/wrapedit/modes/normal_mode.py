"""Normal mode: repetition counts and key-bound actions."""

from __future__ import annotations

from typing import Optional

from wrapedit import actions
from wrapedit.config import EditorMode
from wrapedit.context import EditorContext
from wrapedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeResult
from .keymap_helpers import key_to_token, require_action_table

DIGITS = "0123456789"
COUNT_RESET_KEYS = frozenset({"ESC", "ENTER"})


class NormalMode(Mode):
    """Digits build a pending count; any other key fires every matching entry.

    ``0`` only counts once a count is pending, so it stays bindable.
    """

    name = EditorMode.NORMAL.value

    def __init__(self, context: EditorContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("wrapedit.modes.normal")
        self._table = require_action_table(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        context = self.context
        token = key_to_token(key)

        if token in COUNT_RESET_KEYS:
            context.repcnt = 0

        if len(token) == 1 and token in DIGITS and (token != "0" or context.repcnt):
            context.repcnt = min(
                10 * context.repcnt + int(token), context.config.max_cmd_repetition
            )
            return ModeResult(
                consumed=True, status="count", message=str(context.repcnt)
            )

        count = context.repcnt or 1
        matches = self._table.match_key(token)
        switch_to: Optional[str] = None
        status = "miss" if not matches else "ok"
        message: Optional[str] = None
        for action in matches:
            outcome = actions.execute(context, action, count)
            switch_to = outcome.switch_to or switch_to
            status = outcome.status
            message = outcome.message
        context.repcnt = 0

        return ModeResult(
            consumed=bool(matches), switch_to=switch_to, status=status, message=message
        )


__all__ = ["NormalMode"]
