"""Helper utilities for table-driven modes."""

from __future__ import annotations

from wrapedit.context import ACTION_TABLE, EditorContext
from wrapedit.keymaps import ActionTable

from .base_mode import KeyInput

ESCAPE_KEYS = frozenset({"ESC", "<Esc>"})


def key_to_token(key: KeyInput) -> str:
    if key.modifiers:
        modifier = "+".join(key.modifiers)
        return f"{modifier}+{key.key}"
    return key.key


def require_action_table(context: EditorContext) -> ActionTable:
    table = context.extras.get(ACTION_TABLE)
    if not isinstance(table, ActionTable):
        raise RuntimeError(f"EditorContext.extras missing '{ACTION_TABLE}'")
    return table


def is_escape(token: str) -> bool:
    return token in ESCAPE_KEYS


__all__ = ["ESCAPE_KEYS", "is_escape", "key_to_token", "require_action_table"]
