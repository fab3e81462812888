"""Mode manager coordinating Normal/Insert/Select/Command dispatch."""

from __future__ import annotations

from typing import Dict, Optional, Type

from wrapedit.context import ACTION_TABLE, MODE_MANAGER, EditorContext
from wrapedit.keymaps import ActionTable, load_default_actions
from wrapedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeResult


class ModeManager:
    """Owns the mode instances and dispatches key events to the active one.

    The active mode is whatever ``context.mode`` names, so code that flips the
    mode directly (the command interpreter) stays consistent with the manager;
    only ``switch_mode`` runs the enter/exit hooks.
    """

    def __init__(
        self,
        context: EditorContext,
        *,
        action_table: ActionTable | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self.logger = telemetry.get_logger("wrapedit.modes")
        self.action_table = (
            action_table
            if action_table is not None
            else ActionTable(logger_name="wrapedit.actions")
        )
        if load_defaults and action_table is None:
            load_default_actions(self.action_table)
        self.context.extras.setdefault(ACTION_TABLE, self.action_table)
        self.context.extras.setdefault(MODE_MANAGER, self)

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._modes.get(self.context.mode)

    @property
    def modes(self) -> tuple[str, ...]:
        return tuple(self._modes)

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self.context.mode = name
        self._modes[name].on_enter(previous.name if previous else None)
        telemetry.record_event("mode.switch", data={"mode": name})
        self.context.bus.emit("mode.switch", name)

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError(f"No mode registered for '{self.context.mode}'")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ) as handle:
            result = mode.handle_key(key)
            handle.add_metadata("status", result.status)
        if result.switch_to and self.context.running:
            self.switch_mode(result.switch_to)
        return result


__all__ = ["ModeManager"]
