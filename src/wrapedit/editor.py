"""Wiring for a ready-to-drive editor: context, modes, table, interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterable, Optional, Sequence

from wrapedit import actions
from wrapedit.commands import CommandInterpreter, run_shell
from wrapedit.commands.interpreter import ShellRunner
from wrapedit.config import EditorConfig
from wrapedit.context import EditorContext
from wrapedit.keymaps import Action, ActionTable, Quit
from wrapedit.modes import (
    CommandMode,
    InsertMode,
    KeyInput,
    ModeManager,
    ModeResult,
    NormalMode,
    SelectMode,
)
from wrapedit.runtime import telemetry
from wrapedit.viewport import Viewport

QUIT_ACTION = Action(Quit(), command="quit")


@dataclass
class Editor:
    """Host-facing handle; adapters feed it normalized keys."""

    context: EditorContext
    modes: ModeManager
    interpreter: CommandInterpreter

    @property
    def table(self) -> ActionTable:
        return self.modes.action_table

    @property
    def running(self) -> bool:
        return self.context.running

    def feed(self, key: str | KeyInput, *, modifiers: Sequence[str] = ()) -> ModeResult:
        if not isinstance(key, KeyInput):
            key = KeyInput(key=key, modifiers=tuple(modifiers))
        if not self.context.running:
            return ModeResult(consumed=False, status="stopped")
        return self.modes.handle_key(key)

    def feed_keys(self, keys: Iterable[str]) -> list[ModeResult]:
        return [self.feed(key) for key in keys]

    def run_command(self, text: str) -> ModeResult:
        return self.interpreter.run(text)

    def quit(self) -> None:
        if self.context.running:
            actions.execute(self.context, QUIT_ACTION)


def create_editor(
    config: Optional[EditorConfig] = None,
    *,
    paths: Sequence[str] = (),
    stdin: Optional[IO[str]] = None,
    viewport: Optional[Viewport] = None,
    action_table: Optional[ActionTable] = None,
    shell: ShellRunner = run_shell,
) -> Editor:
    """Build an editor and open ``paths`` in order; the last one is current.

    With no paths a scratch buffer is created.
    """

    context = EditorContext.create(config, viewport=viewport)
    manager = ModeManager(context, action_table=action_table)
    for mode_cls in (NormalMode, InsertMode, SelectMode, CommandMode):
        manager.register_mode(mode_cls)
    interpreter = CommandInterpreter(context, manager.action_table, shell=shell)

    for path in paths:
        context.buffers.open(path, stdin=stdin)
    context.buffers.ensure_current()
    telemetry.record_event(
        "editor.start",
        data={"buffers": len(context.buffers), "actions": len(manager.action_table)},
    )
    return Editor(context=context, modes=manager, interpreter=interpreter)


__all__ = ["Editor", "QUIT_ACTION", "create_editor"]
