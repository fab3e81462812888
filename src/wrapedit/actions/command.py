"""Actions that evaluate command lines."""

from __future__ import annotations

from wrapedit.context import EditorContext
from wrapedit.keymaps import RunCommand


def run_command(context: EditorContext, operation: RunCommand) -> None:
    if operation.argument:
        context.interpreter().run(operation.argument)


__all__ = ["run_command"]
