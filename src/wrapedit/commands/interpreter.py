"""Command-line interpreter: ``[<count>]<token>[ <argument>]``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from wrapedit import actions
from wrapedit.config import EditorMode
from wrapedit.context import COMMAND_INTERPRETER, EditorContext
from wrapedit.errors import CommandNotFoundError, EditorError
from wrapedit.keymaps import Action, ActionTable
from wrapedit.modes.base_mode import ModeResult
from wrapedit.runtime import telemetry

from .shell import run_shell

SHELL_PREFIX = "!"
_COUNT = re.compile(r"\d+")

ShellRunner = Callable[..., str]


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    count: int
    token: str
    argument: Optional[str] = None

    @property
    def shell_command(self) -> Optional[str]:
        if self.argument is not None and self.argument.startswith(SHELL_PREFIX):
            return self.argument[len(SHELL_PREFIX) :]
        return None


def parse(text: str) -> ParsedCommand:
    """Split a command line into count, token and argument.

    A missing or zero count means one. The token runs up to the first space;
    everything after that space is the argument, even when empty.
    """

    count = 1
    rest = text
    match = _COUNT.match(text)
    if match:
        count = int(match.group()) or 1
        rest = text[match.end() :]
    token, separator, argument = rest.partition(" ")
    return ParsedCommand(
        count=count, token=token, argument=argument if separator else None
    )


class CommandInterpreter:
    """Fires every action whose command name the token prefixes.

    Each matching action runs with the mode flipped to Insert, so text
    operations edit the current buffer rather than the command line. Mode
    switches the actions request are dropped; the mode that was active before
    the run is restored afterwards.
    """

    def __init__(
        self,
        context: EditorContext,
        table: ActionTable,
        *,
        shell: ShellRunner = run_shell,
    ) -> None:
        self.context = context
        self.table = table
        self._shell = shell
        self.logger = telemetry.get_logger("wrapedit.commands")
        context.extras.setdefault(COMMAND_INTERPRETER, self)

    def run(self, text: str) -> ModeResult:
        context = self.context
        context.bus.emit("command.submit", text)
        parsed = parse(text)

        with telemetry.span(
            "commands::run",
            component="commands",
            metadata={"command": text, "count": parsed.count},
        ) as handle:
            try:
                matches = self.resolve(parsed)
                argument = self._argument(parsed)
            except EditorError as exc:
                handle.warn(str(exc))
                actions.report_error(context, exc)
                return ModeResult(
                    consumed=True, status="command_error", message=str(exc)
                )

            handle.add_metadata("matches", len(matches))
            for action in matches:
                if not context.running:
                    break
                self._fire(action.with_argument(argument), parsed.count)

        return ModeResult(consumed=True, status="command_run", message=text)

    def resolve(self, parsed: ParsedCommand) -> tuple[Action, ...]:
        matches = self.table.match_command(parsed.token)
        if not matches:
            raise CommandNotFoundError(parsed.token)
        return matches

    def _argument(self, parsed: ParsedCommand) -> Optional[str]:
        command = parsed.shell_command
        if command is None:
            return parsed.argument
        config = self.context.config
        return self._shell(
            command, timeout=config.shell_timeout, limit=config.shell_output_limit
        )

    def _fire(self, action: Action, count: int) -> None:
        context = self.context
        previous = context.mode
        context.mode = EditorMode.INSERT.value
        try:
            actions.execute(context, action, count)
        finally:
            context.mode = previous


__all__ = ["CommandInterpreter", "ParsedCommand", "parse"]
