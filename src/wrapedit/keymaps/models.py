"""Bindable operations and the actions that trigger them.

Operations are a closed set of frozen dataclasses, each carrying its own typed
payload. Those deriving from ``TextOperation`` accept the argument typed on
the command line; the rest ignore it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Optional

from wrapedit.viewport import Marker


@dataclass(frozen=True, slots=True)
class Operation:
    """Base class for everything an action can do."""

    takes_argument: ClassVar[bool] = False

    @property
    def name(self) -> str:
        return type(self).__name__

    def with_argument(self, argument: Optional[str]) -> "Operation":
        del argument
        return self


@dataclass(frozen=True, slots=True)
class TextOperation(Operation):
    """Operation whose payload is a string supplied at bind or command time."""

    argument: Optional[str] = None

    takes_argument: ClassVar[bool] = True

    def with_argument(self, argument: Optional[str]) -> "Operation":
        if argument is None:
            return self
        return replace(self, argument=argument)


@dataclass(frozen=True, slots=True)
class SetMode(Operation):
    mode: str


@dataclass(frozen=True, slots=True)
class Motion(Operation):
    dx: int = 0
    dy: int = 0


@dataclass(frozen=True, slots=True)
class Jump(Operation):
    marker: Marker


@dataclass(frozen=True, slots=True)
class CenterOnCursor(Operation):
    pass


@dataclass(frozen=True, slots=True)
class PageUp(Operation):
    pass


@dataclass(frozen=True, slots=True)
class PageDown(Operation):
    pass


@dataclass(frozen=True, slots=True)
class SelectBuffer(Operation):
    step: int


@dataclass(frozen=True, slots=True)
class CloseBuffer(Operation):
    index: int = 0


@dataclass(frozen=True, slots=True)
class InsertKey(Operation):
    key: str


@dataclass(frozen=True, slots=True)
class DeleteLine(Operation):
    pass


@dataclass(frozen=True, slots=True)
class Append(Operation):
    pass


@dataclass(frozen=True, slots=True)
class NewLine(Operation):
    pass


@dataclass(frozen=True, slots=True)
class Save(TextOperation):
    pass


@dataclass(frozen=True, slots=True)
class ReadFile(TextOperation):
    pass


@dataclass(frozen=True, slots=True)
class ReadString(TextOperation):
    pass


@dataclass(frozen=True, slots=True)
class Find(TextOperation):
    pass


@dataclass(frozen=True, slots=True)
class RunCommand(TextOperation):
    pass


@dataclass(frozen=True, slots=True)
class Repaint(Operation):
    pass


@dataclass(frozen=True, slots=True)
class Quit(Operation):
    pass


OPERATION_TYPES: tuple[type[Operation], ...] = (
    SetMode,
    Motion,
    Jump,
    CenterOnCursor,
    PageUp,
    PageDown,
    SelectBuffer,
    CloseBuffer,
    InsertKey,
    DeleteLine,
    Append,
    NewLine,
    Save,
    ReadFile,
    ReadString,
    Find,
    RunCommand,
    Repaint,
    Quit,
)


@dataclass(frozen=True, slots=True)
class Action:
    """Table entry: an operation reachable by key, by command name, or both."""

    operation: Operation
    key: Optional[str] = None
    command: Optional[str] = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.key and not self.command:
            raise ValueError("Action needs a key or a command name")
        if not isinstance(self.operation, Operation):
            raise TypeError("operation must be an Operation")

    @property
    def id(self) -> str:
        return self.command or f"key:{self.key}"

    def with_argument(self, argument: Optional[str]) -> "Action":
        return replace(self, operation=self.operation.with_argument(argument))

    def matches_key(self, key: str) -> bool:
        return self.key is not None and self.key == key

    def matches_command(self, token: str) -> bool:
        """Named entries match when ``token`` prefixes the name, or when a
        one-character token equals the entry's key."""

        if not self.command or not token:
            return False
        if len(token) == 1 and self.key == token:
            return True
        return self.command.startswith(token)


__all__ = [
    "Action",
    "Append",
    "CenterOnCursor",
    "CloseBuffer",
    "DeleteLine",
    "Find",
    "InsertKey",
    "Jump",
    "Motion",
    "NewLine",
    "OPERATION_TYPES",
    "Operation",
    "PageDown",
    "PageUp",
    "Quit",
    "ReadFile",
    "ReadString",
    "Repaint",
    "RunCommand",
    "Save",
    "SelectBuffer",
    "SetMode",
    "TextOperation",
]
