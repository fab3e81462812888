"""Exceptions raised inside the editor core.

None of these escape a key dispatch: the command interpreter and the action
dispatcher catch them, report ``command.error`` on the bus and carry on.
"""

from __future__ import annotations


class EditorError(RuntimeError):
    """Base class for recoverable editor failures."""


class CommandNotFoundError(EditorError):
    """Raised when a command token matches no action."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown command '{token}'")
        self.token = token


class ShellCommandError(EditorError):
    """Raised when a shell escape times out or its output cannot be read."""

    def __init__(self, message: str, *, command: str) -> None:
        super().__init__(message)
        self.command = command


class PatternError(EditorError):
    """Raised when a search pattern does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid pattern '{pattern}': {reason}")
        self.pattern = pattern
        self.reason = reason


__all__ = [
    "EditorError",
    "CommandNotFoundError",
    "ShellCommandError",
    "PatternError",
]
