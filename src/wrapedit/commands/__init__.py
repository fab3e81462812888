"""Command-line parsing, execution and the shell escape."""

from .interpreter import CommandInterpreter, ParsedCommand, parse
from .shell import run_shell

__all__ = ["CommandInterpreter", "ParsedCommand", "parse", "run_shell"]
