"""Minimal modal terminal text editor with line wrapping."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "commands",
    "config",
    "context",
    "editing",
    "editor",
    "errors",
    "keymaps",
    "modes",
    "runtime",
    "viewport",
]

__version__ = "0.1.0"
