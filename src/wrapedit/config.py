"""Editor configuration and mode constants."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Mapping, Optional

ENV_PREFIX = "WRAPEDIT_"


class EditorMode(str, Enum):
    """Available editor modes."""

    NORMAL = "normal"
    INSERT = "insert"
    SELECT = "select"
    COMMAND = "command"


MODE_LABELS = {
    EditorMode.NORMAL: "NORMAL",
    EditorMode.INSERT: "INSERT",
    EditorMode.SELECT: "SELECT",
    EditorMode.COMMAND: "COMMAND",
}


@dataclass(frozen=True)
class EditorConfig:
    """Build-time knobs for buffers, the line editor and the shell escape."""

    default_linebuf_size: int = 1024
    tab_width: int = 4
    auto_indent: bool = True
    max_cmd_repetition: int = 1000
    line_numbers: bool = True
    gutter_width: int = 4
    backup_on_write: bool = False
    backup_path: str = os.path.join(os.path.expanduser("~"), ".wrapedit.bak")
    shell_timeout: float = 10.0
    shell_output_limit: int = 64 * 1024

    def __post_init__(self) -> None:
        if self.default_linebuf_size <= 0:
            raise ValueError("default_linebuf_size must be positive")
        if self.tab_width <= 0:
            raise ValueError("tab_width must be positive")
        if self.max_cmd_repetition <= 0:
            raise ValueError("max_cmd_repetition must be positive")
        if self.gutter_width < 0:
            raise ValueError("gutter_width cannot be negative")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        """Read ``WRAPEDIT_<FIELD>`` overrides on top of the defaults."""

        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        for item in fields(cls):
            raw = env.get(f"{ENV_PREFIX}{item.name.upper()}")
            if raw is None:
                continue
            overrides[item.name] = _coerce(raw, type(getattr(cls, item.name)))
        return cls(**overrides)

    def with_overrides(self, **changes: object) -> "EditorConfig":
        cleaned = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **cleaned)


def _coerce(raw: str, kind: type) -> object:
    if kind is bool:
        return raw.lower() in {"1", "true", "yes", "on"}
    if kind is int:
        return int(raw)
    if kind is float:
        return float(raw)
    return raw


__all__ = ["EditorConfig", "EditorMode", "MODE_LABELS"]
