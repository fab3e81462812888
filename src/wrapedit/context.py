"""The editor context threaded through every operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Protocol

from wrapedit.buffer import Buffer, BufferRegistry
from wrapedit.config import EditorConfig, EditorMode
from wrapedit.viewport import Viewport

COMMAND_INTERPRETER = "command_interpreter"
ACTION_TABLE = "action_table"
MODE_MANAGER = "mode_manager"


class CommandRunner(Protocol):
    def run(self, text: str) -> object:
        ...


class ModeBus:
    """Minimal event bus letting components exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass
class EditorContext:
    """Everything that used to be process-wide: buffers, mode, count, sizes."""

    config: EditorConfig
    buffers: BufferRegistry
    cmdbuf: Buffer
    viewport: Viewport = field(default_factory=Viewport)
    bus: ModeBus = field(default_factory=ModeBus)
    mode: str = EditorMode.NORMAL.value
    repcnt: int = 0
    running: bool = True
    extras: Dict[str, object] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        config: Optional[EditorConfig] = None,
        *,
        viewport: Optional[Viewport] = None,
    ) -> "EditorContext":
        config = config or EditorConfig()
        buffers = BufferRegistry(
            capacity=config.default_linebuf_size, linexoff=config.gutter_width
        )
        cmdbuf = Buffer(capacity=config.default_linebuf_size, linexoff=0)
        return cls(
            config=config,
            buffers=buffers,
            cmdbuf=cmdbuf,
            viewport=viewport or Viewport(),
        )

    @property
    def buffer(self) -> Optional[Buffer]:
        return self.buffers.current

    @property
    def command_text(self) -> str:
        return self.cmdbuf.current_line.text

    def interpreter(self) -> CommandRunner:
        runner = self.extras.get(COMMAND_INTERPRETER)
        if runner is None:
            raise RuntimeError(f"EditorContext.extras missing '{COMMAND_INTERPRETER}'")
        return runner  # type: ignore[return-value]


__all__ = [
    "ACTION_TABLE",
    "COMMAND_INTERPRETER",
    "MODE_MANAGER",
    "CommandRunner",
    "EditorContext",
    "ModeBus",
]
