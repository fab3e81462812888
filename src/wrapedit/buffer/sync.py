"""Read-only snapshots handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from .state import Coord


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of one buffer."""

    name: str
    lines: tuple[str, ...]
    cursor: Coord
    current_row: int
    starty: int
    linexoff: int
    path: Optional[str] = None
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class BufferSync(Protocol):
    """How renderers pull buffer state without touching the line store."""

    def pull_buffer(self) -> Optional[BufferMirror]:
        """Return the snapshot the host should render, if any buffer is open."""
        ...


__all__ = ["BufferMirror", "BufferSync"]
