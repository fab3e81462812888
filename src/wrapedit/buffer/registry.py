"""The ordered set of open buffers and the current-buffer pointer."""

from __future__ import annotations

from typing import IO, Iterator, List, Optional

from wrapedit.runtime.telemetry import record_event

from .buffer import Buffer


class BufferRegistry:
    """Doubly linked registry of buffers; new buffers go to the front.

    ``predecessor``/``successor`` follow list order, so the predecessor of a
    buffer is the one opened after it.
    """

    def __init__(self, *, capacity: int = 1024, linexoff: int = 4) -> None:
        self.capacity = capacity
        self.linexoff = linexoff
        self._buffers: List[Buffer] = []
        self.current: Optional[Buffer] = None

    def __iter__(self) -> Iterator[Buffer]:
        return iter(tuple(self._buffers))

    def __len__(self) -> int:
        return len(self._buffers)

    def __contains__(self, buffer: object) -> bool:
        return any(existing is buffer for existing in self._buffers)

    @property
    def head(self) -> Optional[Buffer]:
        return self._buffers[0] if self._buffers else None

    def create(self, *, path: Optional[str] = None) -> Buffer:
        """Prepend a fresh one-line buffer and make it current."""

        buffer = Buffer(capacity=self.capacity, path=path, linexoff=self.linexoff)
        self._buffers.insert(0, buffer)
        self.current = buffer
        return buffer

    def open(self, path: str, *, stdin: Optional[IO[str]] = None) -> Buffer:
        buffer = self.create()
        loaded = buffer.load(path, stdin=stdin)
        record_event(
            "buffer.open",
            data={"path": path, "loaded": loaded, "lines": buffer.line_count},
        )
        return buffer

    def ensure_current(self) -> Buffer:
        """Return the current buffer, creating a scratch buffer if none is."""

        if self.current is None:
            return self.create()
        return self.current

    def predecessor(self, buffer: Buffer) -> Optional[Buffer]:
        index = self._index(buffer)
        return self._buffers[index - 1] if index > 0 else None

    def successor(self, buffer: Buffer) -> Optional[Buffer]:
        index = self._index(buffer)
        return self._buffers[index + 1] if index + 1 < len(self._buffers) else None

    def select(self, step: int) -> Optional[Buffer]:
        """Move the current pointer one buffer back (step < 0) or forward."""

        if self.current is None:
            return None
        if step < 0:
            target = self.predecessor(self.current)
        elif step > 0:
            target = self.successor(self.current)
        else:
            target = None
        if target is not None:
            self.current = target
        return self.current

    def close(self, buffer: Optional[Buffer] = None) -> Optional[Buffer]:
        """Detach ``buffer`` (default: current) and release its lines.

        When the current buffer closes, its successor becomes current, or
        nothing when it was the last one. Returns the new current buffer.
        """

        target = buffer or self.current
        if target is None or target not in self:
            return self.current
        successor = self.successor(target)
        self._buffers.pop(self._index(target))
        target.release()
        if self.current is target:
            self.current = successor
        record_event("buffer.close", data={"name": target.name})
        return self.current

    def close_all(self) -> None:
        for buffer in self._buffers:
            buffer.release()
        self._buffers.clear()
        self.current = None

    def _index(self, buffer: Buffer) -> int:
        for index, existing in enumerate(self._buffers):
            if existing is buffer:
                return index
        raise KeyError(f"Buffer '{buffer.name}' is not registered")


__all__ = ["BufferRegistry"]
