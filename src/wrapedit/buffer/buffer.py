"""Buffers: one line store, one cursor, an optional source path."""

from __future__ import annotations

import shutil
import sys
from typing import IO, Iterator, Optional

from wrapedit.runtime import telemetry

from .lines import Line, LineIndex, LineStore
from .state import Cursor
from .sync import BufferMirror

SCRATCH_NAME = "~scratch~"
STDIN_PATH = "-"


class Buffer:
    """An open document.

    ``curline`` is the arena index of the line under the cursor and always
    refers to a live line. ``linexoff`` is the gutter reserved for line
    numbers.
    """

    def __init__(
        self,
        *,
        capacity: int = 1024,
        path: Optional[str] = None,
        linexoff: int = 4,
    ) -> None:
        self.lines = LineStore(capacity)
        self.curline: LineIndex = self.lines.head
        self.path = path
        self.cursor = Cursor()
        self.linexoff = linexoff

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        capacity: int = 1024,
        path: Optional[str] = None,
        linexoff: int = 4,
    ) -> "Buffer":
        buffer = cls(capacity=capacity, path=path, linexoff=linexoff)
        buffer.lines.extend(_records(text.split("\n"), capacity))
        buffer.curline = buffer.lines.head
        return buffer

    @property
    def name(self) -> str:
        return self.path or SCRATCH_NAME

    @property
    def capacity(self) -> int:
        return self.lines.capacity

    @property
    def current_line(self) -> Line:
        return self.lines[self.curline]

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def texts(self) -> list[str]:
        return self.lines.texts()

    def text(self) -> str:
        return "\n".join(self.texts())

    def load(self, path: str, *, stdin: Optional[IO[str]] = None) -> bool:
        """Append the records of ``path`` (``-`` for stdin) to the buffer.

        The path is remembered even when the source cannot be opened so a
        later save creates the file.
        """

        self.path = path
        with telemetry.span(
            "buffer::load", component="buffer", metadata={"path": path}
        ) as handle:
            try:
                if path == STDIN_PATH:
                    self.lines.extend(_stream(stdin or sys.stdin, self.capacity))
                else:
                    with open(path, encoding="utf-8", errors="replace") as handle_in:
                        self.lines.extend(_stream(handle_in, self.capacity))
            except OSError as exc:
                handle.warn(f"open failed: {exc}")
                return False
            handle.add_metadata("lines", self.line_count)
        self.curline = self.lines.head
        return True

    def save(
        self, path: Optional[str] = None, *, backup_path: Optional[str] = None
    ) -> bool:
        """Write every line plus one newline to ``path`` or the buffer path."""

        target = path or self.path
        if not target:
            return False
        with telemetry.span(
            "buffer::save", component="buffer", metadata={"path": target}
        ) as handle:
            if backup_path and self.path:
                try:
                    shutil.copyfile(self.path, backup_path)
                except OSError as exc:
                    handle.warn(f"backup skipped: {exc}")
            try:
                with open(target, "w", encoding="utf-8") as out:
                    for line in self.lines:
                        out.write(line.text)
                        out.write("\n")
            except OSError as exc:
                handle.warn(f"write failed: {exc}")
                return False
            handle.add_metadata("lines", self.line_count)
        return True

    def clear(self) -> None:
        self.curline = self.lines.clear()
        self.cursor.reset()

    def release(self) -> None:
        self.lines.release()
        self.curline = self.lines.head
        self.cursor.reset()

    def delete_line(self) -> None:
        """Remove the current line; the only line is emptied instead."""

        line = self.current_line
        if line.prev is None and line.next is None:
            line.text = ""
            self.cursor.x = 0
            return
        to_previous = line.next is None
        self.curline = self.lines.remove(self.curline)  # type: ignore[assignment]
        if to_previous:
            self.cursor.y -= 1
        self.cursor.x = max(0, min(self.cursor.x, self.current_line.length))

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            name=self.name,
            lines=tuple(self.texts()),
            cursor=self.cursor.position,
            current_row=self.cursor.y,
            starty=self.cursor.starty,
            linexoff=self.linexoff,
            path=self.path,
            attributes=dict(attributes or {}),
        )


def _stream(source: IO[str], capacity: int) -> Iterator[str]:
    for record in source:
        if record.endswith("\n"):
            record = record[:-1]
        yield from _split(record, capacity)


def _records(texts: list[str], capacity: int) -> Iterator[str]:
    for text in texts:
        yield from _split(text, capacity)


def _split(record: str, capacity: int) -> Iterator[str]:
    # records longer than a line's capacity continue on the following lines
    if len(record) <= capacity:
        yield record
        return
    for start in range(0, len(record), capacity):
        yield record[start : start + capacity]


__all__ = ["Buffer", "SCRATCH_NAME", "STDIN_PATH"]
