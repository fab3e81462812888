"""Regular-expression search."""

from __future__ import annotations

import re
from typing import Iterator, Optional, Tuple

from wrapedit.buffer import Buffer
from wrapedit.context import EditorContext
from wrapedit.errors import PatternError
from wrapedit.keymaps import Find
from wrapedit.modes.base_mode import ModeResult
from wrapedit.viewport import move


def find_pattern(context: EditorContext, operation: Find) -> ModeResult | None:
    """Move to the first match after the cursor, scanning forward only."""

    pattern = operation.argument
    buffer = context.buffer
    if not pattern or buffer is None:
        return None
    try:
        regex = re.compile(pattern)
    except re.error as exc:
        raise PatternError(pattern, str(exc)) from exc

    hit = search_forward(buffer, regex)
    if hit is None:
        return ModeResult(consumed=True, status="not_found", message=pattern)
    dy, column = hit
    move(context.viewport, buffer, column - buffer.cursor.x, dy)
    return ModeResult(consumed=True, status="found", message=pattern)


def search_forward(
    buffer: Buffer, regex: "re.Pattern[str]"
) -> Optional[Tuple[int, int]]:
    """Return ``(line offset, column)`` of the next match, or ``None``."""

    for offset, text, start in _candidates(buffer):
        match = regex.search(text, start)
        if match is not None:
            return offset, match.start()
    return None


def _candidates(buffer: Buffer) -> Iterator[Tuple[int, str, int]]:
    line = buffer.current_line
    start = buffer.cursor.x + 1
    if start <= line.length:
        yield 0, line.text, start
    offset = 0
    while line.next is not None:
        offset += 1
        line = buffer.lines[line.next]
        yield offset, line.text, 0


__all__ = ["find_pattern", "search_forward"]
