"""Arena-backed doubly linked line storage.

Each buffer owns one ``LineStore``. Lines sit in slots addressed by stable
integer indices; ``prev``/``next`` hold neighbour indices. Removing a line
marks its slot free for reuse, so an index never points at a line from a
different position in the chain while it is still referenced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

LineIndex = int


@dataclass(slots=True)
class Line:
    """One fixed-capacity text record."""

    capacity: int
    text: str = ""
    prev: Optional[LineIndex] = None
    next: Optional[LineIndex] = None

    @property
    def length(self) -> int:
        return len(self.text)

    def write(self, text: str) -> None:
        # capacity is fixed at creation; anything past it is dropped
        self.text = text[: self.capacity]


class LineStore:
    """Doubly linked sequence of lines kept in a slot arena."""

    def __init__(self, capacity: int, lines: Iterable[str] = ()) -> None:
        if capacity <= 0:
            raise ValueError("line capacity must be positive")
        self.capacity = capacity
        self._slots: List[Optional[Line]] = []
        self._free: List[LineIndex] = []
        self.head: LineIndex = self._allocate("")
        self.extend(lines)

    def __getitem__(self, index: LineIndex) -> Line:
        line = self._slots[index] if 0 <= index < len(self._slots) else None
        if line is None:
            raise KeyError(f"Line slot {index} is not in use")
        return line

    def __iter__(self) -> Iterator[Line]:
        for index in self.indices():
            yield self._slots[index]  # type: ignore[misc]

    def __len__(self) -> int:
        return sum(1 for _ in self.indices())

    def indices(self) -> Iterator[LineIndex]:
        index: Optional[LineIndex] = self.head
        while index is not None:
            yield index
            index = self[index].next

    @property
    def tail(self) -> LineIndex:
        index = self.head
        while self[index].next is not None:
            index = self[index].next  # type: ignore[assignment]
        return index

    def texts(self) -> list[str]:
        return [line.text for line in self]

    def is_blank(self) -> bool:
        head = self[self.head]
        return head.next is None and not head.text

    def is_live(self, index: LineIndex) -> bool:
        return 0 <= index < len(self._slots) and self._slots[index] is not None

    def insert_after(self, index: LineIndex, text: str = "") -> LineIndex:
        """Splice a new line after ``index`` and return its slot."""

        anchor = self[index]
        new_index = self._allocate(text)
        new_line = self[new_index]
        new_line.prev = index
        new_line.next = anchor.next
        if anchor.next is not None:
            self[anchor.next].prev = new_index
        anchor.next = new_index
        return new_index

    def extend(self, texts: Iterable[str]) -> None:
        """Fill the store with ``texts``, reusing a lone empty head line."""

        last = self.tail
        reuse_head = self.is_blank()
        for text in texts:
            if reuse_head:
                self[last].write(text)
                reuse_head = False
                continue
            last = self.insert_after(last, text)

    def remove(self, index: LineIndex) -> Optional[LineIndex]:
        """Unlink ``index`` and free its slot.

        Returns the successor, or the predecessor when the removed line was
        the last one. The head index follows when the head is removed.
        """

        line = self[index]
        if line.prev is None and line.next is None:
            raise ValueError("A line store always keeps one line")
        if line.prev is not None:
            self[line.prev].next = line.next
        if line.next is not None:
            self[line.next].prev = line.prev
        if index == self.head:
            self.head = line.next  # type: ignore[assignment]
        neighbour = line.next if line.next is not None else line.prev
        self._slots[index] = None
        self._free.append(index)
        return neighbour

    def clear(self) -> LineIndex:
        """Drop every line except the head and empty it."""

        head = self[self.head]
        self._slots = [None] * len(self._slots)
        self._free = [i for i in range(len(self._slots)) if i != self.head]
        head.text = ""
        head.next = None
        head.prev = None
        self._slots[self.head] = head
        return self.head

    def release(self) -> None:
        """Free the whole arena at once, leaving a single empty line."""

        self._slots = []
        self._free = []
        self.head = self._allocate("")

    def _allocate(self, text: str) -> LineIndex:
        line = Line(capacity=self.capacity)
        line.write(text)
        if self._free:
            index = self._free.pop()
            self._slots[index] = line
        else:
            index = len(self._slots)
            self._slots.append(line)
        return index


__all__ = ["Line", "LineIndex", "LineStore"]
