from __future__ import annotations

import pytest

from wrapedit.buffer import LineStore


def make_store(*texts: str, capacity: int = 16) -> LineStore:
    return LineStore(capacity, texts)


def test_new_store_holds_one_empty_line() -> None:
    store = LineStore(8)

    assert store.texts() == [""]
    assert len(store) == 1
    assert store.is_blank()


def test_extend_reuses_blank_head() -> None:
    store = make_store("a", "b", "c")

    assert store.texts() == ["a", "b", "c"]
    assert store[store.head].prev is None
    assert store[store.tail].text == "c"


def test_extend_keeps_leading_empty_record() -> None:
    store = make_store("", "", "x")

    assert store.texts() == ["", "", "x"]


def test_insert_after_splices_between_neighbours() -> None:
    store = make_store("a", "c")

    index = store.insert_after(store.head, "b")

    assert store.texts() == ["a", "b", "c"]
    assert store[index].prev == store.head
    assert store[store[index].next].text == "c"  # type: ignore[index]


def test_remove_head_moves_head_to_successor() -> None:
    store = make_store("a", "b")
    old_head = store.head

    neighbour = store.remove(old_head)

    assert store.head == neighbour
    assert store.texts() == ["b"]
    assert not store.is_live(old_head)


def test_remove_tail_returns_predecessor() -> None:
    store = make_store("a", "b")

    assert store.remove(store.tail) == store.head
    assert store.texts() == ["a"]


def test_remove_only_line_is_rejected() -> None:
    store = make_store("only")

    with pytest.raises(ValueError):
        store.remove(store.head)


def test_freed_slot_is_reused() -> None:
    store = make_store("a", "b", "c")
    middle = store[store.head].next
    assert middle is not None

    store.remove(middle)
    index = store.insert_after(store.head, "x")

    assert index == middle
    assert store.texts() == ["a", "x", "c"]


def test_freed_slot_lookup_raises() -> None:
    store = make_store("a", "b")
    tail = store.tail
    store.remove(tail)

    with pytest.raises(KeyError):
        store[tail]


def test_writes_truncate_to_capacity() -> None:
    store = LineStore(3, ["abcdef"])
    line = store[store.head]

    line.write("wxyz")

    assert line.text == "wxy"
    assert line.length == 3


def test_clear_keeps_single_empty_head() -> None:
    store = make_store("a", "b", "c")

    head = store.clear()

    assert head == store.head
    assert store.texts() == [""]
    assert store.is_blank()


def test_release_resets_the_arena() -> None:
    store = make_store("a", "b", "c")

    store.release()

    assert store.texts() == [""]
    assert store.head == 0
    assert not store.is_live(1)
