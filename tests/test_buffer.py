from __future__ import annotations

import io
from pathlib import Path

from wrapedit.buffer import SCRATCH_NAME, Buffer, BufferRegistry


def make_file(tmp_path: Path, text: str, name: str = "doc.txt") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_from_text_creates_one_line_per_record() -> None:
    buffer = Buffer.from_text("one\ntwo\nthree")

    assert buffer.texts() == ["one", "two", "three"]
    assert buffer.line_count == 3
    assert buffer.name == SCRATCH_NAME
    assert buffer.current_line.text == "one"


def test_load_strips_terminators_and_save_round_trips(tmp_path: Path) -> None:
    source = make_file(tmp_path, "alpha\nbeta\n\ngamma\n")
    target = tmp_path / "out.txt"
    buffer = Buffer()

    assert buffer.load(str(source)) is True
    assert buffer.texts() == ["alpha", "beta", "", "gamma"]
    assert buffer.save(str(target)) is True

    assert target.read_text(encoding="utf-8") == "alpha\nbeta\n\ngamma\n"
    reloaded = Buffer()
    reloaded.load(str(target))
    assert reloaded.line_count == 4


def test_long_records_are_split_by_capacity(tmp_path: Path) -> None:
    source = make_file(tmp_path, "abcdefgh\n")
    buffer = Buffer(capacity=3)

    buffer.load(str(source))

    assert buffer.texts() == ["abc", "def", "gh"]


def test_missing_source_keeps_path_and_creates_on_save(tmp_path: Path) -> None:
    path = tmp_path / "new.txt"
    buffer = Buffer()

    assert buffer.load(str(path)) is False
    assert buffer.path == str(path)
    assert buffer.texts() == [""]

    buffer.current_line.write("hello")
    assert buffer.save() is True
    assert path.read_text(encoding="utf-8") == "hello\n"


def test_load_reads_stdin_for_dash() -> None:
    buffer = Buffer()

    buffer.load("-", stdin=io.StringIO("x\ny\n"))

    assert buffer.texts() == ["x", "y"]
    assert buffer.name == "-"


def test_save_without_any_path_is_skipped() -> None:
    assert Buffer.from_text("text").save() is False


def test_save_copies_previous_file_to_backup(tmp_path: Path) -> None:
    path = make_file(tmp_path, "old\n")
    backup = tmp_path / "backup.txt"
    buffer = Buffer()
    buffer.load(str(path))
    buffer.current_line.write("new")

    buffer.save(backup_path=str(backup))

    assert backup.read_text(encoding="utf-8") == "old\n"
    assert path.read_text(encoding="utf-8") == "new\n"


def test_delete_line_moves_to_successor_and_updates_head() -> None:
    buffer = Buffer.from_text("a\nb\nc")

    buffer.delete_line()

    assert buffer.texts() == ["b", "c"]
    assert buffer.current_line.text == "b"
    assert buffer.lines.head == buffer.curline


def test_delete_last_line_moves_to_predecessor() -> None:
    buffer = Buffer.from_text("a\nb")
    buffer.curline = buffer.current_line.next  # type: ignore[assignment]
    buffer.cursor.y = 1

    buffer.delete_line()

    assert buffer.texts() == ["a"]
    assert buffer.cursor.y == 0


def test_delete_only_line_empties_it() -> None:
    buffer = Buffer.from_text("abc")
    buffer.cursor.x = 2

    buffer.delete_line()

    assert buffer.texts() == [""]
    assert buffer.cursor.x == 0
    assert buffer.line_count == 1


def test_clear_resets_lines_and_cursor() -> None:
    buffer = Buffer.from_text("a\nb\nc")
    buffer.cursor.x = 1
    buffer.cursor.y = 2

    buffer.clear()

    assert buffer.texts() == [""]
    assert buffer.cursor.position == (0, 0)


def test_mirror_snapshots_lines_and_cursor() -> None:
    buffer = Buffer.from_text("a\nb", path="notes.txt")
    buffer.cursor.x = 1

    mirror = buffer.mirror(attributes={"mode": "normal"})

    assert mirror.text == "a\nb"
    assert mirror.cursor == (1, 0)
    assert mirror.name == "notes.txt"
    assert mirror.attributes == {"mode": "normal"}


def test_registry_prepends_and_selects_without_wrapping() -> None:
    registry = BufferRegistry()
    first = registry.create(path="a")
    second = registry.create(path="b")

    assert registry.head is second
    assert registry.current is second
    assert registry.select(1) is first
    assert registry.select(1) is first
    assert registry.select(-1) is second
    assert registry.select(-1) is second


def test_closing_current_buffer_advances_to_successor() -> None:
    registry = BufferRegistry()
    first = registry.create(path="a")
    second = registry.create(path="b")

    assert registry.close() is first
    assert second not in registry
    assert len(registry) == 1

    assert registry.close() is None
    assert registry.current is None
    scratch = registry.ensure_current()
    assert scratch.name == SCRATCH_NAME
    assert registry.current is scratch


def test_registry_open_missing_file_still_registers(tmp_path: Path) -> None:
    registry = BufferRegistry(capacity=32)
    path = str(tmp_path / "missing.txt")

    buffer = registry.open(path)

    assert registry.current is buffer
    assert buffer.path == path
    assert buffer.capacity == 32
    assert buffer.line_count == 1
