from __future__ import annotations

from typing import List

import pytest

from wrapedit.config import EditorConfig
from wrapedit.context import EditorContext
from wrapedit.editor import Editor, create_editor
from wrapedit.keymaps import Action, ActionTable, Motion, load_default_actions
from wrapedit.modes import InsertMode, KeyInput, ModeManager, NormalMode
from wrapedit.viewport import Viewport


def make_editor(text: str = "", **config: object) -> Editor:
    editor = create_editor(
        EditorConfig(**config), viewport=Viewport(80, 40)  # type: ignore[arg-type]
    )
    if text:
        editor.context.buffer.lines.extend(text.split("\n"))  # type: ignore[union-attr]
    return editor


def numbered(count: int) -> str:
    return "\n".join(f"line {i}" for i in range(count))


def test_digits_build_a_count_for_the_next_key() -> None:
    editor = make_editor(numbered(20))

    editor.feed_keys(["3", "j"])

    assert editor.context.buffer.cursor.y == 3  # type: ignore[union-attr]
    assert editor.context.repcnt == 0


def test_multi_digit_counts() -> None:
    editor = make_editor(numbered(20))

    editor.feed_keys(["1", "0", "j"])

    assert editor.context.buffer.cursor.y == 10  # type: ignore[union-attr]


def test_zero_without_a_pending_count_is_a_key() -> None:
    editor = make_editor("abcdef")
    editor.context.buffer.cursor.x = 4  # type: ignore[union-attr]

    result = editor.feed("0")

    assert result.consumed is True
    assert editor.context.buffer.cursor.x == 0  # type: ignore[union-attr]
    assert editor.context.repcnt == 0


def test_count_is_capped() -> None:
    editor = make_editor(max_cmd_repetition=5)

    editor.feed_keys(["9", "9"])

    assert editor.context.repcnt == 5


@pytest.mark.parametrize("reset_key", ["ESC", "ENTER"])
def test_escape_and_enter_reset_the_count(reset_key: str) -> None:
    editor = make_editor(numbered(10))

    editor.feed_keys(["4", reset_key, "j"])

    assert editor.context.buffer.cursor.y == 1  # type: ignore[union-attr]


def test_unbound_key_resets_the_count() -> None:
    editor = make_editor(numbered(10))

    result = editor.feed_keys(["4", "Q"])[-1]

    assert result.consumed is False
    assert result.status == "miss"
    assert editor.context.repcnt == 0


def test_every_matching_action_fires() -> None:
    table = ActionTable()
    load_default_actions(table, extra_actions=[Action(Motion(0, 1), key="j")])
    editor = create_editor(action_table=table)
    editor.context.buffer.lines.extend(numbered(10).split("\n"))  # type: ignore

    editor.feed_keys(["2", "j"])

    assert editor.context.buffer.cursor.y == 4  # type: ignore[union-attr]


def test_insert_mode_types_into_the_buffer() -> None:
    editor = make_editor()

    editor.feed_keys(["i", "h", "i"])
    assert editor.context.mode == "insert"

    editor.feed("ESC")
    assert editor.context.mode == "normal"
    assert editor.context.buffer.texts() == ["hi"]  # type: ignore[union-attr]


def test_append_then_type() -> None:
    editor = make_editor("abc")

    editor.feed_keys(["A", "d"])

    assert editor.context.mode == "insert"
    assert editor.context.buffer.texts() == ["abcd"]  # type: ignore[union-attr]


def test_select_mode_captures_anchor_and_ignores_keys() -> None:
    editor = make_editor("one\ntwo\nthree")
    buffer = editor.context.buffer
    editor.feed_keys(["j", "l", "l"])

    editor.feed("v")
    assert editor.context.mode == "select"
    assert buffer.cursor.v0 == (2, 1)  # type: ignore[union-attr]
    assert buffer.cursor.v1 == (2, 1)  # type: ignore[union-attr]

    result = editor.feed("j")
    assert result.consumed is False
    assert buffer.cursor.y == 1  # type: ignore[union-attr]

    editor.feed("ESC")
    assert editor.context.mode == "normal"


def test_command_mode_runs_the_line_and_stays() -> None:
    editor = make_editor("a\nb\nc")

    editor.feed_keys([":", "d", "d"])
    assert editor.context.mode == "command"
    assert editor.context.command_text == "dd"

    result = editor.feed("ENTER")

    assert result.status == "command_submit"
    assert result.message == "dd"
    assert editor.context.buffer.texts() == ["b", "c"]  # type: ignore[union-attr]
    assert editor.context.command_text == ""
    assert editor.context.mode == "command"


def test_entering_command_mode_starts_empty() -> None:
    editor = make_editor()

    editor.feed_keys([":", "x", "y", "ESC", ":"])

    assert editor.context.command_text == ""


def test_command_line_backspace_edits_the_command() -> None:
    editor = make_editor()

    editor.feed_keys([":", "a", "b", "BACKSPACE"])

    assert editor.context.command_text == "a"
    assert editor.context.buffer.texts() == [""]  # type: ignore[union-attr]


def test_mode_switches_are_announced() -> None:
    editor = make_editor()
    switches: List[object] = []
    editor.context.bus.subscribe("mode.switch", switches.append)

    editor.feed_keys(["i", "ESC", ":", "ESC"])

    assert switches == ["insert", "normal", "command", "normal"]


def test_modifier_keys_are_matched_as_tokens() -> None:
    editor = make_editor()
    repaints: List[object] = []
    editor.context.bus.subscribe("editor.repaint", repaints.append)

    editor.feed(KeyInput(key="l", modifiers=("CTRL",)))

    assert repaints == [None]


def test_quit_key_stops_the_editor() -> None:
    editor = make_editor()

    editor.feed("q", modifiers=("CTRL",))

    assert editor.running is False
    assert editor.feed("i").status == "stopped"


def test_manager_rejects_duplicates_and_unknown_modes() -> None:
    editor = make_editor()

    with pytest.raises(ValueError):
        editor.modes.register_mode(InsertMode)
    with pytest.raises(KeyError):
        editor.modes.switch_mode("visual")


def test_normal_mode_requires_an_action_table() -> None:
    with pytest.raises(RuntimeError):
        NormalMode(EditorContext.create())


def test_manager_installs_its_table_in_the_context() -> None:
    context = EditorContext.create()
    manager = ModeManager(context)

    assert context.extras["action_table"] is manager.action_table
    assert len(manager.action_table) > 0
    assert manager.active_mode is None
