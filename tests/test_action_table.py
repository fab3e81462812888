from __future__ import annotations

import pytest

from wrapedit.keymaps import (
    DEFAULT_ACTIONS,
    Action,
    ActionTable,
    DeleteLine,
    Motion,
    Quit,
    ReadString,
    Repaint,
    Save,
    load_default_actions,
)


def make_default_table() -> ActionTable:
    return load_default_actions(ActionTable())


def test_match_key_returns_every_entry_in_order() -> None:
    table = ActionTable(
        [
            Action(Motion(1, 0), key="x"),
            Action(Repaint(), key="x", command="redraw"),
            Action(Quit(), key="q"),
        ]
    )

    matches = table.match_key("x")

    assert [action.operation for action in matches] == [Motion(1, 0), Repaint()]
    assert table.match_key("z") == ()


def test_command_token_matches_name_prefixes() -> None:
    table = make_default_table()

    assert [a.command for a in table.match_command("dd")] == ["dd"]
    assert [a.command for a in table.match_command("d")] == ["down", "dd"]
    assert [a.command for a in table.match_command("wri")] == ["write"]


def test_single_character_token_matches_the_key() -> None:
    table = make_default_table()

    assert [a.command for a in table.match_command("j")] == ["down"]
    assert [a.command for a in table.match_command("D")] == ["dd"]


def test_keyless_and_unnamed_entries() -> None:
    table = make_default_table()

    assert table.match_command("") == ()
    # ':' switches to command mode but has no command name
    assert table.match_command(":") == ()
    assert table.match_key("edit") == ()


def test_action_needs_a_trigger() -> None:
    with pytest.raises(ValueError):
        Action(Quit())


def test_action_ids() -> None:
    assert Action(Quit(), key="CTRL+q", command="quit").id == "quit"
    assert Action(Motion(0, 1), key="DOWN").id == "key:DOWN"


def test_with_argument_only_touches_text_operations() -> None:
    save = Action(Save(), command="write").with_argument("out.txt")
    delete = Action(DeleteLine(), command="dd").with_argument("ignored")
    put = Action(ReadString("bound"), command="put").with_argument(None)

    assert save.operation == Save("out.txt")
    assert delete.operation == DeleteLine()
    assert put.operation == ReadString("bound")


def test_register_unregister_and_revision() -> None:
    table = ActionTable()
    first = table.register(Action(Quit(), key="q", command="quit"))
    table.register(Action(Repaint(), key="r"), position=0)

    assert [a.id for a in table] == ["key:r", "quit"]
    revision = table.revision()

    removed = table.unregister(lambda action: action is first)

    assert removed == (first,)
    assert len(table) == 1
    assert table.revision() == revision + 1
    assert table.unregister(lambda action: False) == ()
    assert table.revision() == revision + 1


def test_default_table_covers_the_named_commands() -> None:
    stats = make_default_table().stats()

    assert stats.action_count == len(DEFAULT_ACTIONS)
    for name in (
        "dd",
        "append",
        "newline",
        "write",
        "edit",
        "put",
        "find",
        "run",
        "repaint",
        "quit",
        "bprev",
        "bnext",
        "close",
    ):
        assert name in stats.commands
    for key in ("h", "j", "k", "l", "UP", "DOWN", "LEFT", "RIGHT", "ESC", ":"):
        assert key in stats.keys


def test_default_ids_are_unique() -> None:
    ids = [action.id for action in DEFAULT_ACTIONS]

    assert len(ids) == len(set(ids))


def test_load_defaults_with_filters_and_extras() -> None:
    only = load_default_actions(ActionTable(), include_actions=["quit", "write"])
    assert sorted(a.id for a in only) == ["quit", "write"]

    trimmed = load_default_actions(ActionTable(), exclude_actions=["quit"])
    assert "quit" not in trimmed.stats().commands
    assert len(trimmed) == len(DEFAULT_ACTIONS) - 1

    extra = Action(Repaint(), key="R", command="redraw")
    extended = load_default_actions(ActionTable(), extra_actions=[extra])
    assert list(extended)[-1] is extra
