from __future__ import annotations

import pytest

from wrapedit.config import MODE_LABELS, EditorConfig, EditorMode


def test_environment_values_are_coerced_to_field_types() -> None:
    config = EditorConfig.from_env(
        {
            "WRAPEDIT_TAB_WIDTH": "8",
            "WRAPEDIT_AUTO_INDENT": "off",
            "WRAPEDIT_BACKUP_ON_WRITE": "yes",
            "WRAPEDIT_SHELL_TIMEOUT": "2.5",
            "WRAPEDIT_BACKUP_PATH": "/tmp/wrapedit.bak",
            "UNRELATED": "1",
        }
    )

    assert config.tab_width == 8
    assert config.auto_indent is False
    assert config.backup_on_write is True
    assert config.shell_timeout == 2.5
    assert config.backup_path == "/tmp/wrapedit.bak"
    assert config.default_linebuf_size == 1024


def test_empty_environment_gives_defaults() -> None:
    assert EditorConfig.from_env({}) == EditorConfig()


def test_overrides_skip_unset_values() -> None:
    base = EditorConfig(tab_width=2)

    updated = base.with_overrides(tab_width=None, max_cmd_repetition=7)

    assert updated.tab_width == 2
    assert updated.max_cmd_repetition == 7
    assert base.max_cmd_repetition == 1000


@pytest.mark.parametrize(
    "changes",
    [
        {"default_linebuf_size": 0},
        {"tab_width": 0},
        {"max_cmd_repetition": 0},
        {"gutter_width": -1},
    ],
)
def test_invalid_values_are_rejected(changes: dict) -> None:
    with pytest.raises(ValueError):
        EditorConfig(**changes)


def test_every_mode_has_a_label() -> None:
    assert set(MODE_LABELS) == set(EditorMode)
    assert MODE_LABELS[EditorMode.COMMAND] == "COMMAND"
