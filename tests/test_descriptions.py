"""Tests for command description lookup."""

from __future__ import annotations

import pytest

from lunacy.config import DESCRIPTIONS, get_description


@pytest.mark.parametrize(
    ("command", "value", "expected"),
    [
        ("Execute", "rofi -show drun", "Execute rofi -show drun"),
        ("GotoTag", "1", "Go to Tag 1"),
        ("MoveToTag", "3", "Move to Tag 3"),
        ("ToggleFullScreen", "", "Toggle Fullscreen"),
        ("MoveWindowToPreviousWorkspace", "", "Move Window To Next Workspace"),
        ("UnknownCmd", "", "UnknownCmd"),
    ],
)
def test_get_description(command: str, value: str, expected: str) -> None:
    assert get_description(command, value) == expected


def test_interpolation_keeps_trailing_space_for_empty_value() -> None:
    assert get_description("Execute", "") == "Execute "
    assert get_description("GotoTag", "") == "Go to Tag "


def test_interpolation_beats_table_entry() -> None:
    """GotoTag has a table entry, but the value prefix wins."""
    assert DESCRIPTIONS["GotoTag"] == "Go to tag"
    assert get_description("GotoTag", "5") == "Go to Tag 5"


def test_value_ignored_for_table_commands() -> None:
    assert get_description("CloseWindow", "ignored") == "Close Window"


def test_fallback_is_case_sensitive() -> None:
    assert get_description("closewindow", "") == "closewindow"


def test_descriptions_are_read_only() -> None:
    with pytest.raises(TypeError):
        DESCRIPTIONS["CloseWindow"] = "Nope"  # type: ignore[index]
