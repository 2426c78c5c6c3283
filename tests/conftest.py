"""Shared fixtures for lunacy tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_CONFIG = """\
#![enable(implicit_some)]
(
    modkey: "Mod4",
    mousekey: "Mod4",
    tags: ["1", "2", "3"],
    keybind: [
        (command: Execute, value: "rofi -show drun", modifier: ["modkey"], key: "space"),
        (command: CloseWindow, value: "", modifier: ["modkey", "Shift"], key: "q"),
        (command: GotoTag, value: "1", modifier: ["modkey","Shift"], key: "1"),
        (command: ToggleFullScreen, value: "", modifier: ["modkey"], key: "f"),
        (command: UnknownCmd, value: "", modifier: [], key: "x"),
        (command: MoveToTag, value: "2", modifier: ["modkey", "Shift"], key: "2"
        (command: SoftReload, modifier: ["modkey"], key: "r"),
    ],
)
"""


@pytest.fixture
def sample_config(tmp_path: Path) -> Path:
    """Write a LeftWM config with good and broken keybind lines."""
    path = tmp_path / "config.ron"
    path.write_text(SAMPLE_CONFIG)
    return path


@pytest.fixture
def leftwm_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temp dir with an installed config.ron."""
    config_dir = tmp_path / ".config" / "leftwm"
    config_dir.mkdir(parents=True)
    (config_dir / "config.ron").write_text(SAMPLE_CONFIG)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path
