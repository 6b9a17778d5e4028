from pathlib import Path

import pytest

from keybindings.settings import AppPaths


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user's home directory at an empty temporary directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


@pytest.fixture
def paths(home: Path) -> AppPaths:
    return AppPaths.from_home(home)


@pytest.fixture
def i3_config(home: Path) -> Path:
    path = home / ".config" / "i3" / "config"
    path.parent.mkdir(parents=True)
    path.write_text(
        "# i3 config\n"
        "set $mod Mod4\n"
        "bindsym $mod+Return exec alacritty\n"
        "bindsym $mod+Shift+q kill\n"
    )
    return path
