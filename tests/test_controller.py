from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from keybindings.controller import KeybindingsViewer
from keybindings.errors import SelectionError
from keybindings.extraction import KeybindingEntry
from keybindings.settings import AppPaths, Settings


def test_viewer_bootstraps_on_first_run(paths: AppPaths) -> None:
    viewer = KeybindingsViewer(paths=paths)
    assert paths.config_file.exists()
    assert viewer.settings.names == ["i3", "vim", "vifm"]


def test_viewer_run_renders_entries(paths: AppPaths, i3_config: Path) -> None:
    buffer = StringIO()
    viewer = KeybindingsViewer(paths=paths, console=Console(file=buffer, width=100))

    entries = viewer.run(["i3"])

    assert entries[0] == KeybindingEntry("$mod+Return", "exec alacritty")
    assert "exec alacritty" in buffer.getvalue()


def test_viewer_with_injected_settings(paths: AppPaths) -> None:
    settings = Settings.from_yaml(
        "applications:\n  - {name: sxhkd, path: sxhkdrc, keybindingpattern: '^(\\S+) : (.*)$'}\n"
    )
    (paths.home / "sxhkdrc").write_text("super+Return : alacritty\n")

    viewer = KeybindingsViewer(paths=paths, settings=settings, console=Console(file=StringIO()))

    assert viewer.run(["sxhkd"]) == [KeybindingEntry("super+Return", "alacritty")]
    assert not paths.config_file.exists()


def test_viewer_select_unknown(paths: AppPaths) -> None:
    viewer = KeybindingsViewer(paths=paths)
    with pytest.raises(SelectionError):
        viewer.select(["emacs"])
