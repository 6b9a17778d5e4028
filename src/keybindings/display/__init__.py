"""Display package - renders keybindings to the console."""

from keybindings.display.table import build_table, render_keybindings

__all__ = ["build_table", "render_keybindings"]
