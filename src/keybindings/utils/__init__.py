"""Common utility functions and helpers for the keybindings package."""

from keybindings.utils.file import ensure_directory_exists, read_text_file

__all__ = [
    "ensure_directory_exists",
    "read_text_file",
]
