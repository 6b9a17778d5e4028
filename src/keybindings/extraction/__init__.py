"""Extraction package - scans application config files for keybindings."""

from .models import KeybindingEntry
from .scanner import compile_pattern, extract_keybindings, scan_lines

__all__ = [
    "KeybindingEntry",
    "compile_pattern",
    "extract_keybindings",
    "scan_lines",
]
