"""Data model for extracted keybindings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeybindingEntry:
    """A key combination and the action it is bound to."""

    binding: str
    definition: str
