"""Application settings management.

This package provides:
- Settings / ApplicationDescriptor: the user-editable config.yml schema
- AppPaths / ensure_settings: where config.yml lives and first-run defaults
"""

from keybindings.settings.application import (
    AppPaths,
    ensure_settings,
    home_directory,
    load_settings,
)
from keybindings.settings.user import (
    DEFAULT_APPLICATIONS,
    ApplicationDescriptor,
    Settings,
    default_settings,
)

__all__ = [
    "DEFAULT_APPLICATIONS",
    "AppPaths",
    "ApplicationDescriptor",
    "Settings",
    "default_settings",
    "ensure_settings",
    "home_directory",
    "load_settings",
]
