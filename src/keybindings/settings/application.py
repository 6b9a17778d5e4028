"""Settings file location and first-run bootstrap."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from keybindings.constants import CONFIG_DIR_PARTS, CONFIG_FILE_NAME
from keybindings.errors import ConfigurationError
from keybindings.settings.user import Settings, default_settings
from keybindings.utils.file import ensure_directory_exists

logger: Final = logging.getLogger(__name__)


def home_directory() -> Path:
    """Return the current user's home directory.

    Raises:
        ConfigurationError: If the home directory cannot be determined
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ConfigurationError(f"Couldn't retrieve user directory: {exc}") from exc


@dataclass(frozen=True)
class AppPaths:
    """Locations of the settings directory and file.

    Both live at a fixed place under the user's home directory, so that the
    settings file can be found and edited by hand.
    """

    home: Path
    config_dir: Path
    config_file: Path

    @classmethod
    def from_home(cls, home: Path | None = None) -> AppPaths:
        """Create paths from a home directory (default: the current user's)."""
        home = home if home is not None else home_directory()
        config_dir = home.joinpath(*CONFIG_DIR_PARTS)
        return cls(
            home=home,
            config_dir=config_dir,
            config_file=config_dir / CONFIG_FILE_NAME,
        )


def ensure_settings(paths: AppPaths) -> bool:
    """Make sure the settings file exists, writing the defaults if it doesn't.

    An existing settings file is never touched.

    Args:
        paths: Settings locations

    Returns:
        True if a default settings file was written

    Raises:
        ConfigurationError: If the directory or file cannot be created
    """
    try:
        ensure_directory_exists(paths.config_dir)
    except OSError as exc:
        raise ConfigurationError(
            f"Couldn't create config directory ({paths.config_dir}): {exc}"
        ) from exc

    if paths.config_file.exists():
        return False

    try:
        paths.config_file.write_text(default_settings().to_yaml(), encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Error creating default config: {exc}") from exc

    logger.debug("Wrote default settings to %s", paths.config_file)
    return True


def load_settings(paths: AppPaths) -> Settings:
    """Bootstrap then load the settings file."""
    ensure_settings(paths)
    return Settings.load(paths.config_file)
