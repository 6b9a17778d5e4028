"""Core controller for the keybindings viewer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from rich.console import Console

from keybindings.display.table import render_keybindings
from keybindings.extraction import KeybindingEntry, extract_keybindings
from keybindings.selection import resolve_choice
from keybindings.settings import AppPaths, ApplicationDescriptor, Settings, load_settings

logger: Final = logging.getLogger(__name__)


class KeybindingsViewer:
    """Main controller class for the keybindings viewer.

    This class runs the whole workflow in order:
    - Writing default settings on first run
    - Loading the settings file
    - Selecting an application from arguments or an interactive prompt
    - Extracting keybindings from that application's config file
    - Rendering them as a table

    Every step raises a KeybindingsError subclass on failure; nothing here
    exits the process.
    """

    def __init__(
        self,
        paths: AppPaths | None = None,
        settings: Settings | None = None,
        console: Console | None = None,
        debug: bool = False,
    ):
        """Bootstrap and load settings.

        Args:
            paths: Optional settings locations (default: under the home directory)
            settings: Optional preloaded settings, skipping the settings file
            console: Optional console to render tables on
            debug: Enable debug logging
        """
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.WARNING,
            format="%(asctime)s [%(levelname)s] %(message)s",
        )

        self.paths = paths or AppPaths.from_home()
        logger.debug("Using settings file %s", self.paths.config_file)

        self.settings = settings if settings is not None else load_settings(self.paths)
        self.console = console

    def select(self, args: Sequence[str]) -> ApplicationDescriptor:
        """Resolve command-line arguments to an application."""
        return self.settings[resolve_choice(self.settings, args)]

    def extract(self, descriptor: ApplicationDescriptor) -> list[KeybindingEntry]:
        """Extract keybindings from the application's config file."""
        return extract_keybindings(descriptor, self.paths.home)

    def run(self, args: Sequence[str]) -> list[KeybindingEntry]:
        """Select an application, then print its keybindings.

        Returns:
            The entries that were rendered
        """
        descriptor = self.select(args)
        entries = self.extract(descriptor)
        render_keybindings(entries, console=self.console)
        return entries
