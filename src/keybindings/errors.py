"""Exception classes for the keybindings viewer.

Every failure that should stop the program is raised as a subclass of
KeybindingsError. Only the CLI layer turns these into a message and a
nonzero exit status.
"""

from __future__ import annotations

from pathlib import Path


class KeybindingsError(Exception):
    """Base class for all fatal keybindings errors."""

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
        """
        super().__init__(message)
        self.message: str = message


class ConfigurationError(KeybindingsError):
    """Raised when the settings directory or file cannot be set up."""

    pass


class SettingsError(KeybindingsError):
    """Raised when the settings file cannot be read or deserialized."""

    pass


class SelectionError(KeybindingsError):
    """Raised when no application can be selected from the user's input."""

    pass


class TargetConfigError(KeybindingsError):
    """Raised when the selected application's config file is unreadable."""

    def __init__(self, path: Path, original_error: Exception | None = None) -> None:
        """Initialize with the offending path.

        Args:
            path: Config file that could not be read
            original_error: The original exception that was caught
        """
        detail = f": {original_error}" if original_error else ""
        super().__init__(f"Error reading config file ({path}){detail}")
        self.path = path
        self.original_error = original_error


class PatternError(KeybindingsError):
    """Raised when a keybinding pattern is not a usable regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Regexp could not be compiled ({pattern}): {reason}")
        self.pattern = pattern
        self.reason = reason


class ScanError(KeybindingsError):
    """Raised when a config file cannot be split into scannable lines."""

    def __init__(self, path: Path | None, line_number: int, reason: str) -> None:
        """Initialize with scan failure details.

        Args:
            path: Config file being scanned, if known
            line_number: 1-based number of the offending line
            reason: Description of the failure
        """
        where = path if path is not None else "<input>"
        super().__init__(f"Error parsing config file ({where}), line {line_number}: {reason}")
        self.path = path
        self.line_number = line_number
        self.reason = reason
