"""File utility functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> bool:
    """Create directory if it doesn't exist.

    Args:
        directory: Path to create

    Returns:
        True if the directory was created by this call

    Raises:
        OSError: If the directory cannot be created
    """
    if directory.is_dir():
        return False
    directory.mkdir(parents=True, exist_ok=True)
    logger.debug("Created directory: %s", directory)
    return True


def read_text_file(file_path: Path) -> str:
    """Read a whole text file as UTF-8.

    Undecodable bytes are replaced rather than rejected, since config files
    of other programs are not guaranteed to be valid UTF-8.

    Args:
        file_path: Path to file

    Returns:
        File contents

    Raises:
        OSError: If the file cannot be read
    """
    return file_path.read_text(encoding="utf-8", errors="replace")
