"""Line-by-line keybinding extraction.

A descriptor's pattern is applied to every line of the target config file
independently. Each non-overlapping match yields one entry: group 1 is the
binding, group 2 the definition.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Final

from keybindings.constants import MAX_LINE_LENGTH
from keybindings.errors import PatternError, ScanError, TargetConfigError
from keybindings.extraction.models import KeybindingEntry
from keybindings.settings.user import ApplicationDescriptor
from keybindings.utils.file import read_text_file

logger: Final = logging.getLogger(__name__)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a keybinding pattern.

    Args:
        pattern: Regular expression with at least two capture groups

    Returns:
        The compiled expression

    Raises:
        PatternError: If the pattern is invalid or captures fewer than two groups
    """
    try:
        regex = re.compile(pattern)
    except re.error as exc:
        raise PatternError(pattern, str(exc)) from exc

    if regex.groups < 2:
        raise PatternError(
            pattern, f"expected at least 2 capture groups, found {regex.groups}"
        )
    return regex


def _split_lines(content: str) -> list[str]:
    # Split on "\n" only; a trailing newline does not start another line
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def scan_lines(
    content: str,
    regex: re.Pattern[str],
    path: Path | None = None,
) -> list[KeybindingEntry]:
    """Collect every match of `regex` in `content`, in file order.

    Args:
        content: Text to scan
        regex: Compiled pattern with at least two capture groups
        path: Source file, used in error messages

    Returns:
        One entry per match, ordered by line and then by position in the line

    Raises:
        ScanError: If a line is longer than MAX_LINE_LENGTH bytes
    """
    entries: list[KeybindingEntry] = []

    for number, line in enumerate(_split_lines(content), start=1):
        if len(line.encode("utf-8")) > MAX_LINE_LENGTH:
            raise ScanError(path, number, f"line longer than {MAX_LINE_LENGTH} bytes")

        for match in regex.finditer(line):
            entries.append(
                KeybindingEntry(
                    binding=match.group(1) or "",
                    definition=match.group(2) or "",
                )
            )

    return entries


def extract_keybindings(
    descriptor: ApplicationDescriptor, home: Path
) -> list[KeybindingEntry]:
    """Read an application's config file and extract its keybindings.

    Args:
        descriptor: Application to inspect
        home: Directory the descriptor's path is relative to

    Returns:
        Extracted entries in file order

    Raises:
        TargetConfigError: If the config file cannot be read
        PatternError: If the descriptor's pattern is unusable
        ScanError: If the file contains an overlong line
    """
    target = descriptor.target_path(home)
    logger.debug("Reading %s config from %s", descriptor.name, target)

    try:
        content = read_text_file(target)
    except OSError as exc:
        raise TargetConfigError(target, exc) from exc

    regex = compile_pattern(descriptor.pattern)
    entries = scan_lines(content, regex, path=target)

    logger.debug("Found %d keybinding(s) in %s", len(entries), target)
    return entries
