"""Console table rendering for extracted keybindings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from keybindings.constants import BINDING_HEADER, DEFINITION_HEADER
from keybindings.extraction.models import KeybindingEntry

HEADER_STYLE = "blue underline"
BINDING_STYLE = "yellow"

# Space between the two columns (one cell of padding on each side)
COLUMN_GAP = 2


def build_table(entries: Iterable[KeybindingEntry]) -> Table:
    """Build a borderless two-column table, header row included even if empty."""
    table = Table(box=None, show_header=True, header_style=HEADER_STYLE, pad_edge=False)
    # One row per line: columns never wrap or truncate
    table.add_column(BINDING_HEADER, style=BINDING_STYLE, no_wrap=True, overflow="ignore")
    table.add_column(DEFINITION_HEADER, no_wrap=True, overflow="ignore")

    for entry in entries:
        # Text cells are not parsed for console markup such as "[bold]"
        table.add_row(Text(entry.binding), Text(entry.definition))
    return table


def table_width(entries: Sequence[KeybindingEntry]) -> int:
    """Width needed to print every row without shrinking a column."""
    binding = max([cell_len(BINDING_HEADER), *(cell_len(e.binding) for e in entries)])
    definition = max([cell_len(DEFINITION_HEADER), *(cell_len(e.definition) for e in entries)])
    return binding + COLUMN_GAP + definition


def render_keybindings(
    entries: Iterable[KeybindingEntry], console: Console | None = None
) -> None:
    """Print the keybindings table framed by blank lines.

    The table is never wrapped to the console width, so each binding stays on
    one line even when output is piped.
    """
    entries = list(entries)
    console = console or Console(highlight=False)
    width = max(console.width, table_width(entries))

    console.print()
    console.print(build_table(entries), width=width, crop=False)
    console.print()
