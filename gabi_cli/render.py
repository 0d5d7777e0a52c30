"""
Result table rendering.

The first row of a result set is the header; the rest are body rows.
Tables have no outer border but keep column separators and the header rule.
Cells never wrap: the console is sized to the table, not the terminal.
"""

from typing import TextIO

from rich import box
from rich.console import Console
from rich.measure import Measurement
from rich.table import Table

_UNBOUNDED_WIDTH = 1_000_000


def _normalize(rows: list[list[str]]) -> list[list[str]]:
    """Pad every row to the widest one so columns line up."""
    width = max(len(row) for row in rows)
    return [row + [""] * (width - len(row)) for row in rows]


def build_table(rows: list[list[str]]) -> Table | None:
    """Build a borderless table, or None for an empty result set."""
    if not rows:
        return None

    header, *body = _normalize(rows)

    table = Table(box=box.SQUARE, show_edge=False, highlight=False)
    for heading in header:
        table.add_column(heading, no_wrap=True, overflow="ignore")
    for row in body:
        table.add_row(*row)
    return table


def render_result(rows: list[list[str]], out: TextIO) -> None:
    """
    Write a result set to ``out`` as a table.

    An empty result set writes nothing.
    """
    table = build_table(rows)
    if table is None:
        return

    console = Console(file=out, markup=False, highlight=False, emoji=False, soft_wrap=False)
    measurement = Measurement.get(console, console.options.update_width(_UNBOUNDED_WIDTH), table)
    console.width = max(measurement.maximum, 1)
    console.print(table, crop=False)
