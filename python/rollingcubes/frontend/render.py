"""Terminal rendering of the tray, plain and with ``rich``."""

from __future__ import annotations

import rich.box
from rich.table import Table

from rollingcubes.models.cube import Cube
from rollingcubes.models.tray import TARGET, PuzzleState


def render_plain(tray: PuzzleState) -> str:
    return str(tray)


def render_table(tray: PuzzleState) -> Table:
    """Return a Rich Table representing the tray."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in tray.tray[0]:
        table.add_column(width=1, justify="center")

    for row in tray.tray:
        cells: list[str] = []
        for cube in row:
            if cube is Cube.EMPTY:
                cells.append("[dim]·[/dim]")
            elif cube is TARGET:
                cells.append(f"[bold green]{cube}[/bold green]")
            else:
                cells.append(f"[bold white]{cube}[/bold white]")
        table.add_row(*cells)

    return table
