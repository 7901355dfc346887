"""Rolling Cubes demo driver.

Usage::

    rollingcubes                              # show the initial tray
    rollingcubes -r 0,1 -r 1,1                # roll two cubes
    rollingcubes --start near-goal -r 0,1     # finish the near-goal tray
    rollingcubes --plain --log-level INFO     # plain text, log every roll
"""

import logging
from enum import StrEnum
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from rollingcubes.engine.gameplay import GamePlay
from rollingcubes.frontend.render import render_plain, render_table
from rollingcubes.models.errors import RollingCubesError
from rollingcubes.models.tray import PuzzleState

console = Console()


class Start(StrEnum):
    initial = "initial"
    near_goal = "near-goal"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_STARTS = {
    Start.initial: PuzzleState.default,
    Start.near_goal: PuzzleState.near_goal,
}


# -- helpers ------------------------------------------------------------------


def _parse_cell(raw: str) -> tuple[int, int]:
    try:
        row, col = (int(part) for part in raw.split(","))
    except ValueError:
        raise typer.BadParameter(f"expected ROW,COL, got {raw!r}") from None
    return row, col


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _show(tray: PuzzleState, plain: bool) -> None:
    if plain:
        console.print(render_plain(tray), end="", markup=False, highlight=False)
    else:
        console.print(render_table(tray))


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    start: Start = typer.Option(
        Start.initial, "--start",
        help="Starting configuration of the tray.",
    ),
    rolls: Optional[list[str]] = typer.Option(
        None, "-r", "--roll",
        help="Cell to roll into the empty space, as ROW,COL. Repeatable.",
    ),
    plain: bool = typer.Option(
        False, "--plain",
        help="Print the tray as plain text instead of a table.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        help="Logging level for roll traces.",
    ),
) -> None:
    """Rolling Cubes puzzle."""
    _configure_logging(log_level)
    cells = [_parse_cell(raw) for raw in rolls or []]

    game = GamePlay(_STARTS[start]())
    tray = game.state.tray
    _show(tray, plain)

    for row, col in cells:
        try:
            direction = tray.get_roll_direction(row, col)
        except RollingCubesError as exc:
            console.print(f"[red]{exc}[/red]")
            raise typer.Exit(code=1)
        game.roll(row, col)
        console.print(f"Rolled ({row},{col}) {direction}")
        _show(tray, plain)

    game.state.pause()
    stats = (
        f"Moves: {game.state.moves}  "
        f"Time: {_format_time(game.state.elapsed_time)}"
    )
    if game.is_won:
        console.print(f"[bold green]Solved![/bold green] {stats}")
    else:
        console.print(f"Not solved. {stats}")
    game.close()


if __name__ == "__main__":
    app()
