"""Core gameplay logic: processes rolls and checks the win condition."""

from __future__ import annotations

from collections.abc import Iterable

from rollingcubes.engine.gameplay.trace import log_roll
from rollingcubes.engine.gamestate import GameState
from rollingcubes.models.direction import Direction
from rollingcubes.models.tray import PuzzleState, RollObserver


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(
        self,
        tray: PuzzleState | None = None,
        observers: Iterable[RollObserver] = (),
    ) -> None:
        if tray is None:
            tray = PuzzleState.default()
        self._observers: list[RollObserver] = [log_roll, *observers]
        for observer in self._observers:
            tray.add_observer(observer)
        self.state = GameState(tray)
        self._closed = False

    # -- movement (direction = where the *cube* travels) ----------------------

    def move(self, direction: Direction) -> bool:
        """Roll a cube in *direction* into the adjacent empty space.

        E.g. ``Direction.UP`` rolls the cube **below** the empty space upward.
        Returns True if the move was valid.
        """
        tray = self.state.tray
        d_row, d_col = direction.offset
        return self.roll(tray.empty_row - d_row, tray.empty_col - d_col)

    def roll(self, row: int, col: int) -> bool:
        """Roll the cube at (row, col) into the adjacent empty space.

        Returns True if the cube was adjacent to the empty space and the
        roll was applied.
        """
        tray = self.state.tray
        if not tray.can_roll_to_empty_space(row, col):
            return False

        tray.roll_to_empty_space(row, col)
        return True

    # -- lifecycle ------------------------------------------------------------

    def close(self) -> None:
        """Detach the session's observers from the tray.

        Observers shared with another session on the same tray (such as
        ``log_roll``) are detached for both.
        """
        if self._closed:
            return
        tray = self.state.tray
        for observer in self._observers:
            if observer in tray.observers:
                tray.remove_observer(observer)
        self.state.detach()
        self._closed = True

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
