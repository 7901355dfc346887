"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time

from rollingcubes.models.tray import PuzzleState, RollEvent


class GameState:
    """Holds the current tray, the number of rolls made on it, and the play time.

    The roll counter is fed by observing the tray, so rolls made directly
    through ``tray.roll_to_empty_space`` are counted as well.
    """

    def __init__(self, tray: PuzzleState) -> None:
        self.tray = tray
        self.moves: int = 0
        self.last_roll: RollEvent | None = None
        self._started_at: float = time.monotonic()
        self._banked: float = 0.0
        self._paused: bool = False
        tray.add_observer(self._record_roll)

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._paused:
            return self._banked
        return self._banked + (time.monotonic() - self._started_at)

    def pause(self) -> None:
        if not self._paused:
            self._banked += time.monotonic() - self._started_at
            self._paused = True

    def resume(self) -> None:
        if self._paused:
            self._started_at = time.monotonic()
            self._paused = False

    # -- rolls ----------------------------------------------------------------

    def _record_roll(self, event: RollEvent) -> None:
        self.moves += 1
        self.last_roll = event

    def detach(self) -> None:
        """Stop counting rolls made on the tray."""
        self.tray.remove_observer(self._record_roll)

    @property
    def is_solved(self) -> bool:
        return self.tray.is_solved()
