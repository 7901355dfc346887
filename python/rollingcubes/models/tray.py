"""Tray model for the rolling cubes puzzle."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

from rollingcubes.models.cube import Cube
from rollingcubes.models.direction import Direction
from rollingcubes.models.errors import (
    InvalidConfigurationError,
    InvalidMoveError,
    InvalidValueError,
)

SIZE = 5
TARGET = Cube.CUBE6

# Starting configuration of the tray; 0 is the empty space.
INITIAL: tuple[tuple[int, ...], ...] = (
    (2, 1, 4, 3, 4),
    (5, 0, 3, 1, 2),
    (6, 1, 5, 6, 4),
    (2, 3, 1, 5, 6),
    (6, 1, 4, 6, 2),
)

# One roll away from the goal: rolling (0, 1) down turns its 2 into a 6.
NEAR_GOAL: tuple[tuple[int, ...], ...] = (
    (6, 2, 6, 6, 6),
    (6, 0, 6, 6, 6),
    (6, 6, 6, 6, 6),
    (6, 6, 6, 6, 6),
    (6, 6, 6, 6, 6),
)


class RollEvent(NamedTuple):
    """Record of a single roll, handed to observers."""

    row: int
    col: int
    direction: Direction
    before: Cube
    after: Cube


RollObserver = Callable[[RollEvent], None]


@dataclass
class PuzzleState:
    """Represents the 5×5 tray of cubes.

    Cubes are stored as a 2D list of :class:`Cube`.  Exactly one cell holds
    ``Cube.EMPTY`` and its coordinates are kept in ``empty_row`` and
    ``empty_col``.  Use :meth:`from_grid` or :meth:`default` to build a
    validated state; the dataclass constructor is internal and performs no
    validation of the tray invariants.

    States compare and hash by :meth:`key`, so they can be stored in sets
    while exploring.  Do not mutate a state that is a member of a set.
    """

    tray: list[list[Cube]]
    empty_row: int
    empty_col: int
    _observers: list[RollObserver] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_grid(cls, a: Sequence[Sequence[int]] | None) -> PuzzleState:
        """Create a state from a 5×5 grid of ints (``0`` marks the empty space).

        Example::

            PuzzleState.from_grid(INITIAL)
        """
        if a is None:
            raise InvalidConfigurationError("No grid given.")
        try:
            rows = [list(row) for row in a]
        except TypeError:
            raise InvalidConfigurationError(
                "Grid must be a sequence of rows."
            ) from None
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise InvalidConfigurationError(f"Grid must be {SIZE}×{SIZE}.")

        tray: list[list[Cube]] = []
        empties: list[tuple[int, int]] = []
        for r, row in enumerate(rows):
            cubes: list[Cube] = []
            for c, value in enumerate(row):
                try:
                    cube = Cube.decode(value)
                except InvalidValueError as exc:
                    raise InvalidConfigurationError(
                        f"Invalid value at ({r}, {c}): {exc}"
                    ) from exc
                if cube is Cube.EMPTY:
                    empties.append((r, c))
                cubes.append(cube)
            tray.append(cubes)

        if len(empties) != 1:
            raise InvalidConfigurationError(
                f"Grid must contain exactly one empty space, found {len(empties)}."
            )
        empty_row, empty_col = empties[0]
        return cls(tray=tray, empty_row=empty_row, empty_col=empty_col)

    @classmethod
    def default(cls) -> PuzzleState:
        return cls.from_grid(INITIAL)

    @classmethod
    def near_goal(cls) -> PuzzleState:
        return cls.from_grid(NEAR_GOAL)

    # -- observers ------------------------------------------------------------

    def add_observer(self, observer: RollObserver) -> None:
        """Register *observer* to be called with a :class:`RollEvent` after each roll."""
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: RollObserver) -> None:
        self._observers.remove(observer)

    @property
    def observers(self) -> tuple[RollObserver, ...]:
        return tuple(self._observers)

    # -- queries --------------------------------------------------------------

    @property
    def empty_pos(self) -> tuple[int, int]:
        return self.empty_row, self.empty_col

    def cube_at(self, row: int, col: int) -> Cube:
        return self.tray[row][col]

    def is_solved(self) -> bool:
        """Check if every cube shows the target face."""
        return all(
            cube is TARGET or cube is Cube.EMPTY
            for row in self.tray
            for cube in row
        )

    def can_roll_to_empty_space(self, row: int, col: int) -> bool:
        return (
            0 <= row < SIZE
            and 0 <= col < SIZE
            and abs(self.empty_row - row) + abs(self.empty_col - col) == 1
        )

    def get_roll_direction(self, row: int, col: int) -> Direction:
        """Return the direction the cube at (row, col) travels into the empty space."""
        if not self.can_roll_to_empty_space(row, col):
            raise InvalidMoveError(
                f"Cube at ({row}, {col}) cannot be rolled to the empty space "
                f"at ({self.empty_row}, {self.empty_col})."
            )
        return Direction.of(self.empty_row - row, self.empty_col - col)

    def rollable_cells(self) -> list[tuple[int, int]]:
        """Return the cells whose cube can be rolled, in UP, DOWN, LEFT, RIGHT order."""
        cells: list[tuple[int, int]] = []
        for direction in Direction:
            d_row, d_col = direction.offset
            # The cube travelling in ``direction`` sits on the opposite side.
            row, col = self.empty_row - d_row, self.empty_col - d_col
            if self.can_roll_to_empty_space(row, col):
                cells.append((row, col))
        return cells

    def to_grid(self) -> list[list[int]]:
        return [[cube.value for cube in row] for row in self.tray]

    def key(self) -> tuple[tuple[Cube, ...], ...]:
        """Return an immutable snapshot of the tray, usable as a dict or set key."""
        return tuple(tuple(row) for row in self.tray)

    # -- mutation -------------------------------------------------------------

    def roll_to_empty_space(self, row: int, col: int) -> RollEvent:
        """Roll the cube at (row, col) into the adjacent empty space."""
        direction = self.get_roll_direction(row, col)
        before = self.tray[row][col]
        after = before.roll_to(direction)
        self.tray[self.empty_row][self.empty_col] = after
        self.tray[row][col] = Cube.EMPTY
        self.empty_row, self.empty_col = row, col

        event = RollEvent(row, col, direction, before, after)
        for observer in list(self._observers):
            observer(event)
        return event

    def copy(self) -> PuzzleState:
        return PuzzleState(
            tray=[row[:] for row in self.tray],
            empty_row=self.empty_row,
            empty_col=self.empty_col,
        )

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> PuzzleState:
        return self.copy()

    def __hash__(self) -> int:
        return hash((self.key(), self.empty_row, self.empty_col))

    def __str__(self) -> str:
        return "".join(
            "".join(f"{cube} " for cube in row) + "\n" for row in self.tray
        )
