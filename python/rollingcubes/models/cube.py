"""Cube model: the six die faces, the empty cell, and how a cube rolls."""

from __future__ import annotations

from enum import Enum

from rollingcubes.models.direction import Direction
from rollingcubes.models.errors import InvalidValueError, UnsupportedOperationError


class Cube(Enum):
    """Content of a single tray cell.

    Each face member stands for a die lying with that face on top.  Values
    are the numbers used to encode a tray as a grid of ints; ``0`` is the
    empty space.
    """

    EMPTY = 0
    CUBE1 = 1
    CUBE2 = 2
    CUBE3 = 3
    CUBE4 = 4
    CUBE5 = 5
    CUBE6 = 6

    @classmethod
    def decode(cls, value: int) -> Cube:
        """Return the cube encoded by *value* (``0``-``6``)."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidValueError(f"Cube value must be an int, got {value!r}.")
        try:
            return cls(value)
        except ValueError:
            raise InvalidValueError(
                f"Cube value must be between 0 and 6, got {value}."
            ) from None

    @property
    def is_empty(self) -> bool:
        return self is Cube.EMPTY

    def roll_to(self, direction: Direction) -> Cube:
        """Return the cube obtained by rolling this one a cell toward *direction*."""
        if self is Cube.EMPTY:
            raise UnsupportedOperationError("The empty space cannot be rolled.")
        return _ROLLS[self, direction]

    def __str__(self) -> str:
        return str(self.value)


# -- rotation table -----------------------------------------------------------

# Reference die: 1 on top, 2 north, 3 east, 4 west, 5 south, 6 at the bottom
# (opposite faces sum to 7).  Rolling one step brings the trailing face to
# the top, so each direction cycles the four faces around its axis and
# leaves the two axis faces alone.
_CYCLES: dict[Direction, tuple[int, int, int, int]] = {
    Direction.UP: (1, 5, 6, 2),
    Direction.DOWN: (1, 2, 6, 5),
    Direction.RIGHT: (1, 4, 6, 3),
    Direction.LEFT: (1, 3, 6, 4),
}


def _build_rolls() -> dict[tuple[Cube, Direction], Cube]:
    rolls: dict[tuple[Cube, Direction], Cube] = {}
    faces = [cube for cube in Cube if cube is not Cube.EMPTY]
    for direction, cycle in _CYCLES.items():
        for cube in faces:
            if cube.value in cycle:
                nxt = cycle[(cycle.index(cube.value) + 1) % len(cycle)]
                rolls[cube, direction] = Cube(nxt)
            else:
                rolls[cube, direction] = cube
    return rolls


_ROLLS = _build_rolls()
