"""Roll directions on the tray."""

from __future__ import annotations

from enum import StrEnum

from rollingcubes.models.errors import InvalidOffsetError


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def of(cls, d_row: int, d_col: int) -> Direction:
        """Return the direction of a single orthogonal step.

        Example::

            Direction.of(-1, 0)  # Direction.UP
        """
        for part in (d_row, d_col):
            if isinstance(part, bool) or not isinstance(part, int):
                raise InvalidOffsetError(f"Offsets must be ints, got {part!r}.")
        try:
            return _BY_OFFSET[(d_row, d_col)]
        except KeyError:
            raise InvalidOffsetError(
                f"({d_row}, {d_col}) is not a unit step."
            ) from None

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        d_row, d_col = _OFFSETS[self]
        return _BY_OFFSET[(-d_row, -d_col)]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_BY_OFFSET: dict[tuple[int, int], Direction] = {
    offset: direction for direction, offset in _OFFSETS.items()
}
