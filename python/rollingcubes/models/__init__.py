from rollingcubes.models.cube import Cube
from rollingcubes.models.direction import Direction
from rollingcubes.models.errors import (
    InvalidConfigurationError,
    InvalidMoveError,
    InvalidOffsetError,
    InvalidValueError,
    RollingCubesError,
    UnsupportedOperationError,
)
from rollingcubes.models.tray import PuzzleState, RollEvent

__all__ = [
    "Cube",
    "Direction",
    "InvalidConfigurationError",
    "InvalidMoveError",
    "InvalidOffsetError",
    "InvalidValueError",
    "PuzzleState",
    "RollEvent",
    "RollingCubesError",
    "UnsupportedOperationError",
]
