"""Rolling cubes: a 5×5 sliding puzzle whose pieces are dice."""

from rollingcubes.models import Cube, Direction, PuzzleState

__version__ = "0.1.0"

__all__ = ["Cube", "Direction", "PuzzleState", "__version__"]
