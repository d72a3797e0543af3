"""Grid mazes: graph model, generators and shortest-path solving."""

__all__ = [
    "Coordinate",
    "Direction",
    "Grid",
    "Neighbors",
    "AbstractMazeGenerator",
    "CoinFlip",
    "BinaryTreeGenerator",
    "SidewinderGenerator",
    "GENERATORS",
    "get_generator",
    "Distances",
    "longest_path",
    "MazeError",
    "OutOfBoundsError",
    "NoPathError",
    "UnreachableError",
    "InconsistentDistancesError",
]

from .grid import Coordinate, Direction, Grid, Neighbors
from .base import AbstractMazeGenerator, CoinFlip
from .generators import (
    BinaryTreeGenerator,
    SidewinderGenerator,
    GENERATORS,
    get_generator,
)
from .solutions import Distances, longest_path
from .errors import (
    MazeError,
    OutOfBoundsError,
    NoPathError,
    UnreachableError,
    InconsistentDistancesError,
)
