"""Exceptions raised by grid mutation and path queries."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for every error raised by :mod:`mazegrid`."""


class OutOfBoundsError(MazeError, IndexError):
    """A coordinate lies outside ``[0, width) x [0, height)``."""

    def __init__(self, coords: object, height: int, width: int) -> None:
        super().__init__(f"{coords} is outside a {width}x{height} grid")
        self.coords = coords
        self.height = height
        self.width = width


class NoPathError(MazeError, LookupError):
    """No path can be reconstructed to the requested destination."""


class UnreachableError(NoPathError):
    """The destination has no recorded distance from the origin."""


class InconsistentDistancesError(NoPathError):
    """Path reconstruction found no strictly closer neighbor.

    Usually means the distance field was built before the grid's links changed.
    """


__all__ = [
    "MazeError",
    "OutOfBoundsError",
    "NoPathError",
    "UnreachableError",
    "InconsistentDistancesError",
]
