"""Distance fields and shortest paths over a linked grid.

Links are unweighted, so Dijkstra's algorithm reduces to a breadth-first
expansion from the origin.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, Iterator, List, Optional, Set, Tuple

import numpy as np

from ..errors import InconsistentDistancesError, OutOfBoundsError, UnreachableError
from ..grid import Coordinate, Grid

logger = logging.getLogger(__name__)

UNREACHABLE = -1


class Distances:
    """Hop counts from ``origin`` to every cell reachable through links.

    Built from a snapshot of a grid and never updated. If the grid's links
    change afterwards the field is stale and must be rebuilt.
    """

    def __init__(self, origin: Coordinate, distances: Dict[Coordinate, int]) -> None:
        if distances.get(origin) != 0:
            raise ValueError(f"Distance field must map its origin {origin} to 0")
        self._origin = origin
        self._distances = dict(distances)

    @classmethod
    def build(cls, grid: Grid, origin: Coordinate) -> "Distances":
        if origin not in grid:
            raise OutOfBoundsError(origin, grid.height, grid.width)
        distances: Dict[Coordinate, int] = {origin: 0}
        frontier: Deque[Coordinate] = deque([origin])
        visited: Set[Coordinate] = set()
        while frontier:
            coords = frontier.popleft()
            visited.add(coords)
            next_distance = distances[coords] + 1
            for linked in grid.links(coords):
                if linked in visited or linked in distances:
                    continue
                distances[linked] = next_distance
                frontier.append(linked)
        logger.debug(
            "Distances from %s reach %d of %d cells", origin, len(distances), len(grid)
        )
        return cls(origin, distances)

    @property
    def origin(self) -> Coordinate:
        return self._origin

    def __getitem__(self, coords: Coordinate) -> int:
        return self._distances[coords]

    def __contains__(self, coords: object) -> bool:
        return coords in self._distances

    def __len__(self) -> int:
        return len(self._distances)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._distances)

    def get(self, coords: Coordinate, default: Optional[int] = None) -> Optional[int]:
        return self._distances.get(coords, default)

    def items(self) -> List[Tuple[Coordinate, int]]:
        return list(self._distances.items())

    @property
    def max_distance(self) -> int:
        return max(self._distances.values())

    def farthest(self) -> Tuple[Coordinate, int]:
        """First cell, in breadth-first order, at :attr:`max_distance`."""

        best = self._origin
        best_distance = 0
        for coords, distance in self._distances.items():
            if distance > best_distance:
                best, best_distance = coords, distance
        return best, best_distance

    def shortest_path_to(self, grid: Grid, destination: Coordinate) -> List[Coordinate]:
        """Cells from the origin to ``destination``, both ends included.

        Walks back from the destination, always stepping to the unvisited
        linked neighbor with the smallest recorded distance below the current
        one; ties go to the neighbor linked first.

        Raises :class:`UnreachableError` if the destination has no distance and
        :class:`InconsistentDistancesError` if the walk gets stuck before the
        origin, which happens when ``grid`` no longer matches this field.
        """

        if destination == self._origin:
            return [self._origin]
        if destination not in self._distances:
            raise UnreachableError(f"No path from {self._origin} to {destination}")

        path = [destination]
        visited = {destination}
        current = destination
        while current != self._origin:
            current_distance = self._distances[current]
            step: Optional[Coordinate] = None
            step_distance = current_distance
            for linked in grid.links(current):
                if linked in visited:
                    continue
                distance = self._distances.get(linked)
                if distance is not None and distance < step_distance:
                    step, step_distance = linked, distance
            if step is None:
                raise InconsistentDistancesError(
                    f"No neighbor of {current} is closer to {self._origin} than {current_distance}"
                )
            path.append(step)
            visited.add(step)
            current = step
        path.reverse()
        return path

    def to_array(self, height: int, width: int) -> np.ndarray:
        """Distances as a ``[row, col]`` array, ``-1`` where unreachable."""

        field = np.full((height, width), UNREACHABLE, dtype=np.int64)
        for coords, distance in self._distances.items():
            if coords.row < height and coords.col < width:
                field[coords.row, coords.col] = distance
        return field

    def __repr__(self) -> str:
        return f"Distances(origin={self._origin}, reachable={len(self._distances)})"


def longest_path(grid: Grid, start: Optional[Coordinate] = None) -> List[Coordinate]:
    """A longest shortest path through a perfect maze.

    Runs two breadth-first passes: the farthest cell from ``start`` is one end
    of the path, and the farthest cell from that end is the other.
    """

    if start is None:
        start = Coordinate(0, 0)
    first_end, _ = Distances.build(grid, start).farthest()
    from_end = Distances.build(grid, first_end)
    second_end, _ = from_end.farthest()
    return from_end.shortest_path_to(grid, second_end)


__all__ = ["Distances", "UNREACHABLE", "longest_path"]
