"""Rectangular grid of coordinate-addressed cells joined by directed links."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Dict, FrozenSet, Iterator, List, Optional, Set

from .errors import OutOfBoundsError

WALL_CORNER = "+"
WALL_HORIZONTAL = "---"
WALL_VERTICAL = "|"
CELL_BODY = "   "
OPEN_HORIZONTAL = "   "
OPEN_VERTICAL = " "


@total_ordering
@dataclass(frozen=True)
class Coordinate:
    """Identity of a grid cell. Sorts row by row, then by column."""

    col: int
    row: int

    def __post_init__(self) -> None:
        if self.col < 0 or self.row < 0:
            raise ValueError(f"Coordinates must be non-negative, got col={self.col} row={self.row}")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return (self.row, self.col) < (other.row, other.col)


class Direction(Enum):
    """Cardinal direction as a (column, row) offset. Row 0 is the south edge."""

    NORTH = (0, 1)
    EAST = (1, 0)
    SOUTH = (0, -1)
    WEST = (-1, 0)


@dataclass(frozen=True)
class Neighbors:
    north: Optional[Coordinate]
    east: Optional[Coordinate]
    south: Optional[Coordinate]
    west: Optional[Coordinate]


class Grid:
    """A ``height`` x ``width`` grid graph.

    Every cell is created up front and identified by its :class:`Coordinate`.
    Links are directed and kept per cell in insertion order; a corridor is a
    pair of links in both directions. Only :meth:`link` and :meth:`link_bidi`
    mutate the grid.
    """

    def __init__(self, height: int, width: int) -> None:
        if height < 0 or width < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {height}x{width}")
        self._height = height
        self._width = width
        self._links: Dict[Coordinate, List[Coordinate]] = {
            Coordinate(col, row): [] for row in range(height) for col in range(width)
        }

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def cells(self) -> List[Coordinate]:
        return list(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._links)

    def __contains__(self, coords: object) -> bool:
        return coords in self._links

    def contains(self, coords: Coordinate) -> bool:
        return coords in self._links

    def cell_at(self, coords: Coordinate) -> Optional[Coordinate]:
        """Return the cell at ``coords``, or ``None`` when it is out of bounds."""

        return coords if coords in self._links else None

    # ------------------------------------------------------------------
    # Neighbors

    def neighbor(self, direction: Direction, coords: Coordinate) -> Optional[Coordinate]:
        """Adjacent coordinate in ``direction``, or ``None`` past any edge.

        Moving south of row 0 or west of column 0 is checked before any
        arithmetic, so no negative index is ever built.
        """

        if coords not in self._links:
            return None
        if direction is Direction.NORTH:
            if coords.row + 1 >= self._height:
                return None
            return Coordinate(coords.col, coords.row + 1)
        if direction is Direction.EAST:
            if coords.col + 1 >= self._width:
                return None
            return Coordinate(coords.col + 1, coords.row)
        if direction is Direction.SOUTH:
            if coords.row == 0:
                return None
            return Coordinate(coords.col, coords.row - 1)
        if coords.col == 0:
            return None
        return Coordinate(coords.col - 1, coords.row)

    def north(self, coords: Coordinate) -> Optional[Coordinate]:
        return self.neighbor(Direction.NORTH, coords)

    def east(self, coords: Coordinate) -> Optional[Coordinate]:
        return self.neighbor(Direction.EAST, coords)

    def south(self, coords: Coordinate) -> Optional[Coordinate]:
        return self.neighbor(Direction.SOUTH, coords)

    def west(self, coords: Coordinate) -> Optional[Coordinate]:
        return self.neighbor(Direction.WEST, coords)

    def neighbors(self, coords: Coordinate) -> Neighbors:
        return Neighbors(
            north=self.north(coords),
            east=self.east(coords),
            south=self.south(coords),
            west=self.west(coords),
        )

    # ------------------------------------------------------------------
    # Links

    def links(self, coords: Coordinate) -> List[Coordinate]:
        """Targets one hop away from ``coords``, in the order they were linked."""

        return list(self._links.get(coords, ()))

    def is_linked(self, source: Coordinate, destination: Coordinate) -> bool:
        return destination in self._links.get(source, ())

    def link(self, source: Coordinate, destination: Coordinate) -> None:
        """Add the directed edge ``source -> destination``.

        Linking an existing edge again is a no-op. Raises
        :class:`OutOfBoundsError` if either end is not a cell of this grid.
        """

        self._require(source)
        self._require(destination)
        targets = self._links[source]
        if destination not in targets:
            targets.append(destination)

    def link_bidi(self, source: Coordinate, destination: Coordinate) -> None:
        """Open a corridor: link both directions, or neither on error."""

        self._require(source)
        self._require(destination)
        self.link(source, destination)
        self.link(destination, source)

    def corridors(self) -> Set[FrozenSet[Coordinate]]:
        """Undirected corridors, i.e. pairs linked in both directions."""

        found: Set[FrozenSet[Coordinate]] = set()
        for source, targets in self._links.items():
            for destination in targets:
                if source in self._links[destination]:
                    found.add(frozenset((source, destination)))
        return found

    def corridor_count(self) -> int:
        return len(self.corridors())

    def dead_ends(self) -> List[Coordinate]:
        return [coords for coords, targets in self._links.items() if len(targets) == 1]

    def _require(self, coords: Coordinate) -> None:
        if coords not in self._links:
            raise OutOfBoundsError(coords, self._height, self._width)

    # ------------------------------------------------------------------
    # Iteration

    def rows(self) -> List[List[Coordinate]]:
        """Rows from row 0 upward, each ordered by ascending column."""

        return [self._row(row) for row in range(self._height)]

    def rows_reverse(self) -> List[List[Coordinate]]:
        """Rows from the top row down; the order used for on-screen drawing."""

        return [self._row(row) for row in reversed(range(self._height))]

    def _row(self, row: int) -> List[Coordinate]:
        return [Coordinate(col, row) for col in range(self._width)]

    def rand_cell(self, rng: Optional[random.Random] = None) -> Coordinate:
        """Pick one cell uniformly at random."""

        if not self._links:
            raise ValueError("Cannot pick a cell from an empty grid")
        source = rng if rng is not None else random
        return Coordinate(source.randrange(self._width), source.randrange(self._height))

    # ------------------------------------------------------------------
    # Text rendering

    def _wall_or_open(self, coords: Coordinate, side: Optional[Coordinate], wall: str, opening: str) -> str:
        if side is not None and self.is_linked(coords, side):
            return opening
        return wall

    def render_lines(self) -> List[str]:
        lines = [WALL_CORNER + (WALL_HORIZONTAL + WALL_CORNER) * self._width]
        for row in self.rows_reverse():
            interior = ""
            south_wall = ""
            for coords in row:
                interior += self._wall_or_open(coords, self.west(coords), WALL_VERTICAL, OPEN_VERTICAL)
                interior += CELL_BODY
                south_wall += WALL_CORNER
                south_wall += self._wall_or_open(coords, self.south(coords), WALL_HORIZONTAL, OPEN_HORIZONTAL)
            lines.append(interior + WALL_VERTICAL)
            lines.append(south_wall + WALL_CORNER)
        return lines

    def __str__(self) -> str:
        return "\n".join(self.render_lines()) + "\n"

    def __repr__(self) -> str:
        return f"Grid(height={self._height}, width={self._width}, corridors={self.corridor_count()})"


__all__ = ["Coordinate", "Direction", "Neighbors", "Grid"]
