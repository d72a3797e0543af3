"""Sidewinder maze generator."""

from __future__ import annotations

import random
from typing import List, Optional

from ..base import AbstractMazeGenerator, CoinFlip
from ..grid import Coordinate, Grid


class SidewinderGenerator(AbstractMazeGenerator):
    """Carve each row into horizontal runs, each joined to the row above.

    Rows are processed from row 0 upward. A run grows eastward until the east
    edge or a heads flip closes it; closing links the run horizontally and
    opens one randomly chosen member to the north. The top row is never closed
    early, so it always ends up as a single corridor.
    """

    name = "sidewinder"

    def apply_to(self, grid: Grid) -> Grid:
        top_row = grid.height - 1
        for row_index, row in enumerate(grid.rows()):
            run: List[Coordinate] = []
            for coords in row:
                run.append(coords)
                if row_index == top_row:
                    continue
                if grid.east(coords) is None or self.coin_flip() is CoinFlip.HEADS:
                    self._close_run(grid, run)
            self._close_run(grid, run)
        return grid

    def _close_run(self, grid: Grid, run: List[Coordinate]) -> None:
        if not run:
            return
        for west, east in zip(run, run[1:]):
            grid.link_bidi(west, east)
        member = run[self._rng.randrange(len(run))]
        north = grid.north(member)
        if north is not None:
            grid.link_bidi(member, north)
        run.clear()


def apply_to(grid: Grid, *, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Grid:
    return SidewinderGenerator(seed=seed, rng=rng).apply_to(grid)


__all__ = ["SidewinderGenerator", "apply_to"]
