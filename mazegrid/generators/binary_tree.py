"""Binary tree maze generator."""

from __future__ import annotations

import random
from typing import Optional

from ..base import AbstractMazeGenerator, CoinFlip
from ..grid import Grid


class BinaryTreeGenerator(AbstractMazeGenerator):
    """Link every cell to its north or east neighbor.

    Each cell flips a coin: heads prefers north, tails prefers east, and either
    falls back to the other direction at the grid edge. The north-east corner
    has neither neighbor and becomes the root of the tree. The result has an
    unbroken corridor along the top row and the east column.
    """

    name = "binary-tree"

    def apply_to(self, grid: Grid) -> Grid:
        for row in grid.rows():
            for coords in row:
                north = grid.north(coords)
                east = grid.east(coords)
                if self.coin_flip() is CoinFlip.HEADS:
                    target = north if north is not None else east
                else:
                    target = east if east is not None else north
                if target is not None:
                    grid.link_bidi(coords, target)
        return grid


def apply_to(grid: Grid, *, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Grid:
    return BinaryTreeGenerator(seed=seed, rng=rng).apply_to(grid)


__all__ = ["BinaryTreeGenerator", "apply_to"]
