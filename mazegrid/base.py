"""Abstract interface shared by the maze generators."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from .grid import Grid

logger = logging.getLogger(__name__)


class CoinFlip(Enum):
    HEADS = "heads"
    TAILS = "tails"


class AbstractMazeGenerator(ABC):
    """Base class for algorithms that carve a perfect maze into a grid.

    Each instance owns one :class:`random.Random`. Pass ``rng`` to share a
    source between callers, or ``seed`` for a reproducible private one.
    """

    name = "abstract"

    def __init__(self, *, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def coin_flip(self) -> CoinFlip:
        """Fair two-outcome draw."""

        return CoinFlip.HEADS if self._rng.random() < 0.5 else CoinFlip.TAILS

    @abstractmethod
    def apply_to(self, grid: Grid) -> Grid:
        """Link ``grid`` into a maze in place and return it."""

    def generate(self, height: int, width: int) -> Grid:
        """Build an empty grid of the given size and carve a maze into it."""

        grid = self.apply_to(Grid(height, width))
        logger.debug(
            "%s maze %dx%d carved with %d corridors",
            self.name,
            width,
            height,
            grid.corridor_count(),
        )
        return grid

    def generate_many(self, count: int, height: int, width: int) -> List[Grid]:
        """Generate a batch of mazes from this generator's random source."""

        return [self.generate(height, width) for _ in range(count)]


__all__ = ["AbstractMazeGenerator", "CoinFlip"]
