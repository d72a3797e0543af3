"""Command line entry point: generate, solve and render a maze."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .errors import MazeError
from .generators import GENERATORS, get_generator
from .grid import Coordinate
from .render import MazeRenderer
from .solutions import Distances, longest_path

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate and solve perfect mazes on a rectangular grid")
    parser.add_argument("--algorithm", choices=sorted(GENERATORS), default="sidewinder")
    parser.add_argument("--height", type=int, default=10)
    parser.add_argument("--width", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible mazes")
    parser.add_argument("--solve", action="store_true", help="Find the path from (0,0) to the far corner")
    parser.add_argument("--longest", action="store_true", help="Find the longest path through the maze")
    parser.add_argument("--image", type=Path, default=None, help="Write a PNG rendering to this path")
    parser.add_argument("--cell-size", type=int, default=32)
    parser.add_argument("--heatmap", action="store_true", help="Shade cells by distance from the path origin")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    if args.height < 1 or args.width < 1:
        raise SystemExit("height and width must be at least 1")
    if args.cell_size < 1:
        raise SystemExit("--cell-size must be at least 1")
    if args.solve and args.longest:
        raise SystemExit("--solve and --longest are mutually exclusive")

    generator = get_generator(args.algorithm, seed=args.seed)
    grid = generator.generate(args.height, args.width)
    print(grid, end="")

    path: Optional[List[Coordinate]] = None
    distances: Optional[Distances] = None
    try:
        if args.longest:
            path = longest_path(grid)
            distances = Distances.build(grid, path[0])
        elif args.solve or args.heatmap:
            origin = Coordinate(0, 0)
            distances = Distances.build(grid, origin)
            if args.solve:
                path = distances.shortest_path_to(grid, Coordinate(grid.width - 1, grid.height - 1))
    except MazeError as exc:
        raise SystemExit(f"error: {exc}") from exc

    if path is not None:
        start, end = path[0], path[-1]
        print(
            f"Path ({start.col},{start.row}) -> ({end.col},{end.row}): "
            f"{len(path)} cells, {len(path) - 1} steps"
        )
    if distances is not None:
        logger.info("Maximum distance from origin: %d", distances.max_distance)

    if args.image is not None:
        renderer = MazeRenderer(cell_size=args.cell_size)
        saved = renderer.save(
            grid,
            args.image,
            path=path,
            distances=distances if args.heatmap else None,
        )
        print(f"Saved maze image to {saved}")


if __name__ == "__main__":
    main()
