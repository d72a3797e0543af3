"""Raster rendering of mazes, solution paths and distance heat maps."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import numpy as np
from PIL import Image, ImageDraw

from .grid import Coordinate, Grid
from .solutions.dijkstra import UNREACHABLE, Distances

PathLike = Union[str, Path]
Color = Tuple[int, int, int]

BACKGROUND_COLOR: Color = (255, 255, 255)
WALL_COLOR: Color = (0, 0, 0)
PATH_COLOR: Color = (120, 255, 120)
HEAT_COLOR: Color = (40, 90, 220)


class MazeRenderer:
    """Draw a grid as a PNG-ready image with row 0 along the bottom edge."""

    def __init__(
        self,
        *,
        cell_size: int = 32,
        padding: int = 5,
        wall_width: int = 2,
        wall_color: Color = WALL_COLOR,
        background_color: Color = BACKGROUND_COLOR,
        path_color: Color = PATH_COLOR,
    ) -> None:
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        if padding < 0:
            raise ValueError("padding must not be negative")
        self.cell_size = cell_size
        self.padding = padding
        self.wall_width = max(1, wall_width)
        self.wall_color = wall_color
        self.background_color = background_color
        self.path_color = path_color

    def canvas_size(self, grid: Grid) -> Tuple[int, int]:
        return (
            grid.width * self.cell_size + 2 * self.padding,
            grid.height * self.cell_size + 2 * self.padding,
        )

    def cell_bbox(self, grid: Grid, coords: Coordinate) -> Tuple[int, int, int, int]:
        """Pixel box ``(left, top, right, bottom)`` of a cell."""

        left = self.padding + coords.col * self.cell_size
        top = self.padding + (grid.height - 1 - coords.row) * self.cell_size
        return left, top, left + self.cell_size, top + self.cell_size

    def cell_center(self, grid: Grid, coords: Coordinate) -> Tuple[float, float]:
        left, top, right, bottom = self.cell_bbox(grid, coords)
        return (left + right) / 2, (top + bottom) / 2

    def render(
        self,
        grid: Grid,
        *,
        path: Optional[Sequence[Coordinate]] = None,
        distances: Optional[Distances] = None,
        heat_color: Color = HEAT_COLOR,
    ) -> Image.Image:
        canvas = Image.new("RGB", self.canvas_size(grid), self.background_color)
        if distances is not None and len(grid):
            self._draw_heat_map(canvas, grid, distances, heat_color)
        draw = ImageDraw.Draw(canvas)
        self._draw_walls(draw, grid)
        if path:
            self._draw_path(draw, grid, path)
        return canvas

    def save(self, grid: Grid, output_path: PathLike, **kwargs) -> Path:
        """Render ``grid`` and write it to ``output_path``."""

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.render(grid, **kwargs).save(path)
        return path

    # ------------------------------------------------------------------

    def _draw_walls(self, draw: ImageDraw.ImageDraw, grid: Grid) -> None:
        for coords in grid:
            left, top, right, bottom = self.cell_bbox(grid, coords)
            west = grid.west(coords)
            if west is None or not grid.is_linked(coords, west):
                draw.line((left, top, left, bottom), fill=self.wall_color, width=self.wall_width)
            south = grid.south(coords)
            if south is None or not grid.is_linked(coords, south):
                draw.line((left, bottom, right, bottom), fill=self.wall_color, width=self.wall_width)

        # North and east boundaries are never drawn per cell.
        x0 = self.padding
        y0 = self.padding
        x1 = self.padding + grid.width * self.cell_size
        y1 = self.padding + grid.height * self.cell_size
        draw.line((x0, y0, x1, y0), fill=self.wall_color, width=self.wall_width)
        draw.line((x1, y0, x1, y1), fill=self.wall_color, width=self.wall_width)

    def _draw_heat_map(
        self,
        canvas: Image.Image,
        grid: Grid,
        distances: Distances,
        color: Color,
    ) -> None:
        field = np.flipud(distances.to_array(grid.height, grid.width))
        reachable = field != UNREACHABLE
        max_distance = distances.max_distance
        if max_distance > 0:
            fraction = 1.0 - field.astype(np.float64) / max_distance
        else:
            fraction = np.ones(field.shape, dtype=np.float64)
        shaded = np.trunc(fraction[..., np.newaxis] * np.asarray(color, dtype=np.float64))
        pixels = np.empty(field.shape + (3,), dtype=np.uint8)
        pixels[:] = self.background_color
        pixels[reachable] = shaded[reachable].astype(np.uint8)
        block = np.repeat(np.repeat(pixels, self.cell_size, axis=0), self.cell_size, axis=1)
        canvas.paste(Image.fromarray(block), (self.padding, self.padding))

    def _draw_path(self, draw: ImageDraw.ImageDraw, grid: Grid, path: Sequence[Coordinate]) -> None:
        thickness = max(2, self.cell_size // 4)
        points = [self.cell_center(grid, coords) for coords in path]
        if len(points) >= 2:
            draw.line(points, fill=self.path_color, width=thickness, joint="curve")
        # Round off both ends so a single-cell path is still visible.
        radius = thickness / 2
        for x, y in (points[0], points[-1]):
            draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=self.path_color)


__all__ = ["MazeRenderer", "PathLike"]
