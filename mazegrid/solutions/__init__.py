"""Path finding over generated mazes."""

__all__ = ["Distances", "longest_path"]

from .dijkstra import Distances, longest_path
