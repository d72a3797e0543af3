"""Maze generation algorithms."""

__all__ = [
    "BinaryTreeGenerator",
    "SidewinderGenerator",
    "GENERATORS",
    "get_generator",
]

from typing import Dict, Type

from ..base import AbstractMazeGenerator
from .binary_tree import BinaryTreeGenerator
from .sidewinder import SidewinderGenerator

GENERATORS: Dict[str, Type[AbstractMazeGenerator]] = {
    BinaryTreeGenerator.name: BinaryTreeGenerator,
    SidewinderGenerator.name: SidewinderGenerator,
}


def get_generator(name: str, **kwargs) -> AbstractMazeGenerator:
    try:
        generator_cls = GENERATORS[name]
    except KeyError as exc:
        choices = ", ".join(sorted(GENERATORS))
        raise ValueError(f"Unknown maze algorithm '{name}' (choose from {choices})") from exc
    return generator_cls(**kwargs)
