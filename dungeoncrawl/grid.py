"""A fixed-size two-dimensional array addressed by (x, y)."""

from __future__ import annotations

import copy
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class Grid(Generic[T]):
    """Rectangular grid of values; every cell starts as a copy of ``initval``."""

    def __init__(self, width: int, height: int, initval=0) -> None:
        if width <= 0:
            raise ValueError(f"Value width = {width} must be greater than 0")
        if height <= 0:
            raise ValueError(f"Value height = {height} must be greater than 0")
        self.width = width
        self.height = height
        self._values: list[T] = [copy.deepcopy(initval) for _ in range(width * height)]

    def _index(self, position: Iterable[int]) -> int:
        x, y = position
        self.check_bounds((x, y))
        return self.width * y + x

    def __getitem__(self, position) -> T:
        return self._values[self._index(position)]

    def __setitem__(self, position, value: T) -> None:
        self._values[self._index(position)] = value

    def within_bounds(self, position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def check_bounds(self, position) -> None:
        """Raise IndexError if position lies outside the grid."""
        x, y = position
        if not self.within_bounds((x, y)):
            raise IndexError(
                f"({x}, {y}) is out of bounds for an array with size "
                f"({self.width}, {self.height})"
            )

    def __str__(self) -> str:
        return "".join(
            "".join(str(self[x, y]) for x in range(self.width)) + "\n"
            for y in range(self.height)
        )