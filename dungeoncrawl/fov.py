"""Symmetric shadow-casting field of view over a dungeon."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from fractions import Fraction
from typing import Optional

from dungeoncrawl.vec import Vec


class Cardinal(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@dataclass(frozen=True)
class Quadrant:
    """One of the four 90 degree sectors scanned around an origin."""

    direction: Cardinal = Cardinal.NORTH
    origin: Vec = Vec()

    def transform(self, tile: Vec) -> Vec:
        """Convert quadrant coordinates (row, col) into dungeon coordinates (x, y)."""
        row, col = tile
        if self.direction is Cardinal.NORTH:
            return self.origin + Vec(col, -row)
        if self.direction is Cardinal.SOUTH:
            return self.origin + Vec(col, row)
        if self.direction is Cardinal.EAST:
            return self.origin + Vec(row, col)
        return self.origin + Vec(-row, col)


@dataclass
class Row:
    """A row of tiles at a given depth, bounded by two slopes."""

    depth: int
    start_slope: Fraction
    end_slope: Fraction

    def tiles(self) -> list[Vec]:
        """The (row, col) tiles covered by this row's slopes."""
        min_col = round_ties_up(self.depth * self.start_slope)
        max_col = round_ties_down(self.depth * self.end_slope)
        return [Vec(self.depth, col) for col in range(min_col, max_col + 1)]

    def next(self) -> Row:
        return Row(self.depth + 1, self.start_slope, self.end_slope)


class FieldOfView:
    """Computes the set of positions visible from a point in a dungeon."""

    def __init__(self, dungeon) -> None:
        self.dungeon = dungeon
        self.visible: set[Vec] = set()
        self._quadrant = Quadrant()

    def compute(self, position: Vec) -> set[Vec]:
        self.visible = set()
        self.mark_visible(position)
        for direction in Cardinal:
            self._quadrant = Quadrant(direction, position)
            self.scan(Row(1, Fraction(-1), Fraction(1)))
        return self.visible

    def mark_visible(self, position: Vec) -> None:
        self.visible.add(position)

    def reveal(self, tile: Vec) -> None:
        """Mark a tile of the current quadrant as visible."""
        self.mark_visible(self._quadrant.transform(tile))

    def is_wall(self, tile: Optional[Vec]) -> bool:
        if tile is None:
            return False
        return self.dungeon.is_blocking(self._quadrant.transform(tile))

    def is_floor(self, tile: Optional[Vec]) -> bool:
        if tile is None:
            return False
        return not self.dungeon.is_blocking(self._quadrant.transform(tile))

    def scan(self, row: Row) -> None:
        prev_tile: Optional[Vec] = None
        for tile in row.tiles():
            if self.is_wall(tile) or is_symmetric(row, tile):
                self.reveal(tile)
            if self.is_wall(prev_tile) and self.is_floor(tile):
                row.start_slope = slope(tile)
            if self.is_floor(prev_tile) and self.is_wall(tile):
                next_row = row.next()
                next_row.end_slope = slope(tile)
                self.scan(next_row)
            prev_tile = tile
        if self.is_floor(prev_tile):
            self.scan(row.next())


def slope(tile: Vec) -> Fraction:
    """Slope of the left edge of a (row, col) tile."""
    row_depth, col = tile
    return Fraction(2 * col - 1, 2 * row_depth)


def is_symmetric(row: Row, tile: Vec) -> bool:
    """Whether the tile's centre lies within the row's slopes."""
    _, col = tile
    return row.depth * row.start_slope <= col <= row.depth * row.end_slope


def round_ties_up(n) -> int:
    return math.floor(Fraction(n) + Fraction(1, 2))


def round_ties_down(n) -> int:
    return math.ceil(Fraction(n) - Fraction(1, 2))