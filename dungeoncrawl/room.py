"""Rectangular rooms placed in a dungeon layout."""

from __future__ import annotations

from dataclasses import dataclass

from dungeoncrawl.vec import Vec


@dataclass
class Room:
    """A room given by its lower corner and its size in tiles."""

    position: Vec = Vec()
    size: Vec = Vec()

    def __str__(self) -> str:
        return f"Room(pos={self.position}, size={self.size})"


def overlaps(a: Room, b: Room) -> bool:
    """True unless the rooms are separated by at least one tile."""
    well_separated = (
        a.position.x + a.size.x < b.position.x
        or b.position.x + b.size.x < a.position.x
        or a.position.y + a.size.y < b.position.y
        or b.position.y + b.size.y < a.position.y
    )
    return not well_separated