"""Fog of war: how dark each tile is drawn for the hero."""

from __future__ import annotations

from dungeoncrawl.vec import Vec, distance


class Fog:
    """Tracks visible and previously seen tiles."""

    def __init__(self, brightness_seen: float = 0.7) -> None:
        self.brightness_seen = brightness_seen
        self.position = Vec()
        self.visible_tiles: set[Vec] = set()
        self.previously_seen_tiles: set[Vec] = set()

    def update_visibility(self, dungeon, position: Vec) -> None:
        """Recompute what is visible from a new viewer position."""
        self.position = position
        for pos in self.visible_tiles:
            dungeon.tiles[pos].visible = False
        self.previously_seen_tiles |= self.visible_tiles
        self.visible_tiles = dungeon.calculate_fov(position)
        for pos in self.visible_tiles:
            dungeon.tiles[pos].visible = True

    def brightness(self, location: Vec) -> float:
        """Darkness of the overlay: 0 is fully lit, 1 is never seen."""
        if location in self.visible_tiles:
            dist = distance(self.position, location)
            return min(max(0.1 * (dist - 1), 0.0), self.brightness_seen)
        if location in self.previously_seen_tiles:
            return self.brightness_seen
        return 1.0