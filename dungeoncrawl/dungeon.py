"""The dungeon: its tiles, rooms, decorations and visibility."""

from __future__ import annotations

from dungeoncrawl import randomness
from dungeoncrawl.fog import Fog
from dungeoncrawl.fov import FieldOfView
from dungeoncrawl.grid import Grid
from dungeoncrawl.pathfinding import Path, breadth_first
from dungeoncrawl.room import Room
from dungeoncrawl.sprite import AnimatedSprite
from dungeoncrawl.tile import Tile
from dungeoncrawl.vec import DIRECTIONS, Vec


class Dungeon:
    """A grid of tiles with rooms, decorations and a fog of war."""

    def __init__(self, tiles: Grid[Tile], rooms=(), decorations=None) -> None:
        self.tiles = tiles
        self.rooms: list[Room] = list(rooms)
        self.decorations: dict[Vec, AnimatedSprite] = dict(decorations or {})
        self.fog = Fog()
        for y in range(tiles.height):
            for x in range(tiles.width):
                tiles[x, y].visible = False

    def random_open_room_tile(self) -> Vec:
        """A random walkable, unoccupied tile inside one of the rooms."""
        while True:
            room = randomness.random_choice(self.rooms)
            x = randomness.randint(room.position.x, room.position.x + room.size.x - 1)
            y = randomness.randint(room.position.y, room.position.y + room.size.y - 1)
            tile = self.tiles[x, y]
            if tile.walkable and tile.entity is None:
                return Vec(x, y)

    def update(self) -> None:
        """Advance animations of decorations on visible tiles."""
        for position, animated_sprite in self.decorations.items():
            if self.tiles[position].visible:
                animated_sprite.update()

    def update_visibility(self, position: Vec) -> None:
        self.fog.update_visibility(self, position)

    def remove_entity(self, position: Vec) -> None:
        self.tiles[position].entity = None

    def neighbors(self, position: Vec) -> list[Vec]:
        """In-bounds positions next to the given one."""
        return [
            position + direction
            for direction in DIRECTIONS
            if self.tiles.within_bounds(position + direction)
        ]

    def is_blocking(self, position: Vec) -> bool:
        """Whether the tile blocks line of sight."""
        tile = self.tiles[position]
        if tile.is_wall():
            return True
        if tile.has_door():
            return not tile.door.is_open()
        return False

    def calculate_fov(self, position: Vec) -> set[Vec]:
        return set(FieldOfView(self).compute(position))

    def calculate_path(self, start: Vec, stop: Vec) -> Path:
        return breadth_first(self, start, stop)