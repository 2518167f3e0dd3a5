"""Dungeon tiles, the doors that sit on them and the items lying on them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional

from dungeoncrawl.sprite import Sprite
from dungeoncrawl.vec import Vec


class TileType(Enum):
    NONE = auto()
    FLOOR = auto()
    WALL = auto()
    DOOR = auto()


class Item(ABC):
    """Something lying on a tile that an entity can pick up."""

    @abstractmethod
    def interact(self, entity) -> None:
        """Apply the item to the entity that picked it up."""

    @abstractmethod
    def sprite(self) -> Sprite:
        """The sprite drawn for the item on the floor."""


@dataclass(eq=False)
class Tile:
    """One cell of the dungeon."""

    type: TileType = TileType.NONE
    sprite: Sprite = field(default_factory=Sprite)
    visible: bool = False
    walkable: bool = False
    door: Optional[Door] = field(default=None, repr=False)
    item: Optional[Item] = field(default=None, repr=False)
    entity: Any = field(default=None, repr=False)

    def is_wall(self) -> bool:
        return self.type is TileType.WALL

    def has_door(self) -> bool:
        return self.type is TileType.DOOR

    def has_entity(self) -> bool:
        return self.entity is not None

    def has_item(self) -> bool:
        return self.item is not None


class Door:
    """A door that opens and closes, making its tile walkable or not."""

    def __init__(self, tile: Tile, is_horizontal: bool, horizontal: Sprite, vertical: Sprite) -> None:
        self.tile = tile
        self.is_horizontal = is_horizontal
        self._open = False
        self.horizontal = horizontal.copy()
        self.vertical = vertical.copy()
        # open doors are nudged aside so the tile looks walkable
        if is_horizontal:
            self.vertical.shift += Vec(-6, 0)
        else:
            self.horizontal.shift += Vec(6, -12)

    def is_open(self) -> bool:
        return self._open

    def open(self) -> None:
        self._open = True
        self.tile.walkable = True

    def close(self) -> None:
        self._open = False
        self.tile.walkable = False

    def sprite(self) -> Sprite:
        """The sprite matching the door's orientation and state."""
        if self.is_open() == self.is_horizontal:
            return self.vertical
        return self.horizontal