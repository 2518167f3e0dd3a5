import pytest

from dungeoncrawl.sprite import Sprite
from dungeoncrawl.tile import Door, Item, Tile, TileType
from dungeoncrawl.vec import Vec


HORIZONTAL = Sprite(texture_id=1)
VERTICAL = Sprite(texture_id=2)


class Gem(Item):
    def __init__(self):
        self.touched = []

    def interact(self, entity):
        self.touched.append(entity)

    def sprite(self):
        return HORIZONTAL


def test_default_tile_is_empty():
    tile = Tile()
    assert tile.type is TileType.NONE
    assert not tile.is_wall()
    assert not tile.has_door()
    assert not tile.has_entity()
    assert not tile.has_item()
    assert not tile.walkable and not tile.visible


def test_type_queries():
    assert Tile(type=TileType.WALL).is_wall()
    assert Tile(type=TileType.DOOR).has_door()
    assert not Tile(type=TileType.FLOOR).has_door()


def test_entity_and_item_presence():
    tile = Tile()
    tile.entity = object()
    tile.item = Gem()
    assert tile.has_entity()
    assert tile.has_item()


def test_door_open_and_close_toggle_walkable():
    tile = Tile(type=TileType.DOOR)
    door = Door(tile, True, HORIZONTAL, VERTICAL)
    assert not door.is_open()
    door.open()
    assert door.is_open() and tile.walkable
    door.close()
    assert not door.is_open() and not tile.walkable
    assert door.tile is tile


def test_horizontal_door_sprites():
    door = Door(Tile(), True, HORIZONTAL, VERTICAL)
    assert door.sprite().texture_id == HORIZONTAL.texture_id
    door.open()
    assert door.sprite().texture_id == VERTICAL.texture_id
    assert door.sprite().shift == VERTICAL.shift + Vec(-6, 0)


def test_vertical_door_sprites():
    door = Door(Tile(), False, HORIZONTAL, VERTICAL)
    assert door.sprite().texture_id == VERTICAL.texture_id
    door.open()
    assert door.sprite().texture_id == HORIZONTAL.texture_id
    assert door.sprite().shift == HORIZONTAL.shift + Vec(6, -12)


def test_door_does_not_alter_given_sprites():
    Door(Tile(), True, HORIZONTAL, VERTICAL)
    assert VERTICAL.shift == Vec()


def test_item_is_abstract():
    with pytest.raises(TypeError):
        Item()


def test_removing_item_empties_tile():
    tile = Tile(type=TileType.FLOOR)
    tile.item = Gem()
    assert tile.has_item()
    tile.item = None
    assert not tile.has_item()