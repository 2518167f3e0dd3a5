from dungeoncrawl.dungeon import Dungeon
from dungeoncrawl.fog import Fog
from dungeoncrawl.grid import Grid
from dungeoncrawl.room import Room
from dungeoncrawl.sprite import Sprite
from dungeoncrawl.tile import Door, Tile, TileType
from dungeoncrawl.vec import Vec


def build(rows):
    height, width = len(rows), len(rows[0])
    tiles = Grid(width, height)
    for y, line in enumerate(rows):
        for x, char in enumerate(line):
            tile = Tile()
            if char == "#":
                tile.type = TileType.WALL
            elif char == ".":
                tile.type = TileType.FLOOR
                tile.walkable = True
            elif char == "+":
                tile.type = TileType.DOOR
                tile.door = Door(tile, False, Sprite(), Sprite())
            tiles[x, y] = tile
    return Dungeon(tiles, [Room(Vec(1, 1), Vec(width - 2, height - 2))])


TWO_ROOMS = [
    "#########",
    "#...#...#",
    "#...+...#",
    "#...#...#",
    "#########",
]


def test_unseen_tile_is_dark():
    assert Fog().brightness(Vec(3, 3)) == 1


def test_viewer_position_is_lit():
    dungeon = build(TWO_ROOMS)
    fog = Fog()
    fog.update_visibility(dungeon, Vec(2, 2))
    assert fog.brightness(Vec(2, 2)) == 0.0
    assert dungeon.tiles[2, 2].visible


def test_visible_brightness_bounded():
    dungeon = build(TWO_ROOMS)
    dungeon.tiles[4, 2].door.open()
    fog = Fog(brightness_seen=0.3)
    fog.update_visibility(dungeon, Vec(1, 2))
    assert fog.visible_tiles
    assert all(0.0 <= fog.brightness(p) <= 0.3 for p in fog.visible_tiles)


def test_previously_seen_tile_dims():
    dungeon = build(TWO_ROOMS)
    door = dungeon.tiles[4, 2].door
    door.open()
    fog = Fog()
    fog.update_visibility(dungeon, Vec(2, 2))
    assert dungeon.tiles[6, 2].visible
    door.close()
    fog.update_visibility(dungeon, Vec(2, 2))
    assert Vec(6, 2) not in fog.visible_tiles
    assert not dungeon.tiles[6, 2].visible
    assert fog.brightness(Vec(6, 2)) == 0.7


def test_hidden_room_stays_unseen():
    dungeon = build(TWO_ROOMS)
    fog = Fog()
    fog.update_visibility(dungeon, Vec(2, 2))
    assert fog.brightness(Vec(6, 1)) == 1
    assert not dungeon.tiles[6, 1].visible