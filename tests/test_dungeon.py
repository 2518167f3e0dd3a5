import pytest

from dungeoncrawl.dungeon import Dungeon
from dungeoncrawl.grid import Grid
from dungeoncrawl.room import Room
from dungeoncrawl.sprite import AnimatedSprite, Sprite
from dungeoncrawl.tile import Door, Tile, TileType
from dungeoncrawl.vec import DIRECTIONS, Vec


def make_tiles(rows):
    height, width = len(rows), len(rows[0])
    tiles = Grid(width, height)
    for y, line in enumerate(rows):
        for x, char in enumerate(line):
            tile = Tile(visible=True)
            if char == "#":
                tile.type = TileType.WALL
            elif char == ".":
                tile.type = TileType.FLOOR
                tile.walkable = True
            elif char == "+":
                tile.type = TileType.DOOR
                tile.door = Door(tile, False, Sprite(), Sprite())
            tiles[x, y] = tile
    return tiles


OPEN = ["#####", "#...#", "#.+.#", "#...#", "#####"]
ROOM = Room(Vec(1, 1), Vec(3, 3))


def make_dungeon(rows=OPEN, decorations=None):
    return Dungeon(make_tiles(rows), [ROOM], decorations)


def test_tiles_start_invisible():
    dungeon = make_dungeon()
    assert not any(dungeon.tiles[x, y].visible for x in range(5) for y in range(5))


def test_neighbors_interior_in_direction_order():
    assert make_dungeon().neighbors(Vec(2, 2)) == [Vec(2, 2) + d for d in DIRECTIONS]


def test_neighbors_at_corner_stay_in_bounds():
    assert set(make_dungeon().neighbors(Vec(0, 0))) == {Vec(1, 0), Vec(0, 1)}


def test_is_blocking():
    dungeon = make_dungeon()
    assert dungeon.is_blocking(Vec(0, 0))
    assert not dungeon.is_blocking(Vec(1, 1))
    assert dungeon.is_blocking(Vec(2, 2))
    dungeon.tiles[2, 2].door.open()
    assert not dungeon.is_blocking(Vec(2, 2))


def test_random_open_room_tile_finds_only_free_tile():
    dungeon = make_dungeon(["#####", "#...#", "#...#", "#...#", "#####"])
    free = Vec(3, 2)
    for x in range(1, 4):
        for y in range(1, 4):
            if Vec(x, y) != free:
                dungeon.tiles[x, y].entity = object()
    assert dungeon.random_open_room_tile() == free


def test_random_open_room_tile_is_walkable_and_inside_room():
    dungeon = make_dungeon()
    for _ in range(20):
        pos = dungeon.random_open_room_tile()
        assert dungeon.tiles[pos].walkable
        assert 1 <= pos.x <= 3 and 1 <= pos.y <= 3


def test_random_open_room_tile_without_rooms():
    dungeon = Dungeon(make_tiles(OPEN), [])
    with pytest.raises(ValueError):
        dungeon.random_open_room_tile()


def test_remove_entity():
    dungeon = make_dungeon()
    dungeon.tiles[1, 1].entity = object()
    dungeon.remove_entity(Vec(1, 1))
    assert dungeon.tiles[1, 1].entity is None


def test_update_animates_only_visible_decorations():
    seen = AnimatedSprite([Sprite(), Sprite()])
    hidden = AnimatedSprite([Sprite(), Sprite()])
    dungeon = make_dungeon(decorations={Vec(1, 1): seen, Vec(3, 3): hidden})
    dungeon.tiles[1, 1].visible = True
    dungeon.update()
    assert dungeon.decorations[Vec(1, 1)].current_frame == 1
    assert dungeon.decorations[Vec(3, 3)].current_frame == 0


def test_update_visibility_marks_tiles():
    dungeon = make_dungeon()
    dungeon.update_visibility(Vec(1, 1))
    assert dungeon.tiles[1, 1].visible
    assert Vec(1, 1) in dungeon.calculate_fov(Vec(1, 1))


def test_calculate_path_endpoints():
    dungeon = make_dungeon()
    path = dungeon.calculate_path(Vec(1, 1), Vec(3, 3))
    assert path[0] == Vec(1, 1)
    assert path[-1] == Vec(3, 3)