import pytest

from dungeoncrawl import randomness
from dungeoncrawl.builder import Builder
from dungeoncrawl.content.weapons import Axe, Bite, Cleaver, Club, Knife, Spear, Sword
from dungeoncrawl.dungeon import Dungeon
from dungeoncrawl.entity import Entity, Team
from dungeoncrawl.event import Events
from dungeoncrawl.grid import Grid
from dungeoncrawl.sprite import AnimatedSprite, Sprite
from dungeoncrawl.tile import Tile, TileType
from dungeoncrawl.vec import Vec


class FakeGraphics:
    def __init__(self):
        self.requested = []

    def get_sprite(self, name):
        self.requested.append(name)
        return Sprite(texture_id=0, size=Vec(16, 16))

    def get_animated_sprite(self, name, ticks_per_frame=1, random_start=False, shuffle_order=False):
        return AnimatedSprite([Sprite(texture_id=0, size=Vec(16, 16))], ticks_per_frame)


class FakeAudio:
    def __init__(self):
        self.played = []

    def play_sound(self, name, is_background=False):
        self.played.append(name)


def make_dungeon(width=9, height=9):
    layout, rooms = Builder(0).simple(width, height)
    tiles = Grid(width, height, Tile())
    for y in range(height):
        for x in range(width):
            if layout[x, y] == 0:
                tiles[x, y].type = TileType.WALL
            else:
                tiles[x, y].type = TileType.FLOOR
                tiles[x, y].walkable = True
    return Dungeon(tiles, rooms)


class FakeEngine:
    def __init__(self):
        self.dungeon = make_dungeon()
        self.graphics = FakeGraphics()
        self.audio = FakeAudio()
        self.events = Events()
        self.hero = None


def drain(engine, limit=100):
    for _ in range(limit):
        if len(engine.events) == 0:
            return
        engine.events.execute(engine)
    raise AssertionError("events never finished")


@pytest.fixture
def fight():
    engine = FakeEngine()
    attacker = Entity(engine, Vec(1, 1), Team.HERO)
    defender = Entity(engine, Vec(2, 1), Team.MONSTER)
    defender.set_max_health(20)
    return engine, attacker, defender


@pytest.mark.parametrize(
    "weapon_type,name",
    [(Axe, "axe"), (Cleaver, "cleaver"), (Club, "spiked_club"), (Sword, "sword"),
     (Spear, "spear"), (Knife, "knife"), (Bite, "none")],
)
def test_weapon_names(weapon_type, name):
    weapon = weapon_type(4)
    assert weapon.name == name
    assert weapon.damage == 4


@pytest.mark.parametrize("weapon_type", [Axe, Cleaver, Club, Sword, Spear, Bite])
def test_single_hit_weapons_deal_their_damage(fight, weapon_type):
    engine, attacker, defender = fight
    weapon_type(3).use(engine, attacker, defender)
    drain(engine)
    assert defender.health == defender.max_health - 3


@pytest.mark.parametrize("weapon_type", [Axe, Cleaver, Club, Sword, Spear])
def test_weapon_sprite_restored_after_attack(fight, weapon_type):
    engine, attacker, defender = fight
    weapon = weapon_type(1)
    attacker.set_weapon(weapon)
    before = weapon.sprite.copy()
    weapon.use(engine, attacker, defender)
    drain(engine)
    assert weapon.sprite == before


def test_set_weapon_fetches_sprite_by_name(fight):
    engine, attacker, _ = fight
    attacker.set_weapon(Club(2))
    assert engine.graphics.requested[-1] == "spiked_club"


def test_sword_clangs(fight):
    engine, attacker, defender = fight
    Sword(1).use(engine, attacker, defender)
    drain(engine)
    assert "metal-clang" in engine.audio.played


def test_bite_hits_immediately(fight):
    engine, attacker, defender = fight
    Bite(2).use(engine, attacker, defender)
    engine.events.execute(engine)
    assert defender.health == defender.max_health - 2


@pytest.mark.parametrize("value", range(6))
def test_knife_hits_twice(fight, value):
    randomness.seed(value)
    engine, attacker, defender = fight
    Knife(2).use(engine, attacker, defender)
    drain(engine)
    assert defender.health == defender.max_health - 2 * 2


def test_lethal_attack_kills(fight):
    engine, attacker, defender = fight
    position = defender.position
    Axe(50).use(engine, attacker, defender)
    drain(engine)
    assert not defender.alive
    assert engine.dungeon.tiles[position].entity is None
    assert "death" in engine.audio.played