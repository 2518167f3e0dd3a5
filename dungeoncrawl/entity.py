"""Entities (heroes, monsters, chests), their weapons and turn order."""

from __future__ import annotations

from collections import deque
from enum import Enum, auto
from typing import Callable, Optional

from dungeoncrawl.action import Action
from dungeoncrawl.sprite import AnimatedSprite, Sprite
from dungeoncrawl.vec import Vec

DEFAULT_SPEED = 8
COST_OF_TURN = 8  # energy needed for taking a turn


class Team(Enum):
    HERO = auto()
    MONSTER = auto()
    CHEST = auto()


class Weapon:
    """Something an entity attacks with; the name names its sprite."""

    def __init__(self, name: str = "", damage: int = 0) -> None:
        self.name = name
        self.damage = damage
        self.sprite = Sprite()

    def use(self, engine, attacker: Entity, defender: Entity) -> None:
        """What happens when the weapon is used; does nothing by default."""


class Entity:
    """A being that occupies a dungeon tile and takes turns."""

    def __init__(self, engine, position: Vec, team: Team) -> None:
        tile = engine.dungeon.tiles[position]
        if tile.entity is not None:
            raise ValueError(f"An entity is already on tile: {position}")
        tile.entity = self

        self.engine = engine
        self._position = position
        self._direction = Vec(1, 0)
        self.team = team
        self.weapon = Weapon()
        self._sprite = AnimatedSprite()

        self._health = 1
        self._max_health = 1
        self._alive = True

        self._inventory: deque = deque()

        # speed is energy gained per turn; a turn costs COST_OF_TURN energy
        self.speed = DEFAULT_SPEED
        self.energy = 0

        self.on_move: list[Callable] = []
        self.behavior: Optional[Callable] = None

    # movement

    @property
    def position(self) -> Vec:
        return self._position

    @property
    def direction(self) -> Vec:
        return self._direction

    def move_to(self, position: Vec) -> None:
        """Move onto another tile, swapping occupants, then run on_move hooks."""
        tiles = self.engine.dungeon.tiles
        old_tile, new_tile = tiles[self._position], tiles[position]
        old_tile.entity, new_tile.entity = new_tile.entity, old_tile.entity
        self._position = position
        for hook in list(self.on_move):
            hook(self.engine, self)

    def change_direction(self, direction: Vec) -> None:
        self._direction = direction
        if direction.x == 1:
            self._sprite.flip(False)
        elif direction.x == -1:
            self._sprite.flip(True)
        self._adjust_weapon_position()

    def is_visible(self) -> bool:
        """An entity is visible when its tile is."""
        return self.engine.dungeon.tiles[self._position].visible

    # combat

    @property
    def health(self) -> int:
        return self._health

    @property
    def max_health(self) -> int:
        return self._max_health

    @property
    def alive(self) -> bool:
        return self._alive

    def take_damage(self, amount: int) -> None:
        """Lose health (negative amounts heal), dying at zero."""
        self._health = min(max(self._health - amount, 0), self._max_health)
        if self._health == 0:
            self._alive = False

    def set_max_health(self, value: int) -> None:
        """Set both the maximum and the current health."""
        self._max_health = self._health = value

    def set_weapon(self, weapon: Weapon) -> None:
        self.weapon = weapon
        weapon.sprite = self.engine.graphics.get_sprite(weapon.name)
        self._adjust_weapon_position()
        weapon.sprite.center = Vec(weapon.sprite.size.x // 2, weapon.sprite.size.y)

    # inventory

    @property
    def inventory(self) -> tuple:
        return tuple(self._inventory)

    def add_to_inventory(self, item) -> None:
        self._inventory.append(item)

    def take_item(self):
        """Remove and return the oldest item, or None if there is none."""
        if not self._inventory:
            return None
        return self._inventory.popleft()

    # turns

    def take_turn(self) -> Optional[Action]:
        """The action chosen by the entity's behaviour, if any."""
        if self.behavior is None:
            return None
        return self.behavior(self.engine, self)

    # drawing

    def set_sprite(self, name: str) -> None:
        self._sprite = self.engine.graphics.get_animated_sprite(name, 1, True)

    def update(self) -> None:
        self._sprite.update()

    def sprites(self) -> list[Sprite]:
        """Weapon sprite, then body sprite, in drawing order."""
        return [self.weapon.sprite, self._sprite.current()]

    def _adjust_weapon_position(self) -> None:
        sprite = self.weapon.sprite
        body_width = self._sprite.current().size.x
        if self._direction.x == 1:
            sprite.flip = False
            sprite.shift = Vec(body_width // 8, sprite.shift.y)
            sprite.angle = 20
        elif self._direction.x == -1:
            sprite.flip = True
            sprite.shift = Vec(-(body_width // 2), sprite.shift.y)
            sprite.angle = -20


class Entities:
    """Entities in turn order; each acts once it has gathered enough energy."""

    def __init__(self) -> None:
        self._entities: deque[Entity] = deque()

    def add(self, entity: Entity) -> None:
        self._entities.append(entity)

    def update(self) -> None:
        for entity in self._entities:
            entity.update()

    def take_turn(self, engine) -> bool:
        """Let the front entity act; False when waiting on it or nobody is left."""
        self._remove_dead_entities()
        if not self._entities:
            return False

        entity = self._entities[0]
        if entity.energy < COST_OF_TURN:
            self.advance()
            return True

        action = entity.take_turn()
        if action is None:
            return False

        while True:
            result = action.perform(engine, entity)
            if result.succeeded:
                entity.energy %= COST_OF_TURN
                self.advance()
                return True
            if result.next_action is None:
                return True
            action = result.next_action

    def advance(self) -> None:
        """Move the front entity to the back and give it energy."""
        if not self._entities:
            return
        self._entities.rotate(-1)
        entity = self._entities[-1]
        entity.energy += entity.speed

    def _remove_dead_entities(self) -> None:
        self._entities = deque(entity for entity in self._entities if entity.alive)

    def __iter__(self):
        return iter(list(self._entities))

    def __len__(self) -> int:
        return len(self._entities)