"""Events that play out in the world: sounds, hits, deaths and animations."""

from __future__ import annotations

import math

from dungeoncrawl import randomness
from dungeoncrawl.content.items import Heart
from dungeoncrawl.event import Event
from dungeoncrawl.sprite import AnimatedSprite, Sprite
from dungeoncrawl.vec import Vec

LIGHTNING_DAMAGE = 6


class _Animation(Event):
    """An event that knows which of its frames it is on."""

    def __init__(self, number_of_frames: int = 1) -> None:
        super().__init__(number_of_frames)
        self._frame = 0

    def update(self) -> None:
        super().update()
        self._frame += 1


class AudioEvent(Event):
    """Play a named sound once."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name

    def execute(self, engine) -> None:
        engine.audio.play_sound(self.name)


class Die(Event):
    """Kill an entity, clear its tile and maybe leave a heart behind."""

    def __init__(self, entity) -> None:
        super().__init__()
        self.entity = entity

    def execute(self, engine) -> None:
        self.entity.take_damage(self.entity.health)
        position = self.entity.position
        engine.dungeon.remove_entity(position)
        if randomness.probability(75):
            sprite = engine.graphics.get_sprite("heart_full")
            engine.dungeon.tiles[position].item = Heart(sprite)
        engine.events.add(AudioEvent("death"))


class DropLoot(Event):
    """Put an item on the tile at a position."""

    def __init__(self, position: Vec, item) -> None:
        super().__init__()
        self.position = position
        self.item = item

    def execute(self, engine) -> None:
        engine.dungeon.tiles[self.position].item = self.item


class Hit(Event):
    """Damage an entity; a fatal hit is followed by its death."""

    def __init__(self, entity, damage: int) -> None:
        super().__init__()
        self.entity = entity
        self.damage = damage

    def execute(self, engine) -> None:
        self.entity.take_damage(self.damage)

    def when_done(self, engine) -> None:
        if not self.entity.alive:
            self.add_next(Die(self.entity))


class Lightning(_Animation):
    """A lightning strike animated over a tile, hitting whoever stands there."""

    def __init__(self, position: Vec) -> None:
        super().__init__()
        self.position = position
        self._sprite = AnimatedSprite()
        self._frames = 1

    def is_done(self) -> bool:
        return self._frame == self._frames

    def execute(self, engine) -> None:
        if self._frame == 0:
            self._sprite = engine.graphics.get_animated_sprite("lightning")
            self._frames = self._sprite.number_of_frames()
        engine.camera.add_overlay(self.position, self._sprite.current())
        self._sprite.update()

    def when_done(self, engine) -> None:
        tile = engine.dungeon.tiles[self.position]
        if tile.has_entity():
            engine.events.add(Hit(tile.entity, LIGHTNING_DAMAGE))


class Swing(_Animation):
    """Rotate a weapon sprite through an arc, then put it back."""

    DURATION = 5

    def __init__(self, sprite: Sprite, direction: Vec) -> None:
        super().__init__(self.DURATION)
        self.sprite = sprite
        self._copy = sprite.copy()
        duration = self.DURATION

        if direction == Vec(1, 0):
            self.starting_angle = 0.0
            self.delta = 135.0 / duration - 1
        elif direction == Vec(-1, 0):
            self.starting_angle = 0.0
            self.delta = -135.0 / (duration - 1)
        elif direction == Vec(0, 1):
            sprite.shift = sprite.shift + Vec(0, -12)
            sign = math.copysign(1.0, sprite.angle)
            self.starting_angle = -75 * sign  # wind back before the swing
            self.delta = 90.0 / (duration - 1) * sign
        else:
            sprite.shift = Vec(-4, sprite.shift.y - 4)
            sign = math.copysign(1.0, sprite.angle)
            self.starting_angle = 135 * sign  # wind forward before the swing
            self.delta = 90.0 / (duration - 1) * sign

    def execute(self, engine) -> None:
        self.sprite.angle = self.starting_angle + self.delta * self._frame

    def when_done(self, engine) -> None:
        self.sprite.restore(self._copy)


class Throw(Event):
    """Spin a weapon sprite away along a direction, then put it back.

    The spin follows the most recent sideways throw.
    """

    DURATION = 10
    SPIN = 77
    _spin_sign = 1

    def __init__(self, sprite: Sprite, direction: Vec, delta: int) -> None:
        super().__init__(self.DURATION)
        self.sprite = sprite
        self._copy = sprite.copy()
        self.direction = direction
        self.delta = delta
        sprite.center = sprite.size // 2

        if direction == Vec(1, 0):
            Throw._spin_sign = 1
        elif direction == Vec(-1, 0):
            Throw._spin_sign = -1
        elif direction == Vec(0, 1):
            sprite.angle += 90
            self.direction = direction * -1
        else:
            sprite.angle -= 90
            self.direction = direction * -1

    def execute(self, engine) -> None:
        self.sprite.angle += self.SPIN * Throw._spin_sign
        self.sprite.shift = self.sprite.shift + self.direction * self.delta

    def when_done(self, engine) -> None:
        self.sprite.restore(self._copy)


class Thrust(Event):
    """Push a weapon sprite forward a few pixels per frame, then put it back."""

    DURATION = 5
    DELTA = 3  # pixels per frame

    def __init__(self, sprite: Sprite, direction: Vec) -> None:
        super().__init__(self.DURATION)
        self.sprite = sprite
        self._copy = sprite.copy()
        self.direction = direction

        half_height = sprite.size.y // 2
        sprite.shift = sprite.shift - Vec(0, sprite.size.y // 4)
        sprite.center = sprite.size // 2

        if direction == Vec(1, 0):
            sprite.angle = 90
            sprite.shift = sprite.shift + Vec(0, half_height)
        elif direction == Vec(-1, 0):
            sprite.angle = 270
            sprite.shift = sprite.shift + Vec(0, half_height)
        elif direction == Vec(0, 1):
            sprite.angle = 0
            self.direction = direction * -1
        else:
            sprite.angle = 180
            self.direction = direction * -1
            sprite.shift = sprite.shift + Vec(0, half_height)

    def execute(self, engine) -> None:
        self.sprite.shift = self.sprite.shift + self.direction * self.DELTA

    def when_done(self, engine) -> None:
        self.sprite.restore(self._copy)


class UpdateFOV(Event):
    """Recompute what the hero can see."""

    def execute(self, engine) -> None:
        engine.dungeon.update_visibility(engine.hero.position)