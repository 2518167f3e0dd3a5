"""Items lying in the dungeon: hearts and weapons."""

from __future__ import annotations

from dungeoncrawl.sprite import Sprite
from dungeoncrawl.tile import Item

HEART_HEALING = 3
ITEM_ANGLE = 45  # weapons lie tilted on the floor


class Heart(Item):
    """Restores some health to whoever picks it up."""

    def __init__(self, sprite: Sprite) -> None:
        self._sprite = sprite

    def interact(self, entity) -> None:
        entity.take_damage(-HEART_HEALING)

    def sprite(self) -> Sprite:
        return self._sprite


class _WeaponItem(Item):
    """A weapon on the floor; picking it up stores and wields it."""

    def __init__(self, weapon) -> None:
        self.weapon = weapon

    def _equip(self, entity, stored: Item) -> None:
        entity.add_to_inventory(stored)
        entity.set_weapon(self.weapon)

    def sprite(self) -> Sprite:
        self.weapon.sprite.angle = ITEM_ANGLE
        return self.weapon.sprite.copy()


class AxeItem(_WeaponItem):
    """An axe lying on the floor."""

    def interact(self, entity) -> None:
        self._equip(entity, AxeItem(self.weapon))


class SwordItem(_WeaponItem):
    """A sword lying on the floor."""

    def interact(self, entity) -> None:
        self._equip(entity, SwordItem(self.weapon))