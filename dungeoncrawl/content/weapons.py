"""Weapons and what happens when they are used."""

from __future__ import annotations

from dungeoncrawl import randomness
from dungeoncrawl.content.events import AudioEvent, Hit, Swing, Thrust
from dungeoncrawl.entity import Weapon


def _swing_at(engine, weapon: Weapon, attacker, defender) -> None:
    """Swing the weapon at the defender, hitting when the swing ends."""
    direction = defender.position - attacker.position
    swing = Swing(weapon.sprite, direction)
    engine.events.add(swing)
    swing.add_next(Hit(defender, weapon.damage))


class Axe(Weapon):
    def __init__(self, damage: int) -> None:
        super().__init__("axe", damage)

    def use(self, engine, attacker, defender) -> None:
        _swing_at(engine, self, attacker, defender)


class Cleaver(Weapon):
    def __init__(self, damage: int) -> None:
        super().__init__("cleaver", damage)

    def use(self, engine, attacker, defender) -> None:
        _swing_at(engine, self, attacker, defender)


class Club(Weapon):
    def __init__(self, damage: int) -> None:
        super().__init__("spiked_club", damage)

    def use(self, engine, attacker, defender) -> None:
        _swing_at(engine, self, attacker, defender)


class Sword(Weapon):
    """Swings like the others and rings out as it strikes."""

    def __init__(self, damage: int) -> None:
        super().__init__("sword", damage)

    def use(self, engine, attacker, defender) -> None:
        _swing_at(engine, self, attacker, defender)
        engine.events.add(AudioEvent("metal-clang"))


class Bite(Weapon):
    """An unseen weapon that hits at once."""

    def __init__(self, damage: int) -> None:
        super().__init__("none", damage)

    def use(self, engine, attacker, defender) -> None:
        engine.events.add(Hit(defender, self.damage))


class Spear(Weapon):
    """Thrusts at the defender, hitting when the thrust ends."""

    def __init__(self, damage: int) -> None:
        super().__init__("spear", damage)

    def use(self, engine, attacker, defender) -> None:
        direction = defender.position - attacker.position
        thrust = Thrust(self.sprite, direction)
        engine.events.add(thrust)
        thrust.add_next(Hit(defender, self.damage))


class Knife(Weapon):
    """Hits at once, then again after a swing or a thrust."""

    def __init__(self, damage: int) -> None:
        super().__init__("knife", damage)

    def use(self, engine, attacker, defender) -> None:
        engine.events.add(Hit(defender, self.damage))
        direction = defender.position - attacker.position
        if randomness.probability(50):
            motion = Swing(self.sprite, direction)
        else:
            motion = Thrust(self.sprite, direction)
        engine.events.add(motion)
        motion.add_next(Hit(defender, self.damage))