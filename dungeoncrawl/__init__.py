"""Building blocks for a turn-based dungeon crawler: generation, field of view, entities and graphics."""

__version__ = "0.1.0"