"""Shared random number helpers for the game."""

from __future__ import annotations

import itertools
import random
from collections.abc import Mapping
from typing import Any, MutableSequence

_rng = random.Random()


def seed(value) -> None:
    """Reseed the shared generator."""
    _rng.seed(value)


def randint(low: int, high: int) -> int:
    """Uniform integer in [low, high]; low must be less than high."""
    if not low < high:
        raise ValueError(f"min must be less than max: randint({low}, {high})")
    return _rng.randint(low, high)


def probability(percentage: int) -> bool:
    """True with the given percent chance."""
    if percentage < 0:
        raise ValueError(f"percentage must be positive: {percentage}")
    return randint(0, 99) < percentage


def random_choice(container) -> Any:
    """A random element of any sized iterable; mappings yield (key, value) pairs."""
    if len(container) == 0:
        raise ValueError("Container is empty")
    items = container.items() if isinstance(container, Mapping) else container
    if len(container) == 1:
        return next(iter(items))
    index = randint(0, len(container) - 1)
    return next(itertools.islice(iter(items), index, None))


def shuffle(items: MutableSequence) -> None:
    """Shuffle a sequence in place."""
    _rng.shuffle(items)