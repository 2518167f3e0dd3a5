"""Actions entities take on their turn and the results they report."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class Result:
    """Outcome of an action, possibly naming an action to try instead."""

    succeeded: bool = False
    next_action: Optional[Action] = None


class Action(ABC):
    """Something an entity does with its turn."""

    @abstractmethod
    def perform(self, engine, entity) -> Result:
        """Carry out the action and report the outcome."""


def success() -> Result:
    """The action completed and the entity's turn is over."""
    return Result(True, None)


def failure() -> Result:
    """The action could not be done; the entity gets another go."""
    return Result(False, None)


def alternative(action: Action) -> Result:
    """Replace the current action with another one."""
    return Result(False, action)