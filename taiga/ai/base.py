"""Base classes for creature decision engines.

Every creature kind gets an ``AI`` implementation parameterised by the shape
of its own state. An engine is stateless between calls apart from its tie-break
random source: each call reads one visibility snapshot and returns a decision
without touching the world.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Generic, Mapping, Optional, TypeVar, Union

from taiga.ai.influence import InfluenceMapBuilder
from taiga.ai.selection import best_positions, resolve_step
from taiga.entities.resources import Grass
from taiga.entities.units import AgentInfo, LivingUnitInfo
from taiga.geo import Direction, Position
from taiga.visibility import Visibility

logger = logging.getLogger(__name__)

InfoType = TypeVar("InfoType", bound=AgentInfo)

# Something a creature can eat: grass from a cell or another creature.
Food = Union[Grass, LivingUnitInfo]


class AI(ABC, Generic[InfoType]):
    """Decision capabilities of one kind of creature."""

    @abstractmethod
    def evaluate(self, me: InfoType, visibility: Visibility) -> Mapping[Position, int]:
        """Score every perceived position; higher is more desirable."""

    @abstractmethod
    def move(self, me: InfoType, visibility: Visibility) -> Optional[Direction]:
        """Choose one step, or None when there is nothing worth moving for."""

    @abstractmethod
    def feed(self, me: InfoType, visibility: Visibility) -> Optional[Food]:
        """Choose what to eat this tick, or None."""

    def aim(self, me: InfoType, visibility: Visibility) -> list[Position]:
        """Targets for ranged interaction; grid-melee creatures have none."""
        return []


class GridAI(AI[InfoType]):
    """Engine that moves toward the best cell of its influence map.

    Args:
        rng: Random source for direction tie-breaking
        validate: Reject malformed snapshots before evaluating them
    """

    builder: InfluenceMapBuilder

    def __init__(self, rng: Optional[random.Random] = None, validate: bool = True) -> None:
        self.rng = rng or random.Random()
        self.validate = validate

    def check(self, visibility: Visibility) -> Visibility:
        """Validate the snapshot unless validation is switched off."""
        if self.validate:
            visibility.validate()
        return visibility

    def evaluate(self, me: InfoType, visibility: Visibility) -> Mapping[Position, int]:
        self.check(visibility)
        return self.builder.build(me, visibility)

    def best_positions(self, me: InfoType, visibility: Visibility) -> list[Position]:
        return best_positions(self.evaluate(me, visibility))

    def move(self, me: InfoType, visibility: Visibility) -> Optional[Direction]:
        targets = self.best_positions(me, visibility)
        direction = resolve_step(
            me.position, targets, visibility.width, visibility.height, self.rng
        )
        logger.debug(
            "%s at %s: target=%s direction=%s",
            me.unit_id,
            me.position,
            targets[0] if targets else None,
            direction.name if direction else None,
        )
        return direction

    def wants_to_eat(self, me: InfoType) -> bool:
        return me.hungry
