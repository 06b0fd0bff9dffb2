"""Influence map: aggregated desirability of every perceived position.

Three sources are folded into one accumulator:

1. Direct scores at cells occupied by classified units.
2. Proliferated scores: selected categories spread from each epicenter over
   every other visible cell as ``base_value + distance``, so a negative base
   fades with range.
3. Terrain scores from the cells themselves (grass or scent).

The accumulator is frozen into a read-only mapping before it is handed to the
best-cell selector. Positions outside the world are left out of the map.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from taiga.ai.attitudes import Attitude, AttitudeMap, classify_positions
from taiga.ai.value_profile import ValueProfile
from taiga.config.values import SCENT_DIVISOR
from taiga.entities.base import LifeStage
from taiga.entities.resources import Cell
from taiga.entities.units import AgentInfo
from taiga.geo import Position
from taiga.visibility import Visibility

logger = logging.getLogger(__name__)

ValueMap = Mapping[Position, int]
TerrainScore = Callable[[AgentInfo, Cell, ValueProfile], int]


def grass_score(me: AgentInfo, cell: Cell, profile: ValueProfile) -> int:
    """Grass worth eating scores like any other food source."""
    if not cell.grass.available:
        return 0
    return profile.value(Attitude.FOOD_SOURCE, me)


def scent_score(me: AgentInfo, cell: Cell, profile: ValueProfile) -> int:
    """Marked ground attracts at half the scent strength."""
    return cell.scent // SCENT_DIVISOR


@dataclass(frozen=True)
class InfluenceMapBuilder:
    """Builds value maps for one kind of creature.

    Attributes:
        profile: Value tables of the observing species
        proliferating: Categories spread over the visible area
        terrain: Per-cell terrain score
        eats_prey: Whether prey units are classified as food sources
    """

    profile: ValueProfile
    proliferating: frozenset[Attitude]
    terrain: TerrainScore
    eats_prey: bool = False

    def build(self, me: AgentInfo, visibility: Visibility) -> ValueMap:
        """Aggregate every contribution source into one value map."""
        attitudes = {
            position: present
            for position, present in classify_positions(
                me, visibility.units(), eats_prey=self.eats_prey
            ).items()
            if visibility.contains(position)
        }
        totals: Counter[Position] = Counter()

        # Every visible cell is present even when nothing contributes to it.
        for cell in visibility.cells():
            if not visibility.contains(cell.position):
                continue
            totals[cell.position] += self.terrain(me, cell, self.profile)

        for position, present in attitudes.items():
            totals[position] += self.profile.total(present, me)

        for attitude in sorted(self.proliferating, key=lambda a: a.value):
            self._proliferate(me, visibility, attitude, attitudes, totals)

        logger.debug(
            "Influence map for %s: %d positions, %d classified",
            me.unit_id,
            len(totals),
            len(attitudes),
        )
        return MappingProxyType(dict(totals))

    def epicenter_value(self, attitude: Attitude, me: AgentInfo) -> int:
        """Base strength of a proliferating category.

        Always read from the adult table so juveniles still keep their
        distance from rivals they score neutrally up close.
        """
        return self.profile.value(attitude, me, stage=LifeStage.ADULT)

    def _proliferate(
        self,
        me: AgentInfo,
        visibility: Visibility,
        attitude: Attitude,
        attitudes: AttitudeMap,
        totals: Counter,
    ) -> None:
        epicenters = [position for position, present in attitudes.items() if attitude in present]
        if not epicenters:
            return
        base_value = self.epicenter_value(attitude, me)
        for epicenter in epicenters:
            for position in visibility.positions():
                if not visibility.contains(position):
                    continue
                contribution = proliferated_contribution(base_value, epicenter, position)
                if contribution is not None:
                    totals[position] += contribution


def proliferated_contribution(
    base_value: int, epicenter: Position, position: Position
) -> Optional[int]:
    """Contribution of one epicenter at ``position``.

    None at the epicenter itself, which already carries its direct score.
    """
    if position == epicenter:
        return None
    return base_value + epicenter.distance(position)
