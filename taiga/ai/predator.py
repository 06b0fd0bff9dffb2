"""Decision engine for wolves."""

from __future__ import annotations

import logging
from typing import Optional

from taiga.ai.attitudes import Attitude, classify
from taiga.ai.base import GridAI
from taiga.ai.influence import InfluenceMapBuilder, scent_score
from taiga.ai.value_profile import WOLF_PROFILE
from taiga.entities.units import AgentInfo, LivingUnitInfo
from taiga.visibility import Visibility

logger = logging.getLogger(__name__)


class RegularWolfAI(GridAI[AgentInfo]):
    """Wolves hunt rabbits, court mates, avoid rivals and follow scent.

    Rivals repel over the whole visible area; food and mates only attract at
    the cell they occupy.
    """

    builder = InfluenceMapBuilder(
        profile=WOLF_PROFILE,
        proliferating=frozenset({Attitude.RIVAL}),
        terrain=scent_score,
        eats_prey=True,
    )

    def feed(self, me: AgentInfo, visibility: Visibility) -> Optional[LivingUnitInfo]:
        """Eat any visible rabbit while hungry.

        The prey does not have to be adjacent: whatever is visible can be
        caught this tick. Prey outside the world is never chosen.
        """
        self.check(visibility)
        if not self.wants_to_eat(me):
            return None
        for unit in visibility.units():
            if not visibility.contains(unit.position):
                continue
            if Attitude.FOOD_SOURCE in classify(me, unit, eats_prey=True):
                logger.debug("%s feeds on %s", me.unit_id, unit.unit_id)
                return unit
        return None
