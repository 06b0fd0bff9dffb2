"""Decision engine for rabbits."""

from __future__ import annotations

import logging
from typing import Optional

from taiga.ai.attitudes import PROLIFERATING
from taiga.ai.base import GridAI
from taiga.ai.influence import InfluenceMapBuilder, grass_score
from taiga.ai.value_profile import RABBIT_PROFILE
from taiga.entities.resources import Grass
from taiga.entities.units import AgentInfo
from taiga.visibility import Visibility

logger = logging.getLogger(__name__)


class RegularRabbitAI(GridAI[AgentInfo]):
    """Rabbits flee wolves, keep clear of rivals, court mates and graze."""

    builder = InfluenceMapBuilder(
        profile=RABBIT_PROFILE,
        proliferating=PROLIFERATING,
        terrain=grass_score,
    )

    def feed(self, me: AgentInfo, visibility: Visibility) -> Optional[Grass]:
        """Graze on the current cell when hungry and the grass has grown."""
        self.check(visibility)
        if not self.wants_to_eat(me):
            return None
        cell = visibility.cell_at(me.position)
        if cell is None or not cell.grass.available:
            return None
        logger.debug("%s grazes at %s", me.unit_id, me.position)
        return cell.grass
