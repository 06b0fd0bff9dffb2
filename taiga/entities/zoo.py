"""Factory building creatures from per-species templates."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Optional

from taiga.config.values import RABBIT_MAX_HEALTH, WOLF_MAX_HEALTH
from taiga.entities.base import Sex, Species
from taiga.entities.units import AgentInfo, Health, LivingUnitInfo, Pregnancy
from taiga.geo import Position


@dataclass(frozen=True)
class CreatureTemplate:
    """Defaults shared by every creature of a species."""

    species: Species
    max_health: int


WOLF_TEMPLATE = CreatureTemplate(Species.WOLF, WOLF_MAX_HEALTH)
RABBIT_TEMPLATE = CreatureTemplate(Species.RABBIT, RABBIT_MAX_HEALTH)


class ZooFactory:
    """Creates agents and perceived units with sequential ids."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)

    def _next_id(self, species: Species) -> str:
        return f"{species.value}-{next(self._ids)}"

    def create(
        self,
        template: CreatureTemplate,
        position: Position,
        *,
        sex: Sex = Sex.MALE,
        adult: bool = True,
        health_part: float = 1.0,
        pregnancy: Optional[Pregnancy] = None,
        unit_id: Optional[str] = None,
    ) -> AgentInfo:
        """Create a creature's self view from a template.

        Args:
            template: Species defaults
            position: Cell the creature occupies
            sex: Biological sex
            adult: Whether the creature is grown up
            health_part: Starting health as a fraction of the template maximum
            pregnancy: Pregnancy state, None when not pregnant
            unit_id: Explicit id; a sequential one is generated when omitted
        """
        return AgentInfo(
            unit_id=unit_id or self._next_id(template.species),
            species=template.species,
            position=position,
            sex=sex,
            adult=adult,
            health=Health(template.max_health * health_part, template.max_health),
            pregnancy=pregnancy,
        )

    def create_wolf(self, position: Position, **kwargs) -> AgentInfo:
        return self.create(WOLF_TEMPLATE, position, **kwargs)

    def create_rabbit(self, position: Position, **kwargs) -> AgentInfo:
        return self.create(RABBIT_TEMPLATE, position, **kwargs)

    def wolf_unit(self, position: Position, **kwargs) -> LivingUnitInfo:
        """A wolf as another creature perceives it."""
        return self.create_wolf(position, **kwargs).as_unit()

    def rabbit_unit(self, position: Position, **kwargs) -> LivingUnitInfo:
        """A rabbit as another creature perceives it."""
        return self.create_rabbit(position, **kwargs).as_unit()
