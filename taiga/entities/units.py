"""Perceived living units and the observing agent's own view of itself."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from taiga.config.values import HUNGER_THRESHOLD
from taiga.entities.base import LifeStage, Sex, Species
from taiga.geo import Position


@dataclass(frozen=True)
class Health:
    """Current and maximum health of a creature."""

    current: float
    maximum: float

    def part(self) -> float:
        """Health as a fraction of the maximum, clamped to 0.0-1.0."""
        if self.maximum <= 0:
            return 0.0
        return min(1.0, max(0.0, self.current / self.maximum))

    @classmethod
    def full(cls, maximum: float) -> Health:
        return cls(maximum, maximum)


@dataclass(frozen=True)
class Pregnancy:
    """Ongoing pregnancy: how far along it is and who the father is."""

    progress: float = 0.0
    father_id: Optional[str] = None


@dataclass(frozen=True)
class LivingUnitInfo:
    """A creature as seen by another creature.

    Attributes:
        unit_id: Stable identifier of the creature
        species: Species of the creature
        position: Cell the creature occupies
        sex: Biological sex
        adult: Whether the creature is grown up
        health: Current health, when the observer can judge it
        pregnancy: Pregnancy state, None when not pregnant
    """

    unit_id: str
    species: Species
    position: Position
    sex: Sex = Sex.MALE
    adult: bool = True
    health: Optional[Health] = None
    pregnancy: Optional[Pregnancy] = None

    @property
    def life_stage(self) -> LifeStage:
        return LifeStage.of(self.adult)

    @property
    def pregnant(self) -> bool:
        return self.pregnancy is not None


@dataclass(frozen=True)
class AgentInfo(LivingUnitInfo):
    """The deciding creature's view of its own state."""

    health: Health = field(default_factory=lambda: Health(1.0, 1.0))

    @property
    def hungry(self) -> bool:
        return self.health.part() < HUNGER_THRESHOLD

    @property
    def wants_to_reproduce(self) -> bool:
        return self.adult and not self.pregnant

    def as_unit(self) -> LivingUnitInfo:
        """How other creatures perceive this agent."""
        return LivingUnitInfo(
            unit_id=self.unit_id,
            species=self.species,
            position=self.position,
            sex=self.sex,
            adult=self.adult,
            health=self.health,
            pregnancy=self.pregnancy,
        )
