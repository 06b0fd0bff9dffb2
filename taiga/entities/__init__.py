"""Entity package exposing creature and terrain views."""

from taiga.entities.base import LifeStage, Relation, Sex, Species, relation_between
from taiga.entities.resources import Cell, Grass
from taiga.entities.units import AgentInfo, Health, LivingUnitInfo, Pregnancy
from taiga.entities.zoo import RABBIT_TEMPLATE, WOLF_TEMPLATE, CreatureTemplate, ZooFactory

__all__ = [
    "AgentInfo",
    "Cell",
    "CreatureTemplate",
    "Grass",
    "Health",
    "LifeStage",
    "LivingUnitInfo",
    "Pregnancy",
    "RABBIT_TEMPLATE",
    "Relation",
    "Sex",
    "Species",
    "WOLF_TEMPLATE",
    "ZooFactory",
    "relation_between",
]
