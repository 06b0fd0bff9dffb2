"""Species, sex and life stage of creatures, and how species relate."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Species(Enum):
    """Species living in the forest."""

    WOLF = "wolf"
    RABBIT = "rabbit"


class Sex(Enum):
    MALE = "male"
    FEMALE = "female"


class LifeStage(Enum):
    """Life stages relevant to decisions."""

    JUVENILE = "juvenile"
    ADULT = "adult"

    @classmethod
    def of(cls, adult: bool) -> "LifeStage":
        return cls.ADULT if adult else cls.JUVENILE


class Relation(Enum):
    """What a species is to an observing species."""

    KIN = "kin"
    PREY = "prey"
    PREDATOR = "predator"
    UNRELATED = "unrelated"


# Who eats whom.
FOOD_CHAIN: Mapping[Species, frozenset] = MappingProxyType(
    {
        Species.WOLF: frozenset({Species.RABBIT}),
        Species.RABBIT: frozenset(),
    }
)


def relation_between(observer: Species, other: Species) -> Relation:
    """Describe ``other`` from the point of view of ``observer``."""
    if observer is other:
        return Relation.KIN
    if other in FOOD_CHAIN.get(observer, frozenset()):
        return Relation.PREY
    if observer in FOOD_CHAIN.get(other, frozenset()):
        return Relation.PREDATOR
    return Relation.UNRELATED
