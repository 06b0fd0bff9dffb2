"""Classification of perceived units into behavioural categories."""

from __future__ import annotations

from collections import defaultdict
from enum import Enum
from typing import Iterable

from taiga.entities.base import Relation, relation_between
from taiga.entities.units import AgentInfo, LivingUnitInfo
from taiga.geo import Position


class Attitude(Enum):
    """What a perceived unit represents to the observer."""

    THREAT = "threat"
    RIVAL = "rival"
    MATE = "mate"
    FOOD_SOURCE = "food_source"


# Categories whose value spreads over the whole visible area.
PROLIFERATING = frozenset({Attitude.THREAT, Attitude.RIVAL})

AttitudeMap = dict[Position, frozenset[Attitude]]


def good_partner(me: AgentInfo, candidate: LivingUnitInfo) -> bool:
    """Adult of the opposite sex, and neither of the two is pregnant."""
    return (
        candidate.adult
        and candidate.sex is not me.sex
        and not candidate.pregnant
        and not me.pregnant
    )


def classify(me: AgentInfo, unit: LivingUnitInfo, *, eats_prey: bool) -> frozenset[Attitude]:
    """Return the attitudes ``unit`` represents to ``me``.

    Args:
        me: The observing agent
        unit: A perceived living unit
        eats_prey: Whether the observer hunts the species it preys on

    Returns:
        Possibly empty set of attitudes.
    """
    match relation_between(me.species, unit.species):
        case Relation.PREDATOR:
            return frozenset({Attitude.THREAT})
        case Relation.KIN:
            return frozenset({Attitude.MATE if good_partner(me, unit) else Attitude.RIVAL})
        case Relation.PREY if eats_prey:
            return frozenset({Attitude.FOOD_SOURCE})
        case _:
            return frozenset()


def classify_positions(
    me: AgentInfo, units: Iterable[LivingUnitInfo], *, eats_prey: bool
) -> AttitudeMap:
    """Group units by position and union their attitudes.

    Positions whose units are all unclassified are left out, and so is the
    observer if the snapshot happens to include it.
    """
    grouped: dict[Position, set[Attitude]] = defaultdict(set)
    for unit in units:
        if unit.unit_id == me.unit_id:
            continue
        attitudes = classify(me, unit, eats_prey=eats_prey)
        if attitudes:
            grouped[unit.position] |= attitudes
    return {position: frozenset(attitudes) for position, attitudes in grouped.items()}
