"""Life-stage value tables mapping attitudes to scores.

Each entry is a pure function of the observer's own state, so entries such as
"food is only worth something while hungry" are evaluated lazily at decision
time. Tables are built once at import and exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from taiga.ai.attitudes import Attitude
from taiga.config.values import (
    RABBIT_FOOD_VALUE,
    RABBIT_MATE_VALUE,
    RABBIT_RIVAL_VALUE,
    RABBIT_THREAT_VALUE,
    WOLF_FOOD_VALUE,
    WOLF_MATE_VALUE,
    WOLF_RIVAL_VALUE,
)
from taiga.entities.base import LifeStage
from taiga.entities.units import AgentInfo
from taiga.exceptions import ConfigurationError

ValueFunction = Callable[[AgentInfo], int]
ValueTable = Mapping[Attitude, ValueFunction]


def constant(value: int) -> ValueFunction:
    return lambda me: value


def when_hungry(value: int) -> ValueFunction:
    return lambda me: value if me.hungry else 0


def when_wants_to_reproduce(value: int) -> ValueFunction:
    return lambda me: value if me.wants_to_reproduce else 0


@dataclass(frozen=True)
class ValueProfile:
    """Adult and juvenile value tables of one species."""

    name: str
    adult: ValueTable
    juvenile: ValueTable

    def for_stage(self, stage: LifeStage) -> ValueTable:
        return self.adult if stage is LifeStage.ADULT else self.juvenile

    def value(
        self, attitude: Attitude, me: AgentInfo, *, stage: LifeStage | None = None
    ) -> int:
        """Score of ``attitude`` for ``me``.

        Args:
            attitude: Category to score
            me: Observer whose state dynamic entries read
            stage: Table to use; defaults to the observer's own life stage

        Raises:
            ConfigurationError: If the table has no entry for ``attitude``.
        """
        table = self.for_stage(me.life_stage if stage is None else stage)
        try:
            value_fn = table[attitude]
        except KeyError:
            raise ConfigurationError(
                f"{self.name} profile has no value for {attitude.name}"
            ) from None
        return value_fn(me)

    def total(self, attitudes: frozenset[Attitude], me: AgentInfo) -> int:
        """Sum of the life-stage values of every attitude present."""
        return sum(self.value(attitude, me) for attitude in attitudes)


WOLF_PROFILE = ValueProfile(
    name="wolf",
    adult=MappingProxyType(
        {
            Attitude.RIVAL: constant(WOLF_RIVAL_VALUE),
            Attitude.MATE: when_wants_to_reproduce(WOLF_MATE_VALUE),
            Attitude.FOOD_SOURCE: when_hungry(WOLF_FOOD_VALUE),
        }
    ),
    juvenile=MappingProxyType(
        {
            Attitude.RIVAL: constant(0),
            Attitude.MATE: constant(0),
            Attitude.FOOD_SOURCE: when_hungry(WOLF_FOOD_VALUE),
        }
    ),
)

RABBIT_PROFILE = ValueProfile(
    name="rabbit",
    adult=MappingProxyType(
        {
            Attitude.THREAT: constant(RABBIT_THREAT_VALUE),
            Attitude.RIVAL: constant(RABBIT_RIVAL_VALUE),
            Attitude.MATE: constant(RABBIT_MATE_VALUE),
            Attitude.FOOD_SOURCE: when_hungry(RABBIT_FOOD_VALUE),
        }
    ),
    juvenile=MappingProxyType(
        {
            Attitude.THREAT: constant(RABBIT_THREAT_VALUE),
            Attitude.RIVAL: constant(0),
            Attitude.MATE: constant(0),
            Attitude.FOOD_SOURCE: when_hungry(RABBIT_FOOD_VALUE),
        }
    ),
)
