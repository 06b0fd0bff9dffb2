"""Terrain resources: grass and the cells holding it."""

from __future__ import annotations

from dataclasses import dataclass, field

from taiga.geo import Position


@dataclass(frozen=True)
class Grass:
    """Food growing on a cell.

    Attributes:
        food_current: Amount currently grown
        food_value: Amount needed before the grass is worth eating
    """

    food_current: int = 0
    food_value: int = 1

    @property
    def available(self) -> bool:
        return self.food_current >= self.food_value


@dataclass(frozen=True)
class Cell:
    """A visible grid cell with its grass and scent level."""

    position: Position
    grass: Grass = field(default_factory=Grass)
    scent: int = 0
