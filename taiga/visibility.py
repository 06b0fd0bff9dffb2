"""Read-only snapshot of what a creature perceives during one decision.

A snapshot is built once per agent per tick and must not change while the
agent decides: the engines enumerate its cells several times and expect the
same view each time. Cells and units are stored as tuples for that reason.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from taiga.entities.resources import Cell
from taiga.entities.units import LivingUnitInfo
from taiga.exceptions import InvalidVisibilityError
from taiga.geo import Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Visibility:
    """Cells and living units visible to one creature.

    Attributes:
        visible_cells: Visible cells (terrain state)
        visible_units: Visible living units, excluding the observer
        width: World width, for boundary checks
        height: World height, for boundary checks
    """

    visible_cells: tuple[Cell, ...] = field(default_factory=tuple)
    visible_units: tuple[LivingUnitInfo, ...] = field(default_factory=tuple)
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        # Accept any iterable but keep an immutable copy.
        object.__setattr__(self, "visible_cells", tuple(self.visible_cells))
        object.__setattr__(self, "visible_units", tuple(self.visible_units))

    @classmethod
    def of(
        cls,
        cells: Iterable[Cell],
        units: Iterable[LivingUnitInfo],
        width: int,
        height: int,
    ) -> Visibility:
        return cls(tuple(cells), tuple(units), width, height)

    @classmethod
    def empty(cls, width: int, height: int) -> Visibility:
        return cls((), (), width, height)

    def cells(self) -> Iterator[Cell]:
        return iter(self.visible_cells)

    def units(self) -> Iterator[LivingUnitInfo]:
        return iter(self.visible_units)

    def positions(self) -> list[Position]:
        """Positions of all visible cells in snapshot order."""
        return [cell.position for cell in self.visible_cells]

    def cell_at(self, position: Position) -> Optional[Cell]:
        for cell in self.visible_cells:
            if cell.position == position:
                return cell
        return None

    def contains(self, position: Position) -> bool:
        """Check whether a position lies inside the world extent."""
        return not position.adjustable_in(0, 0, self.width, self.height)

    def validate(self) -> Visibility:
        """Reject snapshots that break the boundary contract.

        Returns:
            The snapshot itself, so calls can be chained.

        Raises:
            InvalidVisibilityError: If the snapshot is not empty and its extent
                is not positive, or a cell or unit lies outside it.
        """
        if not self.visible_cells and not self.visible_units:
            return self
        if self.width <= 0 or self.height <= 0:
            raise InvalidVisibilityError(
                f"World extent must be positive, got {self.width}x{self.height}"
            )
        for cell in self.visible_cells:
            if not self.contains(cell.position):
                raise InvalidVisibilityError(
                    f"Cell {cell.position} lies outside {self.width}x{self.height} world"
                )
        for unit in self.visible_units:
            if not self.contains(unit.position):
                raise InvalidVisibilityError(
                    f"Unit {unit.unit_id} at {unit.position} lies outside "
                    f"{self.width}x{self.height} world"
                )
        logger.debug(
            "Visibility validated: %d cells, %d units",
            len(self.visible_cells),
            len(self.visible_units),
        )
        return self
