"""Grid geometry: positions and step directions.

Positions are immutable integer grid coordinates compared by value. The grid
is 8-connected, so the distance between two positions is the number of king
moves needed to get from one to the other (Chebyshev distance).
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class Direction(Enum):
    """The eight single-cell steps on the grid."""

    N = (0, -1)
    NE = (1, -1)
    E = (1, 0)
    SE = (1, 1)
    S = (0, 1)
    SW = (-1, 1)
    W = (-1, 0)
    NW = (-1, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def shuffled_values(cls, rng: Optional[random.Random] = None) -> list[Direction]:
        """Return every direction in a fresh random order.

        Args:
            rng: Random source; the module-level generator is used when omitted.
        """
        directions = list(cls)
        (rng or random).shuffle(directions)
        return directions


@dataclass(frozen=True, order=True)
class Position:
    """An integer grid coordinate."""

    x: int
    y: int

    def distance(self, other: Position) -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def by(self, direction: Direction) -> Position:
        """The neighbouring position one step in ``direction``."""
        return Position(self.x + direction.dx, self.y + direction.dy)

    def adjustable_in(self, min_x: int, min_y: int, max_x: int, max_y: int) -> bool:
        """Check whether this position falls outside ``[min, max)`` on either axis.

        A position that is adjustable would have to be moved to fit into the
        rectangle, i.e. stepping onto it leaves the world.
        """
        return not (min_x <= self.x < max_x and min_y <= self.y < max_y)

    def in_direction_to(
        self, target: Position, directions: Iterable[Direction]
    ) -> Optional[Direction]:
        """Pick the direction whose step lands closest to ``target``.

        Candidates are scanned in the given order and the first closest one
        wins, so shuffling the candidates randomises ties.
        """
        best: Optional[Direction] = None
        best_distance = 0
        for direction in directions:
            step_distance = self.by(direction).distance(target)
            if best is None or step_distance < best_distance:
                best = direction
                best_distance = step_distance
        return best

    def __repr__(self) -> str:
        return f"Position({self.x}, {self.y})"


__all__ = ["Direction", "Position"]
