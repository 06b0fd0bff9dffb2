"""Best-cell selection and movement resolution."""

from __future__ import annotations

import logging
import random
from typing import Mapping, Optional, Sequence

from taiga.geo import Direction, Position

logger = logging.getLogger(__name__)


def best_positions(value_map: Mapping[Position, int]) -> list[Position]:
    """All positions holding the maximum value.

    Ties are returned in lexicographic ``(x, y)`` order so the first entry is
    deterministic for a given map.
    """
    if not value_map:
        return []
    top = max(value_map.values())
    return sorted(position for position, value in value_map.items() if value == top)


def available_directions(
    current: Position, width: int, height: int, rng: Optional[random.Random] = None
) -> list[Direction]:
    """Shuffled directions whose step keeps the creature inside the world."""
    return [
        direction
        for direction in Direction.shuffled_values(rng)
        if not current.by(direction).adjustable_in(0, 0, width, height)
    ]


def resolve_step(
    current: Position,
    targets: Sequence[Position],
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
) -> Optional[Direction]:
    """Turn the best target into one step from ``current``.

    Args:
        current: Cell the creature stands on
        targets: Best positions, first one wins
        width: World width
        height: World height
        rng: Random source for tie-breaking between equally good directions

    Returns:
        The step direction, or None when there is no target, the creature
        already stands on it, or every step would leave the world.
    """
    if not targets:
        return None
    target = targets[0]
    if target == current:
        logger.debug("Already at best position %s", target)
        return None
    return current.in_direction_to(target, available_directions(current, width, height, rng))
