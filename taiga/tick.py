"""Deciding every agent of one simulation tick.

Each agent decides against a snapshot frozen at tick start, and nothing is
applied here: the stepping loop applies the returned decisions only after the
whole tick has decided, so no agent sees a world already changed by another
agent's move. Since every decision is pure given its snapshot, the batch can be
spread over worker threads without locking.

Tie-breaking randomness belongs to the engines: build them with seeded
``random.Random`` instances (see ``ai_for``) for reproducible ticks.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Sequence

from taiga.ai.base import AI, Food
from taiga.config.decision_config import DecisionConfig
from taiga.entities.units import AgentInfo
from taiga.geo import Direction
from taiga.visibility import Visibility

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecisionRequest:
    """One agent waiting for its decision."""

    engine: AI
    agent: AgentInfo
    visibility: Visibility


@dataclass(frozen=True)
class Decision:
    """Move and feed decision of one agent for one tick.

    Attributes:
        unit_id: Agent that decided
        direction: Step to take, None to stay
        food: What to eat, None to skip eating
    """

    unit_id: str
    direction: Optional[Direction]
    food: Optional[Food]


def decide(request: DecisionRequest) -> Decision:
    """Compute the move and feed decision of a single agent."""
    engine, agent, visibility = request.engine, request.agent, request.visibility
    return Decision(
        unit_id=agent.unit_id,
        direction=engine.move(agent, visibility),
        food=engine.feed(agent, visibility),
    )


class TickDecider:
    """Decides a batch of agents, serially or on a thread pool."""

    def __init__(self, config: Optional[DecisionConfig] = None) -> None:
        self.config = config or DecisionConfig()

    def decide_all(self, requests: Sequence[DecisionRequest]) -> list[Decision]:
        """Decide every request and return decisions in request order.

        Errors raised by an engine propagate to the caller; no partial batch
        is returned.
        """
        if not requests:
            return []
        workers = max(1, self.config.max_workers)
        if workers == 1 or len(requests) == 1:
            decisions = [decide(request) for request in requests]
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                decisions = list(executor.map(decide, requests))
        logger.debug(
            "Tick decided for %d agents (%d moving, %d feeding)",
            len(decisions),
            sum(1 for d in decisions if d.direction is not None),
            sum(1 for d in decisions if d.food is not None),
        )
        return decisions
