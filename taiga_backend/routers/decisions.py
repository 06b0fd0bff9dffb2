"""Decision API endpoints.

This router exposes the three per-tick operations of a decision engine for a
species named in the path:
- evaluate: the full value map (for inspection and debugging)
- move: the chosen step direction
- feed: what the agent eats this tick
"""

import logging
from typing import Callable

from fastapi import APIRouter, HTTPException

from taiga.ai import AI, best_positions
from taiga.entities import Grass, Species
from taiga.exceptions import InvalidVisibilityError, UnknownSpeciesError
from taiga.visibility import Visibility
from taiga_backend.models import (
    CellValue,
    EvaluateResponse,
    FeedResponse,
    GrassData,
    MoveResponse,
    PositionData,
    SnapshotRequest,
)

logger = logging.getLogger(__name__)


def create_decisions_router(engine_for: Callable[[Species], AI]) -> APIRouter:
    """Create the decisions API router.

    Args:
        engine_for: Returns the decision engine of a species

    Returns:
        FastAPI router with decision endpoints
    """
    router = APIRouter(prefix="/api/decisions", tags=["decisions"])

    def _resolve(species: str) -> tuple[Species, AI]:
        try:
            resolved = Species(species)
            return resolved, engine_for(resolved)
        except (ValueError, UnknownSpeciesError):
            raise HTTPException(status_code=404, detail=f"Unknown species: {species}") from None

    def _validated(request: SnapshotRequest) -> Visibility:
        visibility = request.to_visibility()
        try:
            return visibility.validate()
        except InvalidVisibilityError as e:
            logger.warning("Rejected snapshot for %s: %s", request.agent.id, e)
            raise HTTPException(status_code=422, detail=str(e)) from None

    @router.post("/{species}/evaluate", response_model=EvaluateResponse)
    async def evaluate(species: str, request: SnapshotRequest) -> EvaluateResponse:
        """Return the value of every perceived position and the best ones."""
        resolved, engine = _resolve(species)
        visibility = _validated(request)
        values = engine.evaluate(request.agent.to_agent(resolved), visibility)
        return EvaluateResponse(
            values=[
                CellValue(x=position.x, y=position.y, value=value)
                for position, value in sorted(values.items())
            ],
            best=[PositionData(x=p.x, y=p.y) for p in best_positions(values)],
        )

    @router.post("/{species}/move", response_model=MoveResponse)
    async def move(species: str, request: SnapshotRequest) -> MoveResponse:
        """Return the step the agent takes, if any."""
        resolved, engine = _resolve(species)
        visibility = _validated(request)
        agent = request.agent.to_agent(resolved)
        direction = engine.move(agent, visibility)
        if direction is None:
            return MoveResponse()
        target = agent.position.by(direction)
        return MoveResponse(direction=direction.name, target=PositionData(x=target.x, y=target.y))

    @router.post("/{species}/feed", response_model=FeedResponse)
    async def feed(species: str, request: SnapshotRequest) -> FeedResponse:
        """Return what the agent eats, if anything."""
        resolved, engine = _resolve(species)
        visibility = _validated(request)
        food = engine.feed(request.agent.to_agent(resolved), visibility)
        if food is None:
            return FeedResponse(eats=False)
        if isinstance(food, Grass):
            return FeedResponse(
                eats=True,
                grass=GrassData(food_current=food.food_current, food_value=food.food_value),
            )
        return FeedResponse(eats=True, unit_id=food.unit_id)

    return router
