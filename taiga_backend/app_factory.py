"""Application factory and context for the decision service.

The factory keeps engines and configuration in an ``AppContext`` attached to
``app.state`` instead of module-level globals, so each test can build a fresh
app with its own seed.

Usage:
------
    # For production (uses default settings from environment)
    app = create_app()

    # For testing (deterministic tie-breaking)
    app = create_app(config=DecisionConfig(seed=42))
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Optional

from fastapi import FastAPI

import taiga
from taiga.ai import AI, ai_for
from taiga.config.decision_config import DecisionConfig
from taiga.entities import Species
from taiga_backend.logging_config import configure_logging
from taiga_backend.models import HealthResponse
from taiga_backend.routers.decisions import create_decisions_router


@dataclass
class AppContext:
    """Runtime context holding the service's engines."""

    config: DecisionConfig = field(default_factory=DecisionConfig)
    engines: Dict[Species, AI] = field(default_factory=dict)
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("taiga_backend"))

    def engine_for(self, species: Species) -> AI:
        """Engine of a species, created on first use and reused afterwards."""
        engine = self.engines.get(species)
        if engine is None:
            rng = random.Random(self.config.seed)
            engine = ai_for(species, rng=rng, validate=self.config.validate_snapshots)
            self.engines[species] = engine
        return engine


def create_app(
    *,
    config: Optional[DecisionConfig] = None,
    context: Optional[AppContext] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Decision configuration override
        context: Pre-configured AppContext (for testing). If None, creates a new one.

    Returns:
        Configured FastAPI application with context attached as app.state.context
    """
    logger = configure_logging()

    if context is None:
        context = AppContext()
    if config is not None:
        context.config = config
    context.logger = logger

    app = FastAPI(title="Taiga Decision Service", version=taiga.__version__)
    app.state.context = context
    app.include_router(create_decisions_router(context.engine_for))

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=taiga.__version__)

    logger.info("Decision service ready (seed=%s)", context.config.seed)
    return app
