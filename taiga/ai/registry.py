"""Lookup of decision engines by species."""

from __future__ import annotations

import random
from typing import Callable, Optional

from taiga.ai.base import AI
from taiga.ai.predator import RegularWolfAI
from taiga.ai.prey import RegularRabbitAI
from taiga.ai.remote import RemoteAI
from taiga.entities.base import Species
from taiga.exceptions import UnknownSpeciesError

EngineFactory = Callable[..., AI]

ENGINES: dict[Species, EngineFactory] = {
    Species.WOLF: RegularWolfAI,
    Species.RABBIT: RegularRabbitAI,
}


def ai_for(
    species: Species | str,
    *,
    remote: bool = False,
    rng: Optional[random.Random] = None,
    validate: bool = True,
) -> AI:
    """Create the decision engine for a species.

    Args:
        species: Species enum member or its value (e.g. ``"wolf"``)
        remote: Return the no-op placeholder used for remotely driven creatures
        rng: Random source for direction tie-breaking
        validate: Reject malformed snapshots before evaluating them

    Raises:
        UnknownSpeciesError: If no engine exists for the species.
    """
    try:
        resolved = species if isinstance(species, Species) else Species(species)
        factory = ENGINES[resolved]
    except (ValueError, KeyError):
        raise UnknownSpeciesError(f"No decision engine for species {species!r}") from None
    if remote:
        return RemoteAI()
    return factory(rng=rng, validate=validate)
