"""Lightweight decision runtime configuration."""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_seed() -> Optional[int]:
    raw = os.getenv("TAIGA_SEED")
    return int(raw) if raw else None


@dataclass
class DecisionConfig:
    """Runtime toggles for decision engines.

    Attributes:
        seed: Seeds the tie-break RNG of each engine the decision service
            builds. ``TickDecider`` does not read it: every request carries
            its own engine, and that engine keeps the RNG it was built with.
        max_workers: Threads used to decide a tick; 1 decides serially.
        validate_snapshots: Reject malformed visibility snapshots before use.
    """

    seed: Optional[int] = field(default_factory=_env_seed)
    max_workers: int = 1
    validate_snapshots: bool = True
