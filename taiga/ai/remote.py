"""Placeholder engine for creatures whose decisions are made elsewhere."""

from __future__ import annotations

from typing import Mapping, Optional

from taiga.ai.base import AI, Food
from taiga.entities.units import AgentInfo
from taiga.geo import Direction, Position
from taiga.visibility import Visibility


class RemoteAI(AI[AgentInfo]):
    """Never moves, never eats, never aims.

    Used for creatures driven by a remote client, or kinds whose behaviour
    has not been modelled yet.
    """

    def evaluate(self, me: AgentInfo, visibility: Visibility) -> Mapping[Position, int]:
        return {}

    def move(self, me: AgentInfo, visibility: Visibility) -> Optional[Direction]:
        return None

    def feed(self, me: AgentInfo, visibility: Visibility) -> Optional[Food]:
        return None
