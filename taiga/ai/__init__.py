"""Decision engines and their building blocks."""

from taiga.ai.attitudes import PROLIFERATING, Attitude, classify, classify_positions
from taiga.ai.base import AI, Food, GridAI
from taiga.ai.influence import InfluenceMapBuilder
from taiga.ai.predator import RegularWolfAI
from taiga.ai.prey import RegularRabbitAI
from taiga.ai.registry import ai_for
from taiga.ai.remote import RemoteAI
from taiga.ai.selection import best_positions, resolve_step
from taiga.ai.value_profile import RABBIT_PROFILE, WOLF_PROFILE, ValueProfile

__all__ = [
    "AI",
    "Attitude",
    "Food",
    "GridAI",
    "InfluenceMapBuilder",
    "PROLIFERATING",
    "RABBIT_PROFILE",
    "RegularRabbitAI",
    "RegularWolfAI",
    "RemoteAI",
    "ValueProfile",
    "WOLF_PROFILE",
    "ai_for",
    "best_positions",
    "classify",
    "classify_positions",
    "resolve_step",
]
