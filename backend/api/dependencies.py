"""Shared dependencies for API routes."""

import random
from functools import lru_cache

from config import settings
from services.demo_data import seed_stores
from services.matching_engine import MatchingEngine
from services.stores import InMemoryOpportunityStore, InMemoryTeamStore


@lru_cache(maxsize=1)
def get_engine() -> MatchingEngine:
    teams = InMemoryTeamStore()
    opportunities = InMemoryOpportunityStore()
    if settings.seed_demo_data:
        seed_stores(teams, opportunities)

    rng = None
    if settings.market_intelligence_seed is not None:
        rng = random.Random(settings.market_intelligence_seed)

    return MatchingEngine(rng=rng, teams=teams, opportunities=opportunities)


def reset_engine() -> None:
    """Drop the cached engine and its stores. Useful for testing."""
    get_engine.cache_clear()
