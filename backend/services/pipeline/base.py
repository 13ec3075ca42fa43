"""Abstract base class for the dimension scorers."""

from abc import ABC, abstractmethod

from models.schemas.dimension_score import DimensionScore
from models.schemas.opportunity import Opportunity
from models.schemas.team import Team
from services.pipeline.scoring_tables import DEFAULT_TABLES, ScoringTables


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive scores (round() is banker's)."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def banded_impact(score: float) -> str:
    if score > 80:
        return "high"
    if score > 60:
        return "medium"
    return "low"


class BaseScorer(ABC):
    """Base class for one compatibility dimension.

    Subclasses must implement:
        - factor: human-readable name shown in MatchResult.reasons
        - key: weight key in ScoringTables.weights
        - score(team, opportunity): return a DimensionScore in 0-100
    """

    factor: str = ""
    key: str = ""

    def __init__(self, tables: ScoringTables = DEFAULT_TABLES) -> None:
        self.tables = tables

    @abstractmethod
    def score(self, team: Team, opportunity: Opportunity) -> DimensionScore:
        """Score one team/opportunity pair on this dimension."""

    def _result(self, score: int, description: str, impact: str | None = None) -> DimensionScore:
        score = max(0, min(100, score))
        return DimensionScore(
            factor=self.factor,
            score=score,
            description=description,
            impact=impact or banded_impact(score),
        )
