"""Input records consumed by the compatibility scoring pipeline."""

from models.schemas.team import CompensationExpectation, Team
from models.schemas.opportunity import Compensation, Opportunity, TeamSizeRange
from models.schemas.dimension_score import DimensionScore

__all__ = [
    "CompensationExpectation",
    "Team",
    "Compensation",
    "Opportunity",
    "TeamSizeRange",
    "DimensionScore",
]
