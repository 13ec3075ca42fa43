from pydantic import BaseModel, Field

from models.schemas.opportunity import Opportunity
from models.schemas.team import Team


class MatchRequest(BaseModel):
    team: Team
    opportunity: Opportunity


class TopMatchesRequest(BaseModel):
    teams: list[Team] = Field(..., max_length=200)
    opportunities: list[Opportunity] = Field(..., max_length=200)
    limit: int | None = Field(None, ge=1, description="Defaults to settings.default_top_limit")


class SizeRange(BaseModel):
    min: int = 1
    max: int = 1000


class CompensationRange(BaseModel):
    min: float = 0.0
    max: float | None = None  # unbounded
    currency: str = "USD"  # compared case-insensitively with the team's currency


class MatchFilters(BaseModel):
    """Post-scoring filters for the per-team / per-opportunity lookups."""
    min_score: int | None = None
    max_results: int | None = None
    industry_preference: list[str] = []
    team_size_range: SizeRange | None = None
    compensation_range: CompensationRange | None = None
