from pydantic import BaseModel

from models.schemas.opportunity import Opportunity
from models.schemas.team import Team


class MatchReason(BaseModel):
    factor: str
    score: int = 0
    description: str = ""
    impact: str = "low"  # high, medium, low


class MatchWarning(BaseModel):
    type: str  # compensation_gap, location_mismatch, currency_mismatch, ...
    severity: str = "medium"  # high, medium, low
    description: str = ""
    suggestion: str = ""


class MatchInsight(BaseModel):
    type: str  # success_prediction, timeline_estimate, market_intelligence
    title: str = ""
    description: str = ""
    confidence: int = 0  # 0-100


class MatchResult(BaseModel):
    score: int = 0
    reasons: list[MatchReason] = []
    warnings: list[MatchWarning] = []
    insights: list[MatchInsight] = []
    recommended_actions: list[str] = []


class RankedMatch(BaseModel):
    team: Team
    opportunity: Opportunity
    match: MatchResult
    recommendation: str = "poor"  # excellent, good, fair, poor
    key_strengths: list[str] = []
    potential_concerns: list[str] = []


class ScoreBucket(BaseModel):
    range: str
    count: int = 0
    percentage: int = 0


class TopMatchesResponse(BaseModel):
    matches: list[RankedMatch] = []
    distribution: list[ScoreBucket] = []


class HealthResponse(BaseModel):
    status: str = "ok"
    teams: int = 0
    opportunities: int = 0
