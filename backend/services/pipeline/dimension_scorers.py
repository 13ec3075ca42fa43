"""Industry, compensation, team size, location and experience scorers.

Each scorer is pure: it reads the team, the opportunity and its lookup
tables, and returns a fresh DimensionScore. None of them raise for
unknown industries, unrecognized experience levels or zero-width ranges;
those fall back to documented defaults.
"""

import logging

from models.schemas.dimension_score import DimensionScore
from models.schemas.opportunity import Compensation, Opportunity, TeamSizeRange
from models.schemas.team import CompensationExpectation, Team
from services.pipeline.base import BaseScorer, round_half_up

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Industry
# ---------------------------------------------------------------------------

def industry_description(score: int) -> str:
    if score >= 90:
        return "Excellent industry alignment - direct experience transfer"
    if score >= 70:
        return "Strong industry compatibility - skills translate well"
    if score >= 50:
        return "Moderate industry transition - some ramp-up expected"
    return "Significant industry change - 6+ month adjustment period likely"


class IndustryScorer(BaseScorer):
    factor = "Industry Alignment"
    key = "industry"

    def raw_score(self, team_industry: str, opportunity_industry: str) -> int:
        transfer = self.tables.industry_transfer_score(team_industry, opportunity_industry)
        return round_half_up(transfer * 100)

    def score(self, team: Team, opportunity: Opportunity) -> DimensionScore:
        value = self.raw_score(team.industry, opportunity.industry)
        return self._result(value, industry_description(value))


# ---------------------------------------------------------------------------
# Compensation
# ---------------------------------------------------------------------------

def compensation_alignment(
    expectation: CompensationExpectation,
    offer: Compensation,
) -> tuple[int, str]:
    """Score how well the offered range covers the team's expectation.

    Overlapping ranges score by the share of the team's range that is
    covered, plus a 20 point bonus. Disjoint ranges lose one point per
    percent of distance between the midpoints.
    """
    team_range = expectation.max - expectation.min
    overlap_min = max(expectation.min, offer.min)
    overlap_max = min(expectation.max, offer.max)

    if team_range == 0 and offer.min <= expectation.min <= offer.max:
        return 100, "Compensation expectation falls within the offered range"

    if overlap_max > overlap_min:
        overlap = overlap_max - overlap_min
        score = round_half_up(min(overlap / team_range * 100 + 20, 100))
        return score, f"Good compensation alignment with {overlap:,.0f} overlap range"

    team_mid = (expectation.min + expectation.max) / 2
    offer_mid = (offer.min + offer.max) / 2
    gap = abs(team_mid - offer_mid)
    if team_mid <= 0:
        score = 100 if gap == 0 else 0
    else:
        score = max(0, round_half_up(100 - gap / team_mid * 100))
    return score, f"Compensation gap of {gap:,.0f} may require negotiation"


class CompensationScorer(BaseScorer):
    factor = "Compensation Match"
    key = "compensation"

    def score(self, team: Team, opportunity: Opportunity) -> DimensionScore:
        value, description = compensation_alignment(
            team.compensation_expectation, opportunity.compensation
        )
        return self._result(value, description)


# ---------------------------------------------------------------------------
# Team size
# ---------------------------------------------------------------------------

DEFICIT_PENALTY = 20
EXCESS_PENALTY = 15


def size_fit(team_size: int, wanted: TeamSizeRange) -> int:
    if wanted.min <= team_size <= wanted.max:
        return 100
    if team_size < wanted.min:
        return max(0, 100 - (wanted.min - team_size) * DEFICIT_PENALTY)
    return max(0, 100 - (team_size - wanted.max) * EXCESS_PENALTY)


def size_description(team_size: int, wanted: TeamSizeRange) -> str:
    if wanted.min <= team_size <= wanted.max:
        return (
            f"Perfect team size match ({team_size} members fits "
            f"{wanted.min}-{wanted.max} requirement)"
        )
    if team_size < wanted.min:
        return f"Team may need {wanted.min - team_size} additional members"
    return f"Team larger than ideal - consider if all {team_size} members are needed"


class TeamSizeScorer(BaseScorer):
    factor = "Team Size Fit"
    key = "size"

    def score(self, team: Team, opportunity: Opportunity) -> DimensionScore:
        return self._result(
            size_fit(team.size, opportunity.team_size),
            size_description(team.size, opportunity.team_size),
            impact="medium",
        )


# ---------------------------------------------------------------------------
# Location & work style
# ---------------------------------------------------------------------------

# Evaluated top to bottom, first match wins.
LOCATION_RULES = (
    (lambda t_loc, t_rem, o_loc, o_ws: t_rem == "remote" and o_ws == "remote",
     100, "Perfect remote work alignment"),
    (lambda t_loc, t_rem, o_loc, o_ws: t_loc == o_loc,
     100, "Perfect location match"),
    (lambda t_loc, t_rem, o_loc, o_ws: t_rem in ("hybrid", "remote") and o_ws == "hybrid",
     85, "Good hybrid work compatibility"),
    (lambda t_loc, t_rem, o_loc, o_ws: t_rem == "hybrid" and o_ws == "onsite",
     60, "Potential location adjustment needed"),
    (lambda t_loc, t_rem, o_loc, o_ws: t_rem == "remote" and o_ws == "onsite",
     30, "Significant work style mismatch - relocation may be required"),
)
LOCATION_FALLBACK = (50, "Location compatibility needs discussion")


def location_compatibility(
    team_location: str,
    team_remote: str,
    opportunity_location: str,
    opportunity_work_style: str,
) -> tuple[int, str]:
    for rule, score, description in LOCATION_RULES:
        if rule(team_location, team_remote, opportunity_location, opportunity_work_style):
            return score, description
    return LOCATION_FALLBACK


class LocationScorer(BaseScorer):
    factor = "Location & Work Style"
    key = "location"

    def score(self, team: Team, opportunity: Opportunity) -> DimensionScore:
        value, description = location_compatibility(
            team.location, team.remote_status, opportunity.location, opportunity.work_style
        )
        return self._result(value, description, impact="medium")


# ---------------------------------------------------------------------------
# Liftout experience
# ---------------------------------------------------------------------------

EXPERIENCE_DESCRIPTIONS = {
    "first_time": "First-time liftout - may benefit from additional transition support",
    "experienced": "Experienced with liftouts - smooth transition expected",
    "veteran": "Veteran liftout team - brings valuable transition expertise",
}


class ExperienceScorer(BaseScorer):
    factor = "Liftout Experience"
    key = "experience"

    def score(self, team: Team, opportunity: Opportunity) -> DimensionScore:
        experience = team.liftout_experience
        if experience not in self.tables.experience_scores:
            logger.debug("Unrecognized liftout experience %r, using default", experience)
        return self._result(
            self.tables.experience_score(experience),
            EXPERIENCE_DESCRIPTIONS.get(experience, "Liftout experience to be evaluated"),
            impact="low",
        )
