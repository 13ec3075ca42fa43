"""Matching engine: single-pair scoring, batch ranking and store lookups.

Ranking is a full cross product (teams x opportunities) with no pruning,
meant for the small in-memory datasets the platform works with. Ties keep
input order: team-major, then opportunity.
"""

import logging
import random

from models.requests import MatchFilters
from models.responses import MatchResult, RankedMatch
from models.schemas.opportunity import Opportunity
from models.schemas.team import Team
from services.pipeline.orchestrator import MatchPipeline
from services.pipeline.scoring_tables import DEFAULT_TABLES, ScoringTables
from services.stores import OpportunityStore, TeamStore

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5

# (min score, tier), checked top to bottom
RECOMMENDATION_TIERS = (
    (85, "excellent"),
    (70, "good"),
    (55, "fair"),
)


def recommendation_for(score: int) -> str:
    for threshold, tier in RECOMMENDATION_TIERS:
        if score >= threshold:
            return tier
    return "poor"


# (reason factor, min score, strength), checked independently
STRENGTH_RULES = (
    ("Skills Compatibility", 80, "Exceptional skills match"),
    ("Industry Alignment", 80, "Deep industry expertise"),
)
# (reason factor, max score, concern)
CONCERN_RULES = (
    ("Skills Compatibility", 40, "Significant skills gap requiring training"),
    ("Compensation Match", 59, "Budget constraints may impact negotiation"),
    ("Location & Work Style", 50, "Geographic constraints require attention"),
)
COHESION_YEARS = 3
SHORT_HISTORY_YEARS = 1
SEASONED_EXPERIENCE = ("experienced", "veteran")
RECOMMENDATION_MIN_SCORE = 60


def key_strengths(team: Team, match: MatchResult) -> list[str]:
    scores = {reason.factor: reason.score for reason in match.reasons}
    strengths = [
        label for factor, threshold, label in STRENGTH_RULES
        if scores.get(factor, 0) >= threshold
    ]
    if team.years_working_together >= COHESION_YEARS:
        strengths.append("Proven team cohesion and track record")
    if team.liftout_experience in SEASONED_EXPERIENCE:
        strengths.append("Previous successful liftout experience")
    return strengths


def potential_concerns(team: Team, match: MatchResult) -> list[str]:
    scores = {reason.factor: reason.score for reason in match.reasons}
    concerns = [
        label for factor, threshold, label in CONCERN_RULES
        if factor in scores and scores[factor] <= threshold
    ]
    if team.years_working_together < SHORT_HISTORY_YEARS:
        concerns.append("Limited shared working history")
    return concerns


def _ranges_overlap(low: float, high: float, other_low: float, other_high: float | None) -> bool:
    return low <= (other_high if other_high is not None else float("inf")) and high >= other_low


def apply_filters(matches: list[RankedMatch], filters: MatchFilters | None) -> list[RankedMatch]:
    """Filter, sort by score descending and truncate to max_results."""
    filters = filters or MatchFilters()
    result = matches

    if filters.min_score is not None:
        result = [m for m in result if m.match.score >= filters.min_score]

    if filters.industry_preference:
        result = [
            m for m in result
            if any(pref in m.opportunity.industry for pref in filters.industry_preference)
        ]

    if filters.team_size_range is not None:
        size_range = filters.team_size_range
        result = [m for m in result if size_range.min <= m.team.size <= size_range.max]

    if filters.compensation_range is not None:
        comp = filters.compensation_range
        result = [
            m for m in result
            if m.team.compensation_expectation.currency.upper() == comp.currency.upper()
            and _ranges_overlap(
                m.team.compensation_expectation.min,
                m.team.compensation_expectation.max,
                comp.min,
                comp.max,
            )
        ]

    result = sorted(result, key=lambda m: m.match.score, reverse=True)

    if filters.max_results is not None:
        result = result[:max(0, filters.max_results)]
    return result


class MatchingEngine:
    """Entry point used by the API and scripts."""

    def __init__(
        self,
        tables: ScoringTables = DEFAULT_TABLES,
        rng: random.Random | None = None,
        teams: TeamStore | None = None,
        opportunities: OpportunityStore | None = None,
    ) -> None:
        self.pipeline = MatchPipeline(tables, rng)
        self.teams = teams
        self.opportunities = opportunities
        logger.info(
            "Matching engine ready (%d industries, %d skill relations)",
            len(tables.industry_transfer), len(tables.skill_relations),
        )

    def match(self, team: Team, opportunity: Opportunity) -> MatchResult:
        return self.pipeline.run(team, opportunity)

    def rank(self, team: Team, opportunity: Opportunity) -> RankedMatch:
        match = self.match(team, opportunity)
        return RankedMatch(
            team=team,
            opportunity=opportunity,
            match=match,
            recommendation=recommendation_for(match.score),
            key_strengths=key_strengths(team, match),
            potential_concerns=potential_concerns(team, match),
        )

    def top_matches(
        self,
        teams: list[Team],
        opportunities: list[Opportunity],
        limit: int = DEFAULT_LIMIT,
    ) -> list[RankedMatch]:
        """Score every team against every opportunity and keep the best `limit`."""
        if limit <= 0:
            return []
        matches = [self.rank(team, opp) for team in teams for opp in opportunities]
        logger.debug("Ranked %d pairs, keeping top %d", len(matches), limit)
        # sorted() is stable, so equal scores keep input order
        return sorted(matches, key=lambda m: m.match.score, reverse=True)[:limit]

    def find_opportunities_for_team(
        self,
        team_id: str,
        filters: MatchFilters | None = None,
    ) -> list[RankedMatch]:
        teams, opportunities = self._require_stores()
        team = teams.get(team_id)
        if team is None:
            logger.warning("Team not found: %s", team_id)
            raise LookupError(f"Team not found: {team_id}")
        matches = [self.rank(team, opp) for opp in opportunities.list()]
        return apply_filters(matches, filters)

    def find_teams_for_opportunity(
        self,
        opportunity_id: str,
        filters: MatchFilters | None = None,
    ) -> list[RankedMatch]:
        teams, opportunities = self._require_stores()
        opportunity = opportunities.get(opportunity_id)
        if opportunity is None:
            logger.warning("Opportunity not found: %s", opportunity_id)
            raise LookupError(f"Opportunity not found: {opportunity_id}")
        matches = [self.rank(team, opportunity) for team in teams.list()]
        return apply_filters(matches, filters)

    def recommended_opportunities(self, team_id: str, limit: int = 10) -> list[Opportunity]:
        """Opportunities scoring at least 60 for the team, best first."""
        filters = MatchFilters(min_score=RECOMMENDATION_MIN_SCORE, max_results=limit)
        return [m.opportunity for m in self.find_opportunities_for_team(team_id, filters)]

    def recommended_teams(self, opportunity_id: str, limit: int = 10) -> list[Team]:
        filters = MatchFilters(min_score=RECOMMENDATION_MIN_SCORE, max_results=limit)
        return [m.team for m in self.find_teams_for_opportunity(opportunity_id, filters)]

    def _require_stores(self) -> tuple[TeamStore, OpportunityStore]:
        if self.teams is None or self.opportunities is None:
            raise RuntimeError("MatchingEngine was created without stores")
        return self.teams, self.opportunities
