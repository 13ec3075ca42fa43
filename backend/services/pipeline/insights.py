"""Insight generator: narrative output built from the aggregated score.

Template-based rules, no model. Produces, in order, a success prediction,
a timeline estimate and a market-intelligence note, plus the recommended
next actions for the pair.

The market-intelligence note is picked at random. Pass a seeded
random.Random to get reproducible output.
"""

import logging
import random

from models.responses import MatchInsight, MatchWarning
from models.schemas.opportunity import Opportunity
from models.schemas.team import Team

logger = logging.getLogger(__name__)

# (min score, confidence, description template), checked top to bottom
SUCCESS_BANDS = (
    (85, 92, "Excellent match with {score}% compatibility. Teams with similar profiles "
             "have a 92% success rate in comparable liftouts."),
    (70, 78, "Strong match with {score}% compatibility. Success probability is 78% "
             "based on historical data."),
    (55, 61, "Moderate match with {score}% compatibility. Success rate is 61% with "
             "proper planning and support."),
)
SUCCESS_FALLBACK = (35, "Lower compatibility at {score}%. Significant planning and "
                        "negotiation would be needed for success.")

BASE_TIMELINE_MONTHS = 3
TIMELINE_CONFIDENCE = 75
LARGE_TEAM_SIZE = 6

MARKET_INTELLIGENCE_TEMPLATES = (
    "Teams that have worked together for {years}+ years can hit the ground running"
    "—no team formation phase needed",
    "Liftouts in {industry} let companies build capability faster than individual"
    " hiring, with lower risk than M&A",
    "Intact teams preserve the trust and relationships that made them successful"
    "—star performers succeed as part of their team",
)

MARKET_INTELLIGENCE_CONFIDENCE = 82

WARNING_ACTIONS = {
    "compensation_gap": "Negotiate total compensation package including equity and benefits",
    "location_mismatch": "Discuss remote work options or relocation assistance",
    "currency_mismatch": "Agree on a common currency for the compensation discussion",
}


def success_prediction(score: int) -> MatchInsight:
    for threshold, confidence, template in SUCCESS_BANDS:
        if score >= threshold:
            break
    else:
        confidence, template = SUCCESS_FALLBACK
    return MatchInsight(
        type="success_prediction",
        title="Liftout Success Probability",
        description=template.format(score=score),
        confidence=confidence,
    )


def estimate_timeline_months(team: Team, opportunity: Opportunity, industry_score: int) -> int:
    months = BASE_TIMELINE_MONTHS
    if industry_score < 70:
        months += 2
    if team.liftout_experience == "first_time":
        months += 1
    if opportunity.confidential:
        months += 1
    if team.size > LARGE_TEAM_SIZE:
        months += 1
    return months


def timeline_estimate(team: Team, opportunity: Opportunity, industry_score: int) -> MatchInsight:
    months = estimate_timeline_months(team, opportunity, industry_score)
    return MatchInsight(
        type="timeline_estimate",
        title="Estimated Liftout Timeline",
        description=(
            f"Based on team profile and opportunity complexity, expect {months}-{months + 2} "
            f"month process from initial contact to full integration."
        ),
        confidence=TIMELINE_CONFIDENCE,
    )


def format_years(years: float) -> str:
    """Render years without a trailing '.0' and never in exponent form."""
    years = float(years)
    if years.is_integer():
        return str(int(years))
    return repr(years)


def market_intelligence(
    team: Team,
    opportunity: Opportunity,
    rng: random.Random | None = None,
) -> MatchInsight:
    template = (rng or random).choice(MARKET_INTELLIGENCE_TEMPLATES)
    return MatchInsight(
        type="market_intelligence",
        title="Market Intelligence",
        description=template.format(
            years=format_years(team.years_working_together),
            industry=opportunity.industry,
        ),
        confidence=MARKET_INTELLIGENCE_CONFIDENCE,
    )


def build_insights(
    team: Team,
    opportunity: Opportunity,
    score: int,
    industry_score: int,
    rng: random.Random | None = None,
) -> list[MatchInsight]:
    return [
        success_prediction(score),
        timeline_estimate(team, opportunity, industry_score),
        market_intelligence(team, opportunity, rng),
    ]


def recommended_actions(score: int, warnings: list[MatchWarning]) -> list[str]:
    """Next steps for the pair: one band of three, then per-warning follow-ups."""
    if score >= 80:
        actions = [
            "Schedule initial confidential discussion",
            "Prepare team capability presentation",
            "Review compensation and integration timeline",
        ]
    elif score >= 60:
        actions = [
            "Address key compatibility gaps before proceeding",
            "Conduct detailed skills assessment",
            "Negotiate flexible terms to bridge differences",
        ]
    else:
        actions = [
            "Significant alignment work needed before proceeding",
            "Consider if this opportunity is worth the transition costs",
            "Explore alternative opportunities with better fit",
        ]

    for warning in warnings:
        action = WARNING_ACTIONS.get(warning.type)
        if action:
            actions.append(action)
    return actions
