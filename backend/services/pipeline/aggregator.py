"""Aggregator: weighted overall score and threshold warnings.

Combines the six dimension scores with the fixed weights from
ScoringTables into a single 0-100 score. Only the compensation dimension
raises a warning today; currency mismatch is flagged separately since no
conversion is attempted.
"""

import logging

import numpy as np

from models.responses import MatchWarning
from models.schemas.dimension_score import DimensionScore
from models.schemas.opportunity import Opportunity
from models.schemas.team import Team
from services.pipeline.base import round_half_up
from services.pipeline.scoring_tables import DEFAULT_TABLES, DIMENSION_WEIGHTS, ScoringTables

logger = logging.getLogger(__name__)

COMPENSATION_WARNING_THRESHOLD = 60
COMPENSATION_HIGH_SEVERITY_THRESHOLD = 40

DIMENSION_ORDER = tuple(DIMENSION_WEIGHTS)


def overall_score(
    dimensions: dict[str, DimensionScore],
    tables: ScoringTables = DEFAULT_TABLES,
) -> int:
    """Weighted sum of dimension scores, rounded and clamped to 0-100."""
    scores = np.array([dimensions[key].score for key in DIMENSION_ORDER], dtype=float)
    weights = np.array([tables.weights[key] for key in DIMENSION_ORDER], dtype=float)
    total = float(np.dot(scores, weights))
    return max(0, min(100, round_half_up(total)))


def build_warnings(
    team: Team,
    opportunity: Opportunity,
    dimensions: dict[str, DimensionScore],
) -> list[MatchWarning]:
    warnings: list[MatchWarning] = []
    expectation = team.compensation_expectation
    offer = opportunity.compensation

    comp_score = dimensions["compensation"].score
    if comp_score < COMPENSATION_WARNING_THRESHOLD:
        warnings.append(MatchWarning(
            type="compensation_gap",
            severity="high" if comp_score < COMPENSATION_HIGH_SEVERITY_THRESHOLD else "medium",
            description=(
                f"Compensation expectations may not align (team expects "
                f"{expectation.min:,.0f}-{expectation.max:,.0f}, opportunity offers "
                f"{offer.min:,.0f}-{offer.max:,.0f})"
            ),
            suggestion="Consider negotiating total package including equity, benefits, or growth opportunities",
        ))

    if expectation.currency.upper() != offer.currency.upper():
        logger.warning(
            "Currency mismatch for team %s / opportunity %s: %s vs %s",
            team.id or "<new>", opportunity.id or "<new>", expectation.currency, offer.currency,
        )
        warnings.append(MatchWarning(
            type="currency_mismatch",
            severity="medium",
            description=(
                f"Team expectation is in {expectation.currency} but the opportunity "
                f"pays in {offer.currency}; compensation was compared without conversion"
            ),
            suggestion="Confirm both ranges in a common currency before relying on the compensation score",
        ))

    return warnings
