"""Skills Compatibility: overlap between team skills and required skills.

Exact matches count fully; pairs linked through the skill relation table
count 0.7. Coverage is measured against the opportunity's skill list, so a
team with many extra skills is never penalized.
"""

import logging
from typing import Iterable, Mapping

from models.schemas.dimension_score import DimensionScore
from models.schemas.opportunity import Opportunity
from models.schemas.team import Team
from services.pipeline.base import BaseScorer, round_half_up
from services.pipeline.scoring_tables import SKILL_RELATIONS

logger = logging.getLogger(__name__)

EXACT_WEIGHT = 1.0
RELATED_WEIGHT = 0.7


def count_related_matches(
    team_skills: list[str],
    opportunity_skills: list[str],
    relations: Mapping[str, Iterable[str]],
) -> int:
    """Count (team, opportunity) skill pairs related in either direction."""
    related = 0
    for team_skill in team_skills:
        for opp_skill in opportunity_skills:
            if (
                opp_skill in relations.get(team_skill, ())
                or team_skill in relations.get(opp_skill, ())
            ):
                related += 1
    return related


def score_skills(
    team_skills: list[str],
    opportunity_skills: list[str],
    relations: Mapping[str, Iterable[str]] = SKILL_RELATIONS,
) -> float:
    """Return skill coverage in 0-100. Empty requirements score 0."""
    if not opportunity_skills:
        return 0.0

    team_lower = [s.lower() for s in team_skills]
    opp_lower = [s.lower() for s in opportunity_skills]

    exact = sum(1 for skill in team_lower if skill in opp_lower)
    related = count_related_matches(team_lower, opp_lower, relations)

    coverage = (exact * EXACT_WEIGHT + related * RELATED_WEIGHT) / len(opp_lower)
    return min(coverage * 100, 100.0)


class SkillsScorer(BaseScorer):
    factor = "Skills Compatibility"
    key = "skills"

    def score(self, team: Team, opportunity: Opportunity) -> DimensionScore:
        if not opportunity.skills:
            logger.debug("Opportunity %s lists no skills, skills score is 0", opportunity.id or "<new>")
        value = round_half_up(
            score_skills(team.skills, opportunity.skills, self.tables.skill_relations)
        )
        return self._result(
            value,
            f"{value}% of required skills align with team expertise",
        )
