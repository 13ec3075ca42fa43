"""Pipeline orchestrator: wires the scorers into one match computation.

Flow:
    team + opportunity
      ├─ IndustryScorer       → DimensionScore
      ├─ SkillsScorer         → DimensionScore
      ├─ CompensationScorer   → DimensionScore
      ├─ TeamSizeScorer       → DimensionScore
      ├─ LocationScorer       → DimensionScore
      ├─ ExperienceScorer     → DimensionScore
      │          ↓
      ├─ aggregator.overall_score / build_warnings
      │          ↓
      └─ insights.build_insights / recommended_actions
                 ↓
          MatchResult
"""

import logging
import random

from models.responses import MatchReason, MatchResult
from models.schemas.opportunity import Opportunity
from models.schemas.team import Team
from services.pipeline import aggregator, insights
from services.pipeline.base import BaseScorer
from services.pipeline.dimension_scorers import (
    CompensationScorer,
    ExperienceScorer,
    IndustryScorer,
    LocationScorer,
    TeamSizeScorer,
)
from services.pipeline.scoring_tables import DEFAULT_TABLES, ScoringTables
from services.pipeline.skills_scorer import SkillsScorer

logger = logging.getLogger(__name__)

# Fixed reason order in MatchResult
SCORER_CLASSES: tuple[type[BaseScorer], ...] = (
    IndustryScorer,
    SkillsScorer,
    CompensationScorer,
    TeamSizeScorer,
    LocationScorer,
    ExperienceScorer,
)


class MatchPipeline:
    """Scores team/opportunity pairs against one set of lookup tables."""

    def __init__(
        self,
        tables: ScoringTables = DEFAULT_TABLES,
        rng: random.Random | None = None,
    ) -> None:
        self.tables = tables
        self.rng = rng
        self.scorers = [cls(tables) for cls in SCORER_CLASSES]

    def run(self, team: Team, opportunity: Opportunity) -> MatchResult:
        dimensions = {
            scorer.key: scorer.score(team, opportunity) for scorer in self.scorers
        }

        score = aggregator.overall_score(dimensions, self.tables)
        warnings = aggregator.build_warnings(team, opportunity, dimensions)

        match_insights = insights.build_insights(
            team,
            opportunity,
            score,
            industry_score=dimensions["industry"].score,
            rng=self.rng,
        )
        actions = insights.recommended_actions(score, warnings)

        logger.debug(
            "Scored team %s vs opportunity %s: %d",
            team.id or "<new>", opportunity.id or "<new>", score,
        )
        return MatchResult(
            score=score,
            reasons=[
                MatchReason(**dimensions[scorer.key].model_dump())
                for scorer in self.scorers
            ],
            warnings=warnings,
            insights=match_insights,
            recommended_actions=actions,
        )


def calculate_match(
    team: Team,
    opportunity: Opportunity,
    tables: ScoringTables = DEFAULT_TABLES,
    rng: random.Random | None = None,
) -> MatchResult:
    """Score a single pair with a throwaway pipeline."""
    return MatchPipeline(tables, rng).run(team, opportunity)
