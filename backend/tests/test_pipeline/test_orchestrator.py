"""Tests for the match pipeline orchestrator."""

import itertools
import random

import pytest

from models.responses import MatchResult
from models.schemas.opportunity import Opportunity
from models.schemas.team import Team
from services.pipeline.orchestrator import MatchPipeline, calculate_match
from services.pipeline.scoring_tables import DEFAULT_TABLES

FACTOR_ORDER = [
    "Industry Alignment",
    "Skills Compatibility",
    "Compensation Match",
    "Team Size Fit",
    "Location & Work Style",
    "Liftout Experience",
]


class TestFintechScenario:
    def test_dimension_scores(self, fintech_team, fintech_opportunity):
        result = calculate_match(fintech_team, fintech_opportunity, rng=random.Random(0))
        scores = {r.factor: r.score for r in result.reasons}
        assert scores == {
            "Industry Alignment": 85,
            # python exact, plus machine learning -> python related
            "Skills Compatibility": 85,
            "Compensation Match": 100,
            "Team Size Fit": 100,
            "Location & Work Style": 85,
            "Liftout Experience": 90,
        }

    def test_overall_score(self, fintech_team, fintech_opportunity):
        result = calculate_match(fintech_team, fintech_opportunity)
        # 21.25 + 25.5 + 20 + 10 + 8.5 + 4.5 = 89.75
        assert result.score == 90
        assert result.warnings == []

    def test_insights_and_actions(self, fintech_team, fintech_opportunity):
        result = calculate_match(fintech_team, fintech_opportunity)
        assert [i.type for i in result.insights] == [
            "success_prediction",
            "timeline_estimate",
            "market_intelligence",
        ]
        assert result.insights[0].confidence == 92
        assert "90%" in result.insights[0].description
        assert result.recommended_actions[0] == "Schedule initial confidential discussion"


class TestMatchPipeline:
    def test_reason_order_is_fixed(self, fintech_team, fintech_opportunity):
        result = MatchPipeline().run(fintech_team, fintech_opportunity)
        assert isinstance(result, MatchResult)
        assert [r.factor for r in result.reasons] == FACTOR_ORDER

    def test_idempotent_with_seeded_rng(self, fintech_team, fintech_opportunity):
        first = MatchPipeline(rng=random.Random(42)).run(fintech_team, fintech_opportunity)
        second = MatchPipeline(rng=random.Random(42)).run(fintech_team, fintech_opportunity)
        assert first == second

    def test_idempotent_without_seed(self, fintech_team, fintech_opportunity):
        pipeline = MatchPipeline()
        first = pipeline.run(fintech_team, fintech_opportunity)
        second = pipeline.run(fintech_team, fintech_opportunity)
        assert first.score == second.score
        assert first.reasons == second.reasons
        assert first.warnings == second.warnings

    def test_inputs_not_mutated(self, fintech_team, fintech_opportunity):
        team_before = fintech_team.model_copy(deep=True)
        opp_before = fintech_opportunity.model_copy(deep=True)
        calculate_match(fintech_team, fintech_opportunity)
        assert fintech_team == team_before
        assert fintech_opportunity == opp_before

    def test_compensation_gap_flows_into_actions(self):
        team = Team(compensation_expectation={"min": 300000, "max": 400000})
        opp = Opportunity(compensation={"min": 100000, "max": 150000})
        result = calculate_match(team, opp)
        assert result.reasons[2].score == 36
        assert [w.type for w in result.warnings] == ["compensation_gap"]
        assert result.warnings[0].severity == "high"
        assert "Negotiate total compensation package including equity and benefits" in result.recommended_actions

    def test_custom_tables(self, fintech_team, fintech_opportunity):
        tables = DEFAULT_TABLES.extend(industry_transfer={"Financial Services": {"Fintech": 1.0}})
        result = MatchPipeline(tables).run(fintech_team, fintech_opportunity)
        assert result.reasons[0].score == 100


INDUSTRIES = ["Financial Services", "Fintech", "Healthcare Technology", "Aerospace"]
STYLES = ["remote", "hybrid", "onsite"]
EXPERIENCE = ["first_time", "experienced", "veteran", "unknown"]


@pytest.mark.parametrize(
    "industry, style, experience",
    list(itertools.product(INDUSTRIES, STYLES, EXPERIENCE)),
)
def test_scores_always_in_range(industry, style, experience):
    team = Team(
        industry=industry,
        remote_status=style,
        liftout_experience=experience,
        size=9,
        compensation_expectation={"min": 0, "max": 0},
        skills=[],
    )
    opp = Opportunity(
        industry="Financial Services",
        work_style=style,
        compensation={"min": 500000, "max": 900000},
        team_size={"min": 2, "max": 3},
        skills=["Python", "Machine Learning"],
    )
    result = calculate_match(team, opp)
    assert 0 <= result.score <= 100
    assert len(result.reasons) == 6
    assert all(0 <= r.score <= 100 for r in result.reasons)
    assert len(result.insights) == 3
