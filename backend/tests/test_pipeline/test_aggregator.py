"""Tests for the weighted aggregator and warnings."""

import pytest

from models.schemas.dimension_score import DimensionScore
from models.schemas.opportunity import Opportunity
from models.schemas.team import Team
from services.pipeline.aggregator import DIMENSION_ORDER, build_warnings, overall_score


def _dims(**scores):
    values = {key: 0 for key in DIMENSION_ORDER}
    values.update(scores)
    return {key: DimensionScore(factor=key, score=value) for key, value in values.items()}


class TestOverallScore:
    def test_all_perfect(self):
        assert overall_score(_dims(**{k: 100 for k in DIMENSION_ORDER})) == 100

    def test_all_zero(self):
        assert overall_score(_dims()) == 0

    def test_weighted_sum(self):
        dims = _dims(industry=85, skills=50, compensation=100, size=100, location=85, experience=90)
        # 21.25 + 15 + 20 + 10 + 8.5 + 4.5
        assert overall_score(dims) == 79

    def test_rounds_half_up(self):
        # 0.25 * 90 = 22.5
        assert overall_score(_dims(industry=90)) == 23

    def test_skills_weighted_highest(self):
        assert overall_score(_dims(skills=100)) == 30
        assert overall_score(_dims(experience=100)) == 5


class TestBuildWarnings:
    def test_no_warning_at_threshold(self, fintech_team, fintech_opportunity):
        assert build_warnings(fintech_team, fintech_opportunity, _dims(compensation=60)) == []

    def test_medium_compensation_gap(self, fintech_team, fintech_opportunity):
        warnings = build_warnings(fintech_team, fintech_opportunity, _dims(compensation=59))
        assert len(warnings) == 1
        assert warnings[0].type == "compensation_gap"
        assert warnings[0].severity == "medium"
        assert "150,000-200,000" in warnings[0].description
        assert "140,000-190,000" in warnings[0].description

    def test_high_compensation_gap(self, fintech_team, fintech_opportunity):
        warnings = build_warnings(fintech_team, fintech_opportunity, _dims(compensation=39))
        assert warnings[0].severity == "high"

    def test_other_dimensions_do_not_warn(self, fintech_team, fintech_opportunity):
        dims = _dims(industry=0, skills=0, compensation=100, size=0, location=0, experience=0)
        assert build_warnings(fintech_team, fintech_opportunity, dims) == []

    def test_currency_mismatch(self):
        team = Team(compensation_expectation={"min": 100, "max": 200, "currency": "USD"})
        opp = Opportunity(compensation={"min": 100, "max": 200, "currency": "EUR"})
        warnings = build_warnings(team, opp, _dims(compensation=100))
        assert [w.type for w in warnings] == ["currency_mismatch"]
        assert "EUR" in warnings[0].description

    def test_currency_compared_case_insensitively(self):
        team = Team(compensation_expectation={"min": 100, "max": 200, "currency": "usd"})
        opp = Opportunity(compensation={"min": 100, "max": 200, "currency": "USD"})
        assert build_warnings(team, opp, _dims(compensation=100)) == []
