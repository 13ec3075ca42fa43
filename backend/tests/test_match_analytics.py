"""Tests for the score distribution summary."""

from models.responses import MatchResult, RankedMatch
from models.schemas.opportunity import Opportunity
from models.schemas.team import Team
from services.match_analytics import score_distribution


def _ranked(*scores: int) -> list[RankedMatch]:
    return [
        RankedMatch(team=Team(), opportunity=Opportunity(), match=MatchResult(score=s))
        for s in scores
    ]


def test_empty():
    assert score_distribution([]) == []


def test_buckets_highest_first():
    buckets = score_distribution(_ranked(95, 91, 85, 72))
    assert [(b.range, b.count, b.percentage) for b in buckets] == [
        ("90-100", 2, 50),
        ("80-89", 1, 25),
        ("70-79", 1, 25),
    ]


def test_edges():
    buckets = score_distribution(_ranked(100, 90, 89, 0, 9))
    assert [(b.range, b.count) for b in buckets] == [
        ("90-100", 2),
        ("80-89", 1),
        ("0-9", 2),
    ]


def test_percentages_round():
    buckets = score_distribution(_ranked(50, 60, 61))
    assert [(b.range, b.percentage) for b in buckets] == [("60-69", 67), ("50-59", 33)]
