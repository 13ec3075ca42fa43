"""Lookup tables driving the dimension scorers.

Kept as read-only mappings so callers can extend them (new industries,
skill relations) without touching the scoring code:

    tables = DEFAULT_TABLES.extend(
        industry_transfer={"Biotechnology": {"Biotechnology": 1.0}},
    )
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _freeze(table: Mapping) -> Mapping:
    """Recursively wrap nested dicts in read-only proxies."""
    return MappingProxyType({
        key: _freeze(value) if isinstance(value, Mapping) else value
        for key, value in table.items()
    })


# How well a team's experience transfers from one industry to another.
# Asymmetric: row is the team's industry, column the opportunity's.
INDUSTRY_TRANSFER: dict[str, dict[str, float]] = {
    "Financial Services": {
        "Financial Services": 1.0,
        "Investment Banking": 0.9,
        "Private Equity": 0.8,
        "Fintech": 0.85,
        "Healthcare Technology": 0.4,
        "Enterprise Software": 0.6,
        "Management Consulting": 0.7,
    },
    "Healthcare Technology": {
        "Healthcare Technology": 1.0,
        "Biotechnology": 0.8,
        "Enterprise Software": 0.7,
        "Financial Services": 0.4,
        "Management Consulting": 0.6,
    },
    "Investment Banking": {
        "Investment Banking": 1.0,
        "Financial Services": 0.9,
        "Private Equity": 0.95,
        "Management Consulting": 0.8,
        "Fintech": 0.7,
    },
    "Management Consulting": {
        "Management Consulting": 1.0,
        "Financial Services": 0.7,
        "Investment Banking": 0.8,
        "Enterprise Software": 0.6,
        "Healthcare Technology": 0.6,
        "Private Equity": 0.75,
    },
}

# Skill -> skills considered close enough to count as a partial match.
# Checked in both directions, all keys lowercase.
SKILL_RELATIONS: dict[str, tuple[str, ...]] = {
    "quantitative finance": ("risk management", "financial modeling", "python", "r"),
    "machine learning": ("data science", "python", "tensorflow", "computer vision"),
    "business development": ("sales", "partnership development", "market strategy"),
    "investment strategy": ("portfolio management", "financial analysis", "valuation"),
}

EXPERIENCE_SCORES: dict[str, int] = {
    "first_time": 70,
    "experienced": 90,
    "veteran": 85,
}

# Dimension weights, in the fixed reason order. Must sum to 1.0.
DIMENSION_WEIGHTS: dict[str, float] = {
    "industry": 0.25,
    "skills": 0.30,
    "compensation": 0.20,
    "size": 0.10,
    "location": 0.10,
    "experience": 0.05,
}


@dataclass(frozen=True)
class ScoringTables:
    industry_transfer: Mapping[str, Mapping[str, float]] = field(
        default_factory=lambda: _freeze(INDUSTRY_TRANSFER)
    )
    skill_relations: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: _freeze(SKILL_RELATIONS)
    )
    experience_scores: Mapping[str, int] = field(
        default_factory=lambda: _freeze(EXPERIENCE_SCORES)
    )
    weights: Mapping[str, float] = field(
        default_factory=lambda: _freeze(DIMENSION_WEIGHTS)
    )
    default_industry_transfer: float = 0.3
    default_experience_score: int = 70

    def __post_init__(self) -> None:
        if set(self.weights) != set(DIMENSION_WEIGHTS):
            raise ValueError(f"weights must cover exactly {sorted(DIMENSION_WEIGHTS)}")
        if abs(sum(self.weights.values()) - 1.0) > 1e-9:
            raise ValueError("dimension weights must sum to 1.0")

    def industry_transfer_score(self, team_industry: str, opportunity_industry: str) -> float:
        row = self.industry_transfer.get(team_industry, {})
        return row.get(opportunity_industry, self.default_industry_transfer)

    def experience_score(self, experience: str) -> int:
        return self.experience_scores.get(experience, self.default_experience_score)

    def extend(
        self,
        industry_transfer: Mapping[str, Mapping[str, float]] | None = None,
        skill_relations: Mapping[str, tuple[str, ...]] | None = None,
        experience_scores: Mapping[str, int] | None = None,
    ) -> "ScoringTables":
        """Return a copy with extra entries merged over this instance's."""
        transfer = {k: dict(v) for k, v in self.industry_transfer.items()}
        for row, cols in (industry_transfer or {}).items():
            transfer.setdefault(row, {}).update(cols)
        relations = dict(self.skill_relations)
        relations.update({k.lower(): tuple(s.lower() for s in v) for k, v in (skill_relations or {}).items()})
        experience = dict(self.experience_scores)
        experience.update(experience_scores or {})
        return ScoringTables(
            industry_transfer=_freeze(transfer),
            skill_relations=_freeze(relations),
            experience_scores=_freeze(experience),
            weights=self.weights,
            default_industry_transfer=self.default_industry_transfer,
            default_experience_score=self.default_experience_score,
        )


DEFAULT_TABLES = ScoringTables()
