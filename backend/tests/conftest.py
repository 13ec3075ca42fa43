"""Shared test configuration and fixtures."""

import pytest

from models.schemas.opportunity import Opportunity
from models.schemas.team import Team


@pytest.fixture
def fintech_team() -> Team:
    """NYC financial services team used across the scoring tests."""
    return Team(
        id="team_1",
        name="Quant Desk",
        industry="Financial Services",
        specialization="Quantitative trading",
        size=4,
        location="NYC",
        remote_status="hybrid",
        years_working_together=3,
        liftout_experience="experienced",
        compensation_expectation={"min": 150000, "max": 200000, "currency": "USD"},
        skills=["Python", "SQL"],
    )


@pytest.fixture
def fintech_opportunity() -> Opportunity:
    return Opportunity(
        id="opp_1",
        title="Fintech ML Team",
        company_name="Ledgerline",
        industry="Fintech",
        location="SF",
        work_style="hybrid",
        compensation={"min": 140000, "max": 190000, "currency": "USD", "type": "salary"},
        team_size={"min": 3, "max": 5},
        skills=["Python", "Machine Learning"],
        liftout_type="expansion",
        confidential=False,
    )
