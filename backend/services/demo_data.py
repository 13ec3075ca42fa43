"""Demo teams and opportunities loaded into the in-memory stores at startup."""

import logging

from models.schemas.opportunity import Opportunity
from models.schemas.team import Team
from services.stores import OpportunityStore, TeamStore

logger = logging.getLogger(__name__)

DEMO_TEAMS: list[dict] = [
    {
        "id": "team_quant_nyc",
        "name": "Quantitative Analytics Team",
        "industry": "Financial Services",
        "specialization": "Quantitative risk modeling",
        "size": 4,
        "location": "New York, NY",
        "remote_status": "hybrid",
        "years_working_together": 3.5,
        "liftout_experience": "experienced",
        "compensation_expectation": {"min": 180000, "max": 260000, "currency": "USD"},
        "skills": ["Quantitative Finance", "Python", "Risk Management", "SQL"],
    },
    {
        "id": "team_health_ml",
        "name": "Clinical ML Group",
        "industry": "Healthcare Technology",
        "specialization": "Clinical decision support",
        "size": 6,
        "location": "Boston, MA",
        "remote_status": "remote",
        "years_working_together": 4,
        "liftout_experience": "first_time",
        "compensation_expectation": {"min": 160000, "max": 230000, "currency": "USD"},
        "skills": ["Machine Learning", "Python", "Computer Vision", "HIPAA Compliance"],
    },
    {
        "id": "team_ib_coverage",
        "name": "TMT Coverage Desk",
        "industry": "Investment Banking",
        "specialization": "Technology M&A advisory",
        "size": 5,
        "location": "Chicago, IL",
        "remote_status": "onsite",
        "years_working_together": 6,
        "liftout_experience": "veteran",
        "compensation_expectation": {"min": 300000, "max": 500000, "currency": "USD"},
        "skills": ["Investment Strategy", "Valuation", "Financial Modeling", "Due Diligence"],
    },
    {
        "id": "team_strategy",
        "name": "Operations Strategy Practice",
        "industry": "Management Consulting",
        "specialization": "Healthcare operations",
        "size": 8,
        "location": "Washington D.C.",
        "remote_status": "hybrid",
        "years_working_together": 2,
        "liftout_experience": "experienced",
        "compensation_expectation": {"min": 220000, "max": 350000, "currency": "USD"},
        "skills": ["Business Development", "Market Strategy", "Process Improvement"],
    },
]

DEMO_OPPORTUNITIES: list[dict] = [
    {
        "id": "opp_fintech_risk",
        "title": "Fintech Lender Building Risk Analytics Function",
        "company_name": "Ledgerline",
        "industry": "Fintech",
        "location": "New York, NY",
        "work_style": "hybrid",
        "compensation": {"min": 190000, "max": 280000, "currency": "USD", "type": "salary"},
        "team_size": {"min": 3, "max": 5},
        "skills": ["Risk Management", "Python", "Machine Learning"],
        "liftout_type": "capability_building",
        "confidential": False,
    },
    {
        "id": "opp_health_consulting",
        "title": "Healthcare Consulting Firm Seeking Workflow Experts",
        "company_name": "Meridian Health Partners",
        "industry": "Management Consulting",
        "location": "Washington D.C.",
        "work_style": "hybrid",
        "compensation": {"min": 250000, "max": 400000, "currency": "USD", "type": "total_package"},
        "team_size": {"min": 4, "max": 6},
        "skills": ["Process Improvement", "Sales", "Healthcare Operations"],
        "liftout_type": "expansion",
        "confidential": True,
    },
    {
        "id": "opp_crypto_fund",
        "title": "Crypto Fund Expanding Investment Leadership",
        "company_name": "Northbridge Digital",
        "industry": "Private Equity",
        "location": "Chicago, IL",
        "work_style": "hybrid",
        "compensation": {"min": 350000, "max": 600000, "currency": "USD", "type": "total_package"},
        "team_size": {"min": 4, "max": 6},
        "skills": ["Portfolio Management", "Valuation", "Financial Analysis"],
        "liftout_type": "market_entry",
        "confidential": True,
    },
    {
        "id": "opp_imaging_ai",
        "title": "Imaging AI Startup Needs Applied ML Team",
        "company_name": "Radiant Labs",
        "industry": "Healthcare Technology",
        "location": "Remote",
        "work_style": "remote",
        "compensation": {"min": 170000, "max": 240000, "currency": "USD", "type": "salary"},
        "team_size": {"min": 4, "max": 7},
        "skills": ["Machine Learning", "Computer Vision", "TensorFlow"],
        "liftout_type": "acquisition",
        "confidential": False,
    },
]


def seed_stores(teams: TeamStore, opportunities: OpportunityStore) -> None:
    """Load the demo records into empty stores."""
    for data in DEMO_TEAMS:
        teams.add(Team(**data))
    for data in DEMO_OPPORTUNITIES:
        opportunities.add(Opportunity(**data))
    logger.info(
        "Seeded %d demo teams and %d demo opportunities",
        len(DEMO_TEAMS), len(DEMO_OPPORTUNITIES),
    )
