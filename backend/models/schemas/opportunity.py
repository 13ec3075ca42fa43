"""Opportunity record as read by the scorers."""

from pydantic import BaseModel, model_validator


class Compensation(BaseModel):
    min: float = 0.0
    max: float = 0.0
    currency: str = "USD"
    type: str = "salary"  # salary, equity, total_package

    @model_validator(mode="after")
    def _check_range(self) -> "Compensation":
        if self.min > self.max:
            raise ValueError("compensation min must not exceed max")
        return self


class TeamSizeRange(BaseModel):
    min: int = 1
    max: int = 1

    @model_validator(mode="after")
    def _check_range(self) -> "TeamSizeRange":
        if self.min > self.max:
            raise ValueError("team size min must not exceed max")
        return self


class Opportunity(BaseModel):
    """A company opening looking to hire a whole team."""
    id: str = ""
    title: str = ""
    company_name: str = ""
    industry: str = ""
    location: str = ""
    work_style: str = "onsite"  # remote, hybrid, onsite
    compensation: Compensation = Compensation()
    team_size: TeamSizeRange = TeamSizeRange()
    skills: list[str] = []
    liftout_type: str = "expansion"  # expansion, acquisition, market_entry, capability_building
    confidential: bool = False
