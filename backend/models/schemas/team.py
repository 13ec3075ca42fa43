"""Team record as read by the scorers."""

from pydantic import BaseModel, Field, model_validator


class CompensationExpectation(BaseModel):
    min: float = 0.0
    max: float = 0.0
    currency: str = "USD"

    @model_validator(mode="after")
    def _check_range(self) -> "CompensationExpectation":
        if self.min > self.max:
            raise ValueError("compensation min must not exceed max")
        return self


class Team(BaseModel):
    """An intact team looking to move together.

    The engine only reads these fields; stores own the identity.
    """
    id: str = ""
    name: str = ""
    industry: str = ""
    specialization: str = ""
    size: int = Field(1, ge=1)
    location: str = ""
    remote_status: str = "onsite"  # remote, hybrid, onsite
    years_working_together: float = Field(0.0, ge=0)
    liftout_experience: str = "first_time"  # first_time, experienced, veteran
    compensation_expectation: CompensationExpectation = CompensationExpectation()
    skills: list[str] = []
