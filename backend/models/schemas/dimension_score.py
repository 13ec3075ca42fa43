"""Output of a single dimension scorer."""

from pydantic import BaseModel


class DimensionScore(BaseModel):
    factor: str
    score: int = 0  # 0-100
    description: str = ""
    impact: str = "low"  # high, medium, low
