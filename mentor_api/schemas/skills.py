from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_SCORE = 1
MAX_SCORE = 5


class SkillId(str, Enum):
    DATA = "data"
    MODELING = "modeling"
    COMMUNICATION = "communication"
    JUDGMENT = "judgment"
    TIME = "time"


class SkillScores(BaseModel):
    """Self-reported confidence per skill, 1 (not confident) to 5 (very confident)."""

    data: int = 3
    modeling: int = 3
    communication: int = 3
    judgment: int = 3
    time: int = 3

    @field_validator("data", "modeling", "communication", "judgment", "time", mode="before")
    @classmethod
    def clamp(cls, value):
        try:
            score = int(round(float(value)))
        except (TypeError, ValueError, OverflowError):
            raise ValueError(f"score must be a number from {MIN_SCORE} to {MAX_SCORE}")
        return max(MIN_SCORE, min(MAX_SCORE, score))


class SkillsPathStep(BaseModel):
    week: int
    label: str
    description: str


class SkillsPath(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    steps: List[SkillsPathStep]
    generated_at: datetime = Field(..., alias="generatedAt")


class CheckInResponse(BaseModel):
    prompt: Optional[str] = None
