from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class MentorMode(str, Enum):
    COMMUNICATION_COACH = "communication_coach"
    PM_SIMULATOR = "pm_simulator"
    WORKFLOW_HELPER = "workflow_helper"
    SAFE_QA = "safe_qa"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["MentorMode"]:
        """Return the matching mode, or None when the value is not a known mode."""
        try:
            return cls(value)
        except ValueError:
            return None


DEFAULT_MODE = MentorMode.SAFE_QA


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class MentorRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mode: str = Field(..., min_length=1, description="communication_coach, pm_simulator, workflow_helper, safe_qa")
    messages: List[ChatMessage] = Field(..., min_length=1, description="Conversation so far, oldest first")
    pm_lens: bool = Field(False, alias="pmLens")
    case_tag: Optional[str] = Field(None, alias="caseTag")


class MentorResponse(BaseModel):
    answer: str


class ErrorResponse(BaseModel):
    error: str


class ModeInfo(BaseModel):
    id: MentorMode
    label: str
    tagline: str
    placeholder: str
    example: str
