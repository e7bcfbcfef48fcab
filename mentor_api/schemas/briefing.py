from enum import Enum

from pydantic import BaseModel

from mentor_api.schemas.mentor import ChatMessage, MentorMode


class BriefingKind(str, Enum):
    PRE_BRIEF = "pre_brief"
    AFTER_ACTION = "after_action"


class Briefing(BaseModel):
    kind: BriefingKind
    mode: MentorMode
    message: ChatMessage
