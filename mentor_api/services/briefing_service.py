from typing import Dict, Optional

from mentor_api.schemas.briefing import Briefing, BriefingKind
from mentor_api.schemas.mentor import ChatMessage, MentorMode
from mentor_api.services.mode_catalog import mode_label

BRIEFING_TEMPLATES: Dict[BriefingKind, str] = {
    BriefingKind.PRE_BRIEF: """
Pre-brief ({label}{case}): before you start, take two minutes on these:
1) What exactly are you about to do, and for whom?
2) What would a good outcome look like from your PM's point of view?
3) What is the one thing most likely to go wrong, and how will you spot it early?
Reply with your answers and we'll use them as the plan for this session.
""".strip(),
    BriefingKind.AFTER_ACTION: """
After-action review ({label}{case}): now that it's done, let's capture what you learned:
1) What happened, compared with what you expected?
2) What went well that you want to repeat?
3) What would you do differently next time?
4) What, if anything, should you tell your PM as a follow-up?
Reply with your answers and I'll help you turn them into one concrete habit.
""".strip(),
}


def build_briefing(kind: BriefingKind, mode: MentorMode, case_tag: Optional[str] = None) -> Briefing:
    case_tag = (case_tag or "").strip()
    case = f", case “{case_tag}”" if case_tag else ""
    content = BRIEFING_TEMPLATES[kind].format(label=mode_label(mode), case=case)
    return Briefing(kind=kind, mode=mode, message=ChatMessage(role="assistant", content=content))
