from typing import Dict, List

from mentor_api.schemas.mentor import MentorMode, ModeInfo

MODE_CATALOG: Dict[MentorMode, ModeInfo] = {
    MentorMode.COMMUNICATION_COACH: ModeInfo(
        id=MentorMode.COMMUNICATION_COACH,
        label="Communication Coach",
        tagline="Helps you draft and polish emails, memos, and IC notes.",
        placeholder="Paste your draft or describe what you’re trying to say to your PM...",
        example=(
            "“Here is my rough email to my PM about missing a deadline. "
            "Can you help me make it clearer and more professional?”"
        ),
    ),
    MentorMode.PM_SIMULATOR: ModeInfo(
        id=MentorMode.PM_SIMULATOR,
        label="PM Simulator",
        tagline="Asks tough but fair questions about your investment idea.",
        placeholder="Describe your investment idea or thesis. Rough is okay...",
        example=(
            "“I’m thinking about pitching a long in a Chinese clean-tech company benefiting from EV adoption. "
            "Can you challenge my thesis like a PM would?”"
        ),
    ),
    MentorMode.WORKFLOW_HELPER: ModeInfo(
        id=MentorMode.WORKFLOW_HELPER,
        label="Workflow Helper",
        tagline="Helps you prioritize tasks and structure your day or week.",
        placeholder="List your tasks, deadlines, and what you’re stressed about...",
        example=(
            "“This week I have: 1) a sector deep-dive due Thursday, 2) daily news summaries, "
            "and 3) a case study presentation. How should I prioritize and what should I tell "
            "my PM if I can’t do everything perfectly?”"
        ),
    ),
    MentorMode.SAFE_QA: ModeInfo(
        id=MentorMode.SAFE_QA,
        label="Safe Q&A",
        tagline="Ask about culture, expectations, and soft skills at work.",
        placeholder="Ask anything about being a junior analyst or working in asset management...",
        example=(
            "“I often feel lost in team meetings and don’t know when it’s okay to ask questions. "
            "How should a junior analyst behave so I don’t look clueless but still learn?”"
        ),
    ),
}


def list_modes() -> List[ModeInfo]:
    return [MODE_CATALOG[mode] for mode in MentorMode]


def mode_label(mode: MentorMode) -> str:
    return MODE_CATALOG[mode].label
