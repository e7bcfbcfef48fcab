import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import ValidationError

from mentor_api.schemas.skills import SkillId, SkillScores, SkillsPath, SkillsPathStep
from mentor_api.services.store import KeyValueStore

logger = logging.getLogger(__name__)

SKILLS_PATH_KEY = "jam_skills_path_v1"
CHECK_IN_EVERY = 5

SKILL_LABELS: Dict[SkillId, str] = {
    SkillId.DATA: "Data work (pulling, cleaning, basic analysis)",
    SkillId.MODELING: "Modeling (Excel, valuations, scenarios)",
    SkillId.COMMUNICATION: "Communication (emails, IC notes, PM updates)",
    SkillId.JUDGMENT: "Investment judgment (sizing, catalysts, risk thinking)",
    SkillId.TIME: "Time & workflow management",
}


def weakest_skills(scores: SkillScores, count: int = 2) -> List[SkillId]:
    """Lowest confidence first; ties keep the catalogue order."""
    ranked = sorted(SkillId, key=lambda skill: getattr(scores, skill.value))
    return ranked[:count]


def generate_skills_path(scores: SkillScores, now: Optional[datetime] = None) -> SkillsPath:
    first, second = [SKILL_LABELS[s] for s in weakest_skills(scores)]

    steps = [
        SkillsPathStep(
            week=1,
            label="Communication Coach",
            description=(
                f"Focus on communication and soft skills, especially around \"{first}\" and \"{second}\". "
                "Aim for ~3 real emails or updates this week using Communication Coach."
            ),
        ),
        SkillsPathStep(
            week=2,
            label="PM Simulator",
            description=(
                "Pick ONE investment idea and run 2 deeper PM Simulator sessions to pressure-test "
                "the thesis like an investment committee would."
            ),
        ),
        SkillsPathStep(
            week=3,
            label="Workflow Helper",
            description=(
                "Use Workflow Helper to structure a full week: daily tasks, research blocks, "
                "and check-ins with your PM around that same idea."
            ),
        ),
    ]
    return SkillsPath(steps=steps, generated_at=now or datetime.now(timezone.utc))


def check_in_prompt(path: Optional[SkillsPath], interactions: int) -> Optional[str]:
    if path is None or interactions <= 0 or interactions % CHECK_IN_EVERY != 0:
        return None
    focus = path.steps[0].label if path.steps else "your main focus area"
    return f"Quick check-in on {focus}: since we started, what has changed, and where are you still stuck?"


def storage_key(client_id: str) -> str:
    return f"{SKILLS_PATH_KEY}:{client_id}"


def load_skills_path(store: KeyValueStore, client_id: str) -> Optional[SkillsPath]:
    raw = store.get(storage_key(client_id))
    if raw is None:
        return None
    try:
        return SkillsPath.model_validate(raw)
    except ValidationError as e:
        # treat like a missing path so the client asks for a new self-check
        logger.warning("Discarding invalid skills path for %s: %s", client_id, e)
        return None


def save_skills_path(store: KeyValueStore, client_id: str, path: SkillsPath) -> None:
    store.set(storage_key(client_id), path.model_dump(mode="json", by_alias=True))
