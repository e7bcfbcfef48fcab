from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from mentor_api.core.config import Settings, get_settings
from mentor_api.schemas.briefing import Briefing, BriefingKind
from mentor_api.schemas.mentor import DEFAULT_MODE, ErrorResponse
from mentor_api.services.briefing_service import build_briefing
from mentor_api.services.prompt_builder import resolve_mode

router = APIRouter()


@router.get(
    "/briefings/{kind}",
    response_model=Briefing,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_briefing(
    kind: str,
    mode: str = Query(DEFAULT_MODE.value),
    case_tag: Optional[str] = Query(None, alias="caseTag"),
    settings: Settings = Depends(get_settings),
):
    """
    Return a canned assistant message for the chat transcript.

    - `pre_brief`: questions to answer before an activity (email, pitch, busy week).
    - `after_action`: reflection questions once it is done.

    The message is not sent to the model; the client appends it to the history
    of the current mode so the user's reply continues the conversation.
    """
    try:
        briefing_kind = BriefingKind(kind)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown briefing '{kind}'")

    resolved = resolve_mode(mode, strict=settings.STRICT_MODE)
    return build_briefing(briefing_kind, resolved, case_tag)
