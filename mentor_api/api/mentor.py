import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from mentor_api.core.config import Settings, get_settings
from mentor_api.core.errors import UpstreamError
from mentor_api.schemas.mentor import ErrorResponse, MentorRequest, MentorResponse, ModeInfo
from mentor_api.services.groq_service import generate_text, require_api_key
from mentor_api.services.mode_catalog import list_modes
from mentor_api.services.prompt_builder import build_system_prompt, resolve_mode

logger = logging.getLogger(__name__)

router = APIRouter()


def configured_settings(settings: Settings = Depends(get_settings)) -> Settings:
    # Runs before body validation, so a missing key wins over a bad request
    require_api_key(settings)
    return settings


@router.post(
    "/mentor",
    response_model=MentorResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def mentor_endpoint(request: MentorRequest, settings: Settings = Depends(configured_settings)):
    """
    Send the conversation for one mode to the mentor and get its next reply.

    The server is stateless: the client keeps one history per mode and sends the
    whole history (oldest first) with every request.

    **Parameters:**
    - **mode** (str): `communication_coach`, `pm_simulator`, `workflow_helper` or `safe_qa`.
      Unknown values fall back to `safe_qa` unless `STRICT_MODE` is enabled.
    - **messages** (list): `{role: "user" | "assistant", content: str}`, must not be empty.
    - **pmLens** (bool, optional): add the "If I were your PM reading this" section.
    - **caseTag** (str, optional): name of the ongoing case this chat belongs to.

    **Returns:**
    - `{"answer": "..."}`

    **Example Body:**
    ```json
    {
      "mode": "communication_coach",
      "messages": [{"role": "user", "content": "Can you help me tell my PM I'll miss Thursday's deadline?"}],
      "pmLens": true,
      "caseTag": "EV supplier deep-dive"
    }
    ```

    **Raises:**
    - **400 Bad Request**: missing/empty `mode` or `messages` (or unknown mode in strict mode).
    - **500 Internal Server Error**: `GROQ_API_KEY` not configured, or the provider call failed.
    """
    mode = resolve_mode(request.mode, strict=settings.STRICT_MODE)
    system_prompt = build_system_prompt(mode, request.pm_lens, request.case_tag)

    logger.info("Mentor request: mode=%s messages=%d pm_lens=%s", mode.value, len(request.messages), request.pm_lens)

    try:
        answer = await generate_text(system_prompt, request.messages, settings=settings)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error in /api/mentor")
        raise UpstreamError(str(e))

    return MentorResponse(answer=answer)


@router.get("/modes", response_model=List[ModeInfo])
async def modes_endpoint():
    """
    List the mentor modes in display order, with the label, tagline, input
    placeholder and example prompt the chat UI shows for each.
    """
    return list_modes()
