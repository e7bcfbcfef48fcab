from fastapi import APIRouter, Depends, HTTPException, Query

from mentor_api.schemas.mentor import ErrorResponse
from mentor_api.schemas.skills import CheckInResponse, SkillScores, SkillsPath
from mentor_api.services.skills_service import check_in_prompt, generate_skills_path, load_skills_path, save_skills_path
from mentor_api.services.store import KeyValueStore, get_store

router = APIRouter()


@router.get(
    "/skills-path/{client_id}",
    response_model=SkillsPath,
    responses={404: {"model": ErrorResponse}},
)
def get_skills_path(client_id: str, store: KeyValueStore = Depends(get_store)):
    """
    Return the saved 3-week skills path for a client.

    A **404** means the client has not completed the self-check yet (or the
    stored path could not be read), and the UI should show the self-check form.
    """
    path = load_skills_path(store, client_id)
    if path is None:
        raise HTTPException(status_code=404, detail="No skills path saved for this client")
    return path


@router.post("/skills-path/{client_id}", response_model=SkillsPath)
def create_skills_path(client_id: str, scores: SkillScores, store: KeyValueStore = Depends(get_store)):
    """
    Generate a 3-week skills path from a self-assessment and save it for the client.

    **Parameters:**
    - One confidence score per skill, 1 (not confident) to 5 (very confident).
      Missing skills default to 3; out-of-range values are clamped.

    **Example Body:**
    ```json
    {"data": 4, "modeling": 2, "communication": 1, "judgment": 3, "time": 5}
    ```
    """
    path = generate_skills_path(scores)
    save_skills_path(store, client_id, path)
    return path


@router.get("/skills-path/{client_id}/check-in", response_model=CheckInResponse)
def get_check_in(
    client_id: str,
    interactions: int = Query(..., ge=0, description="Successful exchanges so far in this session"),
    store: KeyValueStore = Depends(get_store),
):
    """
    Every 5th successful exchange, return a check-in question about the first
    step of the client's skills path. Otherwise `prompt` is null.
    """
    path = load_skills_path(store, client_id)
    return CheckInResponse(prompt=check_in_prompt(path, interactions))
