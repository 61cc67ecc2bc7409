from fastapi import APIRouter, Depends, HTTPException

from core.exceptions import ExternalServiceError, StaleResultError
from core.security import get_current_user
from schemas.draft_schema import TripDraft, TripDraftUpdate
from services import planner_service
from services.draft_service import draft_store

router = APIRouter(
    prefix="/drafts",
    tags=["Drafts"],
    responses={404: {"description": "Not found"}},
)

@router.get("/current", response_model=TripDraft)
def get_draft(current_user: dict = Depends(get_current_user)):
    """Returns the trip the current user is planning."""
    draft = draft_store.get(current_user['uid'])
    if draft is None:
        raise HTTPException(status_code=404, detail="No trip draft found.")
    return draft

@router.put("/current", response_model=TripDraft)
def put_draft(
    update: TripDraftUpdate,
    current_user: dict = Depends(get_current_user)
):
    """
    Replaces the trip the current user is planning.
    Travel options and packing list computed for the previous version are dropped.
    """
    return draft_store.put(current_user['uid'], update)

@router.delete("/current")
def delete_draft(current_user: dict = Depends(get_current_user)):
    if not draft_store.clear(current_user['uid']):
        raise HTTPException(status_code=404, detail="No trip draft found.")
    return {"message": "Draft cleared"}

@router.post("/current/travel-options", response_model=TripDraft)
async def refresh_travel_options(current_user: dict = Depends(get_current_user)):
    """
    Computes travel options for the draft and stores them on it.
    Answers 409 when the draft was edited before the lookup finished; the result is then discarded.
    """
    try:
        return await planner_service.plan_draft_travel_options(current_user['uid'])
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StaleResultError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ExternalServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))

@router.post("/current/packing-list", response_model=TripDraft)
def refresh_packing_list(current_user: dict = Depends(get_current_user)):
    """Generates the packing list for the draft and stores it on it."""
    try:
        return planner_service.plan_draft_packing_list(current_user['uid'])
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StaleResultError as e:
        raise HTTPException(status_code=409, detail=str(e))
