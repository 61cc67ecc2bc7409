from fastapi import APIRouter, Depends, HTTPException
from schemas.packing_schema import PackingList, PackingListRequest, PackingItem
from services import packing_service, trip_service
from core.security import get_current_user

router = APIRouter(
    prefix="/packing",
    tags=["packing"],
    responses={404: {"description": "Not found"}},
)

def _get_owned_trip(trip_id: str, user_id: str):
    trip = trip_service.get_trip_by_id(trip_id)
    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")
    if trip.get('user_id') != user_id:
        raise HTTPException(status_code=403, detail="You are not authorized to access this packing list.")
    return trip

@router.post("/generate", response_model=PackingList)
def generate_checklist(request: PackingListRequest):
    """
    Generates a packing list for a trip that has not been saved yet.
    Nothing is stored.
    """
    categories = packing_service.generate_packing_list(request.trip_type, request.destination, request.weather_hint)
    return packing_service.build_packing_response(categories)

@router.post("/{trip_id}", response_model=PackingList)
def generate_checklist_for_trip(
    trip_id: str,
    current_user: dict = Depends(get_current_user)
):
    """
    Generates the packing list of a saved trip from its trip type, destination and weather.
    If a list for this trip already exists, it will be overwritten.
    """
    trip = _get_owned_trip(trip_id, current_user['uid'])

    destination = trip.get('destination') or ", ".join(d.get('name', '') for d in trip.get('destinations', []))
    categories = packing_service.generate_packing_list(trip.get('trip_type', ''), destination, trip.get('weather_summary'))
    packing_service.save_packing_list(trip_id, categories)

    return packing_service.build_packing_response(categories, trip_id)

@router.get("/{trip_id}", response_model=PackingList)
def get_checklist(
    trip_id: str,
    current_user: dict = Depends(get_current_user)
):
    """
    Retrieves the packing checklist for a specific trip.
    """
    _get_owned_trip(trip_id, current_user['uid'])

    categories = packing_service.get_packing_list(trip_id)
    if categories is None:
        raise HTTPException(status_code=404, detail="Packing list not found for this trip.")

    return packing_service.build_packing_response(categories, trip_id)

@router.put("/{trip_id}/items/{category_id}/{item_id}/toggle", response_model=PackingItem)
def toggle_item(
    trip_id: str,
    category_id: str,
    item_id: str,
    current_user: dict = Depends(get_current_user)
):
    """
    Toggles the 'packed' status of a single checklist item.
    """
    _get_owned_trip(trip_id, current_user['uid'])

    updated_item = packing_service.toggle_packed_status(trip_id, category_id, item_id)
    if not updated_item:
        raise HTTPException(status_code=404, detail="Packing list item not found.")

    return updated_item
