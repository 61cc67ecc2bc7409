from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

# Import schemas, services, and security dependencies
from schemas.trip_schema import TripCreate, TripInfo
from core.security import get_current_user
from services import trip_service

router = APIRouter(
    prefix="/trips",
    tags=["Trips"],
    responses={404: {"description": "Not found"}},
)

@router.post("/save", response_model=TripInfo, status_code=status.HTTP_201_CREATED)
async def save_trip(
    trip: TripCreate,
    current_user: dict = Depends(get_current_user)
):
    """
    Saves a single- or multi-destination trip for the current user.
    """
    try:
        return trip_service.save_trip_for_user(trip_data=trip, user_id=current_user['uid'])
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"An unexpected error occurred: {e}")

@router.get("/user/{user_id}", response_model=List[TripInfo])
async def get_user_trips(
    user_id: str,
    current_user: dict = Depends(get_current_user)
):
    """
    Retrieves all trips of a user, newest first. Users can only list their own trips.
    """
    if user_id != current_user['uid']:
        raise HTTPException(status_code=403, detail="Forbidden")

    try:
        return trip_service.get_trips_for_user(user_id=user_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"An unexpected error occurred: {e}")

@router.get("/{trip_id}", response_model=TripInfo)
async def get_single_trip(
    trip_id: str,
    current_user: dict = Depends(get_current_user)
):
    """
    Retrieves a single trip by its ID.
    Ensures the trip belongs to the currently authenticated user.
    """
    try:
        trip = trip_service.get_trip_by_id(trip_id=trip_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"An unexpected error occurred: {e}")

    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")
    if trip.get('user_id') != current_user['uid']:
        raise HTTPException(status_code=403, detail="Not authorized to access this trip")

    return trip

@router.delete("/{trip_id}")
async def delete_trip(
    trip_id: str,
    current_user: dict = Depends(get_current_user)
):
    """
    Deletes one of the current user's trips.
    Trips of other users are reported as not found.
    """
    try:
        deleted = trip_service.delete_trip_for_user(trip_id=trip_id, user_id=current_user['uid'])
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"An unexpected error occurred: {e}")

    if not deleted:
        raise HTTPException(status_code=404, detail="Trip not found")

    return {"message": "Trip deleted"}
