from fastapi import APIRouter, HTTPException, Query
from typing import Optional

from core.exceptions import ExternalServiceError
from schemas.travel_schema import (
    EstimateRequest,
    EstimateResponse,
    GeocodedPlace,
    RouteTotalsRequest,
    RouteTotalsResponse,
    TravelOptionsResponse,
)
from services import estimate_service, location_service, planner_service

router = APIRouter(
    prefix="/travel",
    tags=["Travel"],
    responses={404: {"description": "Not found"}},
)

@router.post("/estimate", response_model=EstimateResponse)
def estimate(request: EstimateRequest):
    """
    Estimates time, cost and CO2 per transport mode for a known distance.
    A missing or non-positive distance gives `available: false` and no options.
    """
    options = estimate_service.estimate_travel(
        request.distance_km,
        international=request.international,
        drive_duration_h=request.drive_duration_h,
    )
    return {
        "available": options is not None,
        "distance_km": request.distance_km,
        "international": request.international,
        "options": options or [],
    }

@router.get("/options", response_model=TravelOptionsResponse)
async def travel_options(
    origin: Optional[str] = Query(None, alias="from", description="Where the trip starts"),
    destination: Optional[str] = Query(None, alias="to", description="Where the trip goes"),
):
    """
    Compares travel modes between two places given by name.
    Trips between different countries only compare flight and ship.
    """
    if not origin or not destination:
        raise HTTPException(status_code=400, detail="Both 'from' and 'to' parameters are required")

    try:
        return await planner_service.get_travel_options(origin, destination)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ExternalServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"An unexpected error occurred: {e}")

@router.post("/route-totals", response_model=RouteTotalsResponse)
async def route_totals(request: RouteTotalsRequest):
    """
    Routes through an ordered list of stops and totals time, cost and CO2 for the whole trip.
    """
    try:
        return await planner_service.get_route_totals(request.stops)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"An unexpected error occurred: {e}")

@router.get("/locations/search", response_model=list[GeocodedPlace])
async def search_locations(
    q: str = Query(..., description="Search query for locations")
):
    """
    Suggests places matching a search query.
    """
    if len(q.strip()) < 2:
        raise HTTPException(status_code=400, detail="Search query must be at least 2 characters long")

    try:
        return await location_service.search_locations(q)
    except ExternalServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"An unexpected error occurred: {e}")
