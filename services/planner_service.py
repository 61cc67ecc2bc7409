import asyncio
import logging
from typing import List

from core.exceptions import ExternalServiceError
from schemas.travel_schema import Coordinates
from services import estimate_service, location_service, map_service, packing_service
from services.draft_service import draft_store

logger = logging.getLogger(__name__)

async def get_travel_options(origin_query: str, destination_query: str):
    """
    Looks up both places, routes between them and estimates every travel mode.

    Both places are geocoded concurrently. Trips between countries compare
    flight and ship over the great-circle distance when no road route exists;
    otherwise a routing failure leaves the estimate unavailable.
    """
    origin, destination = await asyncio.gather(
        location_service.geocode(origin_query),
        location_service.geocode(destination_query),
    )
    if origin is None:
        raise ValueError(f"Could not find location: {origin_query}")
    if destination is None:
        raise ValueError(f"Could not find location: {destination_query}")

    international = estimate_service.is_international(origin.country_code, destination.country_code)

    route = None
    try:
        route = await map_service.get_route([
            Coordinates(lat=origin.lat, lon=origin.lon),
            Coordinates(lat=destination.lat, lon=destination.lon),
        ])
    except ExternalServiceError as e:
        logger.warning("Routing %s -> %s failed: %s", origin.name, destination.name, e)

    if route is not None:
        distance_km = route.distance_km
        options = estimate_service.estimate_travel(distance_km, international, drive_duration_h=route.duration_h)
    elif international:
        distance_km = round(estimate_service.calculate_distance(origin.lat, origin.lon, destination.lat, destination.lon), 2)
        options = estimate_service.estimate_travel(distance_km, international)
    else:
        distance_km = None
        options = None

    logger.info("Travel options %s -> %s: %s", origin.name, destination.name,
                f"{len(options)} modes over {distance_km} km" if options else "unavailable")

    return {
        "available": options is not None,
        "distance_km": distance_km,
        "international": international,
        "options": options or [],
        "origin": origin,
        "destination": destination,
        "route": route,
    }

async def get_route_totals(stops: List[Coordinates]):
    """Routes through the stops in order and totals time, cost and CO2."""
    try:
        route = await map_service.get_route(stops)
    except ExternalServiceError as e:
        logger.warning("Routing through %d stops failed: %s", len(stops), e)
        route = None

    totals = estimate_service.estimate_route_totals(route.distance_km, route.duration_h) if route else None

    return {
        "available": totals is not None,
        "route": route,
        "totals": totals,
    }

async def plan_draft_travel_options(user_id: str):
    """
    Computes travel options for the user's current draft and stores them on it.
    Raises StaleResultError if the draft was edited while the lookup ran.
    """
    draft = draft_store.get(user_id)
    if draft is None:
        raise LookupError("No trip draft found.")
    if not draft.origin:
        raise ValueError("The trip draft has no origin to travel from.")

    result = await get_travel_options(draft.origin, draft.destination)
    return draft_store.apply_travel_options(user_id, draft.version, result["options"])

def plan_draft_packing_list(user_id: str):
    """Generates the packing list for the user's current draft and stores it on it."""
    draft = draft_store.get(user_id)
    if draft is None:
        raise LookupError("No trip draft found.")

    categories = packing_service.generate_packing_list(draft.trip_type.value, draft.destination, draft.weather_summary)
    return draft_store.apply_packing_list(user_id, draft.version, categories)
