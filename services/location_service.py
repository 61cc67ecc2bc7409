import logging
from typing import List, Optional

import httpx

from core.config import settings
from core.exceptions import ExternalServiceError
from schemas.travel_schema import GeocodedPlace

logger = logging.getLogger(__name__)

def _to_place(result: dict) -> Optional[GeocodedPlace]:
    try:
        lat = float(result["lat"])
        lon = float(result["lon"])
    except (KeyError, TypeError, ValueError):
        return None

    display_name = result.get("display_name", "")
    address = result.get("address") or {}
    country_code = address.get("country_code")

    return GeocodedPlace(
        name=result.get("name") or display_name.split(",")[0].strip(),
        display_name=display_name,
        lat=lat,
        lon=lon,
        country_code=country_code.upper() if country_code else None,
    )

async def search_locations(query: str, limit: int = 5) -> List[GeocodedPlace]:
    """
    Search for places matching a free-text query using Nominatim (OpenStreetMap).
    Returns up to `limit` suggestions, most relevant first.
    """
    if not query or len(query.strip()) < 2:
        return []

    url = f"{settings.NOMINATIM_URL}/search"
    params = {
        "q": query.strip(),
        "format": "json",
        "addressdetails": 1,
        "limit": limit,
    }
    # Nominatim's usage policy requires an identifying User-Agent
    headers = {"User-Agent": settings.NOMINATIM_USER_AGENT}

    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(url, params=params, headers=headers, timeout=settings.HTTP_TIMEOUT_SECONDS)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError("Nominatim", e.response.text, e.response.status_code)
        except httpx.HTTPError as e:
            logger.error("Geocoding request for %r failed: %s", query, e)
            raise ExternalServiceError("Nominatim", str(e))

    if not isinstance(data, list):
        raise ExternalServiceError("Nominatim", "unexpected response format")

    places = [place for place in (_to_place(result) for result in data) if place]
    logger.debug("Geocoded %r to %d place(s)", query, len(places))
    return places

async def geocode(query: str) -> Optional[GeocodedPlace]:
    """
    Resolves a free-text place to coordinates and a country code.
    Returns None when nothing matches.
    """
    places = await search_locations(query, limit=1)
    return places[0] if places else None
