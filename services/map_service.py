import logging
from typing import List, Optional

import httpx
import polyline

from core.config import settings
from core.exceptions import ExternalServiceError
from schemas.travel_schema import Coordinates, RouteInfo

logger = logging.getLogger(__name__)

def _osrm_code(response: httpx.Response) -> Optional[str]:
    try:
        return response.json().get("code")
    except ValueError:
        return None

async def get_route(points: List[Coordinates]) -> Optional[RouteInfo]:
    """
    Calculates a driving route through the given points, in order, using OSRM.

    Returns the road distance, the driving duration and the route line as
    [lat, lon] pairs, or None when OSRM finds no route between the points.
    """
    if len(points) < 2:
        raise ValueError("A route needs at least two points.")

    # OSRM expects lon,lat pairs separated by semicolons
    waypoints = ";".join(f"{point.lon},{point.lat}" for point in points)
    url = f"{settings.OSRM_URL}/route/v1/driving/{waypoints}"
    params = {
        "overview": "full",
        "geometries": "polyline",
    }

    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(url, params=params, timeout=settings.HTTP_TIMEOUT_SECONDS)
            # OSRM answers 400 with code "NoRoute" when points are unreachable by road
            if response.status_code == 400 and _osrm_code(response) == "NoRoute":
                logger.info("No driving route through %d points", len(points))
                return None
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError("OSRM", e.response.text, e.response.status_code)
        except httpx.HTTPError as e:
            logger.error("Route request failed: %s", e)
            raise ExternalServiceError("OSRM", str(e))
        except ValueError:
            raise ExternalServiceError("OSRM", "response was not valid JSON")

    if data.get("code") != "Ok" or not data.get("routes"):
        logger.info("OSRM returned no route (code=%s)", data.get("code"))
        return None

    route = data["routes"][0]
    geometry = route.get("geometry") or ""

    return RouteInfo(
        distance_km=round(route.get("distance", 0) / 1000, 2),
        duration_h=round(route.get("duration", 0) / 3600, 2),
        geometry=[[lat, lon] for lat, lon in polyline.decode(geometry)] if geometry else [],
    )
