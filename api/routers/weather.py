from fastapi import APIRouter, Depends, HTTPException, Path

# Import schemas, services, and security dependencies
from core.exceptions import ExternalServiceError
from schemas.weather_schema import WeatherInfo
from services.weather_service import get_weather_for_location
from core.security import get_current_user

router = APIRouter(
    prefix="/weather",
    tags=["Weather"],
    responses={404: {"description": "Not found"}},
)

@router.get("/{lat}/{lon}", response_model=WeatherInfo)
async def get_weather(
    lat: float = Path(..., ge=-90, le=90, description="Latitude of the location"),
    lon: float = Path(..., ge=-180, le=180, description="Longitude of the location"),
    current_user: dict = Depends(get_current_user) # Protect the endpoint
):
    """
    Fetches the current weather for a given latitude and longitude.
    """
    try:
        return await get_weather_for_location(lat=lat, lon=lon)
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except ExternalServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"An unexpected error occurred: {e}")
