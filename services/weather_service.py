import logging

import httpx

from core.config import settings
from core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

async def get_weather_for_location(lat: float, lon: float):
    """
    Fetches the current weather for a specific latitude and longitude
    from the OpenWeatherMap API.
    """
    api_key = settings.OPENWEATHER_API_KEY
    if not api_key:
        raise ValueError("OpenWeatherMap API key is not configured.")

    url = "https://api.openweathermap.org/data/2.5/weather"
    params = {
        "lat": lat,
        "lon": lon,
        "appid": api_key,
        "units": "metric"  # Get temperature in Celsius
    }

    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(url, params=params, timeout=settings.HTTP_TIMEOUT_SECONDS)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError("OpenWeatherMap", e.response.text, e.response.status_code)
        except httpx.HTTPError as e:
            logger.error("Weather request for (%s, %s) failed: %s", lat, lon, e)
            raise ExternalServiceError("OpenWeatherMap", str(e))

    try:
        conditions = data["weather"][0]
        temperature = data["main"]["temp"]
        return {
            "location": data.get("name"),
            "temperature_celsius": temperature,
            "condition": conditions.get("main", ""),
            "description": conditions.get("description", ""),
            "humidity_percent": data["main"].get("humidity", 0),
            "wind_speed_kph": round(data.get("wind", {}).get("speed", 0) * 3.6, 1),  # m/s to kph
            "summary": f"{conditions.get('main', '')}, {round(temperature)}°C",
        }
    except (KeyError, IndexError, TypeError) as e:
        raise ExternalServiceError("OpenWeatherMap", f"unexpected response format: {e}")
