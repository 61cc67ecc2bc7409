import asyncio

import httpx
import polyline
import pytest

from core.config import settings
from core.exceptions import ExternalServiceError
from schemas.travel_schema import Coordinates
from services import location_service, map_service, weather_service

_RealAsyncClient = httpx.AsyncClient


@pytest.fixture
def mock_http(monkeypatch):
    """Routes every httpx.AsyncClient created by the services through a handler."""
    def install(handler):
        requests = []

        def recording_handler(request):
            requests.append(request)
            return handler(request)

        def client_factory(*args, **kwargs):
            return _RealAsyncClient(transport=httpx.MockTransport(recording_handler))

        monkeypatch.setattr(httpx, "AsyncClient", client_factory)
        return requests
    return install


NOMINATIM_KATHMANDU = [{
    "lat": "27.7083",
    "lon": "85.3206",
    "name": "Kathmandu",
    "display_name": "Kathmandu, Bagmati Province, Nepal",
    "address": {"city": "Kathmandu", "country": "Nepal", "country_code": "np"},
}]


def test_geocode_parses_first_result(mock_http):
    requests = mock_http(lambda request: httpx.Response(200, json=NOMINATIM_KATHMANDU))

    place = asyncio.run(location_service.geocode("Kathmandu"))

    assert place.name == "Kathmandu"
    assert place.lat == pytest.approx(27.7083)
    assert place.lon == pytest.approx(85.3206)
    assert place.country_code == "NP"
    assert requests[0].url.params["q"] == "Kathmandu"
    assert requests[0].url.params["limit"] == "1"
    assert requests[0].headers["user-agent"] == settings.NOMINATIM_USER_AGENT


def test_geocode_no_match_returns_none(mock_http):
    mock_http(lambda request: httpx.Response(200, json=[]))
    assert asyncio.run(location_service.geocode("Atlantis Nowhere")) is None


def test_search_skips_short_queries_without_calling_out(mock_http):
    requests = mock_http(lambda request: httpx.Response(200, json=NOMINATIM_KATHMANDU))
    assert asyncio.run(location_service.search_locations("K")) == []
    assert requests == []


def test_geocode_upstream_error(mock_http):
    mock_http(lambda request: httpx.Response(503, text="overloaded"))
    with pytest.raises(ExternalServiceError, match="503"):
        asyncio.run(location_service.geocode("Pokhara"))


def test_route_decodes_polyline_geometry(mock_http):
    line = [(28.6139, 77.209), (27.1767, 78.0081)]
    body = {
        "code": "Ok",
        "routes": [{"distance": 233450.0, "duration": 12600.0, "geometry": polyline.encode(line)}],
    }
    requests = mock_http(lambda request: httpx.Response(200, json=body))

    route = asyncio.run(map_service.get_route([
        Coordinates(lat=28.6139, lon=77.209),
        Coordinates(lat=27.1767, lon=78.0081),
    ]))

    assert route.distance_km == 233.45
    assert route.duration_h == 3.5
    assert route.geometry == [[lat, lon] for lat, lon in line]
    assert requests[0].url.path == "/route/v1/driving/77.209,28.6139;78.0081,27.1767"
    assert requests[0].url.params["geometries"] == "polyline"


def test_route_not_found_returns_none(mock_http):
    mock_http(lambda request: httpx.Response(400, json={"code": "NoRoute", "message": "Impossible route"}))
    route = asyncio.run(map_service.get_route([
        Coordinates(lat=51.5, lon=-0.12),
        Coordinates(lat=40.71, lon=-74.0),
    ]))
    assert route is None


def test_route_needs_two_points():
    with pytest.raises(ValueError):
        asyncio.run(map_service.get_route([Coordinates(lat=0, lon=0)]))


def test_route_upstream_error(mock_http):
    mock_http(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(ExternalServiceError, match="OSRM"):
        asyncio.run(map_service.get_route([Coordinates(lat=1, lon=1), Coordinates(lat=2, lon=2)]))


def test_weather_summary(mock_http, monkeypatch):
    monkeypatch.setattr(settings, "OPENWEATHER_API_KEY", "test-key")
    body = {
        "name": "Shimla",
        "main": {"temp": 15.6, "humidity": 81},
        "weather": [{"main": "Rain", "description": "light rain"}],
        "wind": {"speed": 2.5},
    }
    requests = mock_http(lambda request: httpx.Response(200, json=body))

    weather = asyncio.run(weather_service.get_weather_for_location(31.1, 77.17))

    assert weather["summary"] == "Rain, 16°C"
    assert weather["condition"] == "Rain"
    assert weather["description"] == "light rain"
    assert weather["wind_speed_kph"] == 9.0
    assert requests[0].url.params["units"] == "metric"


def test_weather_without_api_key(monkeypatch):
    monkeypatch.setattr(settings, "OPENWEATHER_API_KEY", None)
    with pytest.raises(ValueError):
        asyncio.run(weather_service.get_weather_for_location(0, 0))


def test_weather_malformed_response(mock_http, monkeypatch):
    monkeypatch.setattr(settings, "OPENWEATHER_API_KEY", "test-key")
    mock_http(lambda request: httpx.Response(200, json={"cod": 200}))
    with pytest.raises(ExternalServiceError):
        asyncio.run(weather_service.get_weather_for_location(0, 0))
