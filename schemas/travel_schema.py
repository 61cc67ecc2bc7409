from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional

class TravelMode(str, Enum):
    """Transport modes, in the order they are compared."""
    FLIGHT = "flight"
    TRAIN = "train"
    BUS = "bus"
    DRIVE = "drive"
    SHIP = "ship"

class Coordinates(BaseModel):
    """Schema for a geographic point."""
    lat: float = Field(..., ge=-90, le=90, examples=[28.6139])
    lon: float = Field(..., ge=-180, le=180, examples=[77.2090])

class TravelEstimate(BaseModel):
    """Time, cost and emissions of one transport mode for a given distance."""
    mode: TravelMode
    time_h: float
    cost: float
    distance_km: float
    co2_kg: Optional[float] = None  # not modeled for ships
    fastest: bool = False
    cheapest: bool = False
    duration_label: str = ""

class EstimateRequest(BaseModel):
    """Schema for estimating travel options from a known distance."""
    distance_km: Optional[float] = Field(None, examples=[1000])
    international: bool = False
    drive_duration_h: Optional[float] = Field(None, examples=[14.5])

class EstimateResponse(BaseModel):
    """Estimates for every active mode, or `available=False` when there is nothing to estimate."""
    available: bool
    distance_km: Optional[float] = None
    international: bool = False
    options: List[TravelEstimate] = []

class GeocodedPlace(BaseModel):
    """A place as resolved by the geocoding service."""
    name: str
    display_name: str
    lat: float
    lon: float
    country_code: Optional[str] = None

class RouteInfo(BaseModel):
    """Schema for a calculated driving route."""
    distance_km: float
    duration_h: float
    geometry: List[List[float]] = []  # [lat, lon] pairs along the route

class TravelOptionsResponse(EstimateResponse):
    """Schema for the from/to travel options lookup."""
    origin: GeocodedPlace
    destination: GeocodedPlace
    route: Optional[RouteInfo] = None

class RouteTotals(BaseModel):
    """Aggregate figures for a multi-destination route."""
    distance_km: float
    total_time: float
    total_cost: float
    total_co2: float

class RouteTotalsRequest(BaseModel):
    """Schema for requesting a route through an ordered list of stops."""
    stops: List[Coordinates] = Field(..., min_length=2)

class RouteTotalsResponse(BaseModel):
    available: bool
    route: Optional[RouteInfo] = None
    totals: Optional[RouteTotals] = None
