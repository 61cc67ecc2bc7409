import datetime
from enum import Enum
from pydantic import BaseModel, Field, model_validator
from typing import List, Optional

from schemas.packing_schema import PackingCategory
from schemas.travel_schema import Coordinates, TravelEstimate

class TripType(str, Enum):
    BUSINESS = "business"
    LEISURE = "leisure"
    ADVENTURE = "adventure"
    FAMILY = "family"
    ROMANTIC = "romantic"
    SOLO = "solo"

class TripDestination(BaseModel):
    """One stop of a multi-destination trip."""
    name: str = Field(..., min_length=1, examples=["Jaipur"])
    coordinates: Optional[Coordinates] = None

class TripCreate(BaseModel):
    """
    Schema for saving a trip.
    A trip has either a single `destination` or an ordered `destinations` list, never both.
    """
    trip_type: TripType = Field(..., examples=["leisure"])
    start_date: datetime.date = Field(..., examples=["2025-12-20"])
    end_date: datetime.date = Field(..., examples=["2025-12-27"])

    # Single-destination trip
    destination: Optional[str] = Field(None, examples=["Goa"])
    coordinates: Optional[Coordinates] = None
    origin_coordinates: Optional[Coordinates] = None
    weather_summary: Optional[str] = Field(None, examples=["Rain, 27°C"])
    travel_options: Optional[List[TravelEstimate]] = None

    # Multi-destination trip
    destinations: Optional[List[TripDestination]] = None
    total_time: Optional[float] = None
    total_cost: Optional[float] = None
    total_co2: Optional[float] = None

    route: Optional[List[List[float]]] = None  # [lat, lon] pairs
    packing_list: Optional[List[PackingCategory]] = None

    @model_validator(mode="after")
    def check_destination_shape(self):
        has_single = bool(self.destination and self.destination.strip())
        has_multi = bool(self.destinations)
        if has_single == has_multi:
            raise ValueError("exactly one of 'destination' or 'destinations' is required")
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

class TripInfo(TripCreate):
    """Schema for returning a saved trip."""
    id: str
    user_id: str
    created_at: str
