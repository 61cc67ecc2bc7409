import datetime
from pydantic import BaseModel, Field
from typing import List, Optional

from schemas.packing_schema import PackingCategory
from schemas.travel_schema import TravelEstimate
from schemas.trip_schema import TripType

class TripDraftUpdate(BaseModel):
    """The user-editable part of a trip that is still being planned."""
    destination: str = Field(..., min_length=1, examples=["Manali"])
    origin: Optional[str] = Field(None, examples=["Delhi"])
    trip_type: TripType = Field(TripType.LEISURE, examples=["adventure"])
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    weather_summary: Optional[str] = None

class TripDraft(TripDraftUpdate):
    """
    A user's current trip draft.
    `version` changes on every write, so results computed for an older version can be recognised.
    """
    version: int = 0
    travel_options: List[TravelEstimate] = []
    packing_list: List[PackingCategory] = []
