from pydantic import BaseModel, Field
from typing import List, Optional

class PackingItem(BaseModel):
    """Schema for a single item in a packing list."""
    id: str = Field(..., examples=["clothing-0"])
    name: str = Field(..., examples=["Underwear"])
    category: str = Field(..., examples=["clothing"])
    packed: bool = False
    essential: bool = False

class PackingCategory(BaseModel):
    """A named group of packing items, e.g. Clothing or Travel Documents."""
    id: str = Field(..., examples=["clothing"])
    name: str = Field(..., examples=["Clothing"])
    icon: str = Field("", examples=["👕"])
    items: List[PackingItem] = []

class PackingListRequest(BaseModel):
    """Schema for requesting a packing list without a saved trip."""
    trip_type: str = Field(..., examples=["adventure"])
    destination: str = Field("", examples=["Hunza Valley"])
    weather_hint: Optional[str] = Field(None, examples=["light rain"])

class PackingList(BaseModel):
    """Schema for returning a full packing list with its progress."""
    trip_id: Optional[str] = None
    categories: List[PackingCategory]
    packed_items: int = 0
    total_items: int = 0
    progress_percent: float = 0.0
