from pydantic import BaseModel, Field
from typing import Optional

class WeatherInfo(BaseModel):
    """Schema for returning weather information."""
    location: Optional[str] = Field(None, examples=["Shimla"])
    temperature_celsius: float = Field(..., examples=[15.5])
    condition: str = Field(..., examples=["Rain"])
    description: str = Field("", examples=["light rain"])
    humidity_percent: float = Field(..., examples=[60])
    wind_speed_kph: float = Field(..., examples=[10.5])
    summary: str = Field("", examples=["Rain, 16°C"])
