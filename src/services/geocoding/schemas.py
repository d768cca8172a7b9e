from typing import Optional
from pydantic import BaseModel, ConfigDict
from src.core.types import Lat, Lon


class GeocodeResult(BaseModel):
    """A single hit from the OpenWeather direct geocoding endpoint."""
    name: Optional[str] = None
    lat: Lat
    lon: Lon
    country: Optional[str] = None
    state: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @property
    def latlng(self) -> tuple[float, float]:
        return (self.lat, self.lon)
