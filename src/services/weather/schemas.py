from typing import List
from pydantic import BaseModel, ConfigDict, Field

from src.core.schemas import WeatherSnapshot


class MainReadings(BaseModel):
    temp: float = Field(description="Temperature in the requested units")

    model_config = ConfigDict(extra="ignore")


class Condition(BaseModel):
    description: str

    model_config = ConfigDict(extra="ignore")


class CurrentWeather(BaseModel):
    """Subset of the OpenWeather ``/data/2.5/weather`` payload."""
    main: MainReadings
    weather: List[Condition] = Field(min_length=1)

    model_config = ConfigDict(extra="ignore")

    def to_snapshot(self) -> WeatherSnapshot:
        return WeatherSnapshot(temp=self.main.temp, description=self.weather[0].description)
