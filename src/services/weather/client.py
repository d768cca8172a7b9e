from src.core.config import ApiSettings
from src.core.schemas import WeatherSnapshot
from src.services.http import AsyncJsonClient
from src.services.weather.schemas import CurrentWeather


class WeatherClient(AsyncJsonClient):
    """Async wrapper around the OpenWeather current weather API."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.openweathermap.org",
        units: str = "metric",
        timeout_s: float = 10.0,
    ) -> None:
        super().__init__(base_url=base_url, timeout_s=timeout_s)
        self.api_key = api_key
        self.units = units

    async def current(self, place: str) -> WeatherSnapshot:
        """Fetch the current weather for a free-text place name.

        HTTP and validation errors propagate to the caller.
        """

        data = await self._aget(
            "/data/2.5/weather",
            {"q": place, "appid": self.api_key, "units": self.units},
        )
        return CurrentWeather.model_validate(data).to_snapshot()


def create_weather_client(settings: ApiSettings) -> WeatherClient:
    """Instantiate the weather client using project settings."""

    api_key = settings.ensure("openweather_api_key")
    return WeatherClient(api_key, timeout_s=settings.http_timeout_s)
