from typing import Optional

from src.core.config import ApiSettings
from src.services.geocoding.schemas import GeocodeResult
from src.services.http import AsyncJsonClient


class OpenWeatherGeocoder(AsyncJsonClient):
    """Async wrapper around the OpenWeather direct geocoding API."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.openweathermap.org",
        timeout_s: float = 10.0,
    ) -> None:
        super().__init__(base_url=base_url, timeout_s=timeout_s)
        self.api_key = api_key

    async def locate(self, query: str) -> Optional[GeocodeResult]:
        """Return the best match for a free-text place query, or ``None``.

        ``query`` is usually ``"{city},{ISO alpha-2 code}"``.
        """

        if not query:
            return None

        data = await self._aget(
            "/geo/1.0/direct",
            {"q": query, "limit": 1, "appid": self.api_key},
        )
        if not data:
            return None
        return GeocodeResult.model_validate(data[0])


def create_geocoder(settings: ApiSettings) -> OpenWeatherGeocoder:
    """Instantiate the geocoder using project settings."""

    api_key = settings.ensure("openweather_api_key")
    return OpenWeatherGeocoder(api_key, timeout_s=settings.http_timeout_s)
