import logging
from typing import Optional
from urllib.parse import quote

from src.core.config import ApiSettings
from src.services.countries.schemas import CountryRecord
from src.services.http import AsyncJsonClient

logger = logging.getLogger(__name__)


class CountriesClient(AsyncJsonClient):
    """Async wrapper around the REST Countries v3.1 API."""

    def __init__(
        self,
        *,
        base_url: str = "https://restcountries.com/v3.1",
        timeout_s: float = 10.0,
    ) -> None:
        super().__init__(base_url=base_url, timeout_s=timeout_s)

    async def by_name(self, name: str) -> Optional[CountryRecord]:
        """Return the country whose name matches ``name`` exactly, or ``None``.

        REST Countries answers an unknown name with HTTP 404, which is reported
        here as a missing record rather than an error.
        """

        name = name.strip()
        if not name:
            return None

        response = await self._client.get(f"/name/{quote(name)}", params={"fullText": "true"})
        if response.status_code == 404:
            logger.info(f"No country record for {name!r}")
            return None
        response.raise_for_status()

        data = response.json()
        if not data:
            return None
        return CountryRecord.model_validate(data[0])


def create_countries_client(settings: ApiSettings) -> CountriesClient:
    """Instantiate the REST Countries client using project settings."""

    return CountriesClient(timeout_s=settings.http_timeout_s)
