from src.core.config import ApiSettings
from src.services.http import AsyncJsonClient


class ExchangeRateClient(AsyncJsonClient):
    """Async wrapper around the Frankfurter exchange-rate API."""

    def __init__(
        self,
        *,
        base_url: str = "https://api.frankfurter.app",
        timeout_s: float = 10.0,
    ) -> None:
        super().__init__(base_url=base_url, timeout_s=timeout_s)

    async def rate(self, base: str, target: str = "USD") -> float:
        """Return how many ``target`` units one ``base`` unit buys."""

        data = await self._aget("/latest", {"from": base, "to": target})
        try:
            return float(data["rates"][target])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Malformed exchange-rate payload for {base}->{target}") from exc


def create_exchange_rate_client(settings: ApiSettings) -> ExchangeRateClient:
    """Instantiate the exchange-rate client using project settings."""

    return ExchangeRateClient(timeout_s=settings.http_timeout_s)
