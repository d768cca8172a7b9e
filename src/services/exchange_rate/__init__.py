"""Currency exchange-rate lookups backed by the Frankfurter API.

Public API:
    - ExchangeRateClient: Async HTTP client returning a single conversion rate
    - create_exchange_rate_client: Factory function to create the client
"""
from src.services.exchange_rate.client import ExchangeRateClient, create_exchange_rate_client

__all__ = [
    "ExchangeRateClient",
    "create_exchange_rate_client",
]
