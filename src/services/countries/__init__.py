"""Country metadata lookups backed by REST Countries.

Public API:
    - CountriesClient: Async HTTP client for exact-name country lookups
    - create_countries_client: Factory function to create the client
    - CountryRecord: Pydantic schema for the fields the resolver needs
"""
from src.services.countries.client import CountriesClient, create_countries_client
from src.services.countries.schemas import CountryRecord

__all__ = [
    "CountriesClient",
    "create_countries_client",
    "CountryRecord",
]
