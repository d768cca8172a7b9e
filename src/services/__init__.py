"""External service integrations for destination suggestions.

This package provides thin async clients for the third-party data sources the
destination pipeline merges into each card:

- Exchange rate: budget conversion to USD for the model prompt
- Countries: flag, currency and capital metadata by exact country name
- Geocoding: city coordinates
- Weather: current temperature and conditions

Each service module exports:
    - A client class built on ``AsyncJsonClient``
    - create_*: Factory to create the client from ``ApiSettings``
    - Pydantic schemas for the provider payloads it parses

Example Usage:
    >>> from src.services import create_weather_client
    >>> from src.core.config import ApiSettings
    >>>
    >>> settings = ApiSettings.from_env()
    >>> weather = create_weather_client(settings)
    >>> snapshot = await weather.current("Lisbon")
"""

from src.services.exchange_rate import ExchangeRateClient, create_exchange_rate_client
from src.services.countries import CountriesClient, CountryRecord, create_countries_client
from src.services.geocoding import GeocodeResult, OpenWeatherGeocoder, create_geocoder
from src.services.weather import WeatherClient, create_weather_client

__all__ = [
    # Exchange rate
    "ExchangeRateClient",
    "create_exchange_rate_client",
    # Countries
    "CountriesClient",
    "CountryRecord",
    "create_countries_client",
    # Geocoding
    "GeocodeResult",
    "OpenWeatherGeocoder",
    "create_geocoder",
    # Weather
    "WeatherClient",
    "create_weather_client",
]
