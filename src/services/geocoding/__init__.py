"""Geocoding services.

This module converts free-text place names into coordinates using the
OpenWeather direct geocoding API.

Public API:
    - OpenWeatherGeocoder: Async HTTP client returning the first match
    - create_geocoder: Factory function to create the geocoder
    - GeocodeResult: Pydantic schema for a geocoding hit
"""
from src.services.geocoding.client import OpenWeatherGeocoder, create_geocoder
from src.services.geocoding.schemas import GeocodeResult

__all__ = [
    "OpenWeatherGeocoder",
    "create_geocoder",
    "GeocodeResult",
]
