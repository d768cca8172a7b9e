"""Current weather lookups backed by OpenWeather.

Public API:
    - WeatherClient: Async HTTP client returning a WeatherSnapshot
    - create_weather_client: Factory function to create the client
"""
from src.services.weather.client import WeatherClient, create_weather_client

__all__ = [
    "WeatherClient",
    "create_weather_client",
]
