"""Tests for location resolution and per-candidate destination assembly."""
from __future__ import annotations

import asyncio
from typing import List, Optional

import httpx
import pytest

from src.core.assembler import assemble_destination, assemble_destinations
from src.core.errors import CandidateSkipped
from src.core.resolver import resolve_location
from src.core.schemas import LocationCandidate, Resolved, Skipped, WeatherSnapshot
from src.services.countries import CountryRecord
from tests.stubs import StubCountries, StubGeocoder, StubLLM, StubWeather, make_country


@pytest.fixture
def countries() -> StubCountries:
    return StubCountries(
        {
            "United States": make_country(
                "United States", "US", capital="Washington, D.C.", capital_latlng=[38.89, -77.05],
                currencies={"USD": {"name": "United States dollar", "symbol": "$"}},
            ),
            "Japan": make_country(
                "Japan", "JP", capital="Tokyo", capital_latlng=[35.68, 139.75],
                currencies={"JPY": {"name": "Japanese yen", "symbol": "¥"}},
            ),
            "Antarctica": make_country("Antarctica", "AQ", currencies={}),
            "Nauru": make_country("Nauru", "NR", capital="Yaren", capital_latlng=None),
            "Erewhon": httpx.ConnectTimeout("timed out"),
        }
    )


@pytest.fixture
def geocoder() -> StubGeocoder:
    return StubGeocoder({"Austin,US": (30.27, -97.74), "Denver,US": (39.74, -104.99)})


def _city(name: str, country: str = "United States") -> LocationCandidate:
    return LocationCandidate(name=name, type="city", country=country)


def _country(name: str) -> LocationCandidate:
    return LocationCandidate(name=name, type="country")


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


async def test_resolve_city_uses_geocoder_with_country_code(countries, geocoder):
    location = await resolve_location(_city("Austin"), countries, geocoder)

    assert geocoder.calls == ["Austin,US"]
    assert location.display_name == "Austin"
    assert location.subtext == "United States"
    assert location.latlng == (30.27, -97.74)
    assert location.flag_url == "https://flagcdn.com/us.svg"
    assert location.currency_name == "United States dollar"


async def test_resolve_country_uses_capital_for_both_labels(countries, geocoder):
    location = await resolve_location(_country("Japan"), countries, geocoder)

    assert geocoder.calls == []
    assert location.display_name == "Tokyo"
    assert location.subtext == "Tokyo"
    assert location.latlng == (35.68, 139.75)
    assert location.currency_name == "Japanese yen"


async def test_resolve_trims_country_name(countries, geocoder):
    await resolve_location(_city("Austin", country="  United States "), countries, geocoder)
    assert countries.calls == ["United States"]


async def test_resolve_unknown_country_skips(countries, geocoder):
    with pytest.raises(CandidateSkipped, match="no country record"):
        await resolve_location(_city("Gondor City", country="Gondor"), countries, geocoder)


async def test_resolve_geocode_miss_skips(countries, geocoder):
    with pytest.raises(CandidateSkipped, match="geocoding"):
        await resolve_location(_city("Springfield"), countries, geocoder)


@pytest.mark.parametrize("name", ["Antarctica", "Nauru"])
async def test_resolve_country_without_capital_coordinates_skips(countries, geocoder, name):
    with pytest.raises(CandidateSkipped, match="capital"):
        await resolve_location(_country(name), countries, geocoder)


# ---------------------------------------------------------------------------
# Assembler
# ---------------------------------------------------------------------------


async def test_assemble_destination_builds_full_record(countries, geocoder):
    llm = StubLLM(attractions={"Austin": '["Texas State Capitol", "Zilker Park", "Sixth Street"]'})
    weather = StubWeather()

    outcome = await assemble_destination(
        _city("Austin"), llm=llm, countries=countries, geocoder=geocoder, weather=weather
    )

    assert isinstance(outcome, Resolved)
    payload = outcome.record.model_dump(mode="json")
    assert payload == {
        "name": "Austin",
        "capital": "United States",
        "flag": "https://flagcdn.com/us.svg",
        "currency": "United States dollar",
        "latlng": [30.27, -97.74],
        "weather": {"temp": 21.5, "description": "clear sky"},
        "attractions": ["Texas State Capitol", "Zilker Park", "Sixth Street"],
    }
    assert weather.calls == ["Austin"]


async def test_assemble_country_queries_weather_by_capital_and_attractions_by_name(countries, geocoder):
    llm = StubLLM()
    weather = StubWeather()

    outcome = await assemble_destination(
        _country("Japan"), llm=llm, countries=countries, geocoder=geocoder, weather=weather
    )

    assert isinstance(outcome, Resolved)
    assert outcome.record.name == "Japan"
    assert outcome.record.capital == "Tokyo"
    assert weather.calls == ["Tokyo"]
    assert "tourist attractions in Japan." in llm.prompts[0]


async def test_weather_failure_skips_candidate(countries, geocoder):
    outcome = await assemble_destination(
        _city("Austin"),
        llm=StubLLM(),
        countries=countries,
        geocoder=geocoder,
        weather=StubWeather(failing=["Austin"]),
    )

    assert isinstance(outcome, Skipped)
    assert outcome.name == "Austin"
    assert "weather lookup failed" in outcome.reason


async def test_country_lookup_error_skips_candidate(countries, geocoder):
    outcome = await assemble_destination(
        _country("Erewhon"), llm=StubLLM(), countries=countries, geocoder=geocoder, weather=StubWeather()
    )
    assert isinstance(outcome, Skipped)
    assert outcome.reason.startswith("ConnectTimeout")


async def test_attraction_failure_keeps_candidate_with_fallback(countries, geocoder):
    llm = StubLLM(attractions={"Austin": RuntimeError("model down")})

    outcome = await assemble_destination(
        _city("Austin"), llm=llm, countries=countries, geocoder=geocoder, weather=StubWeather()
    )

    assert isinstance(outcome, Resolved)
    assert outcome.record.attractions == ["Famous landmarks", "Local markets"]


async def test_empty_currency_set_yields_na():
    countries = StubCountries(
        {"Tuvalu": make_country("Tuvalu", "TV", capital="Funafuti", capital_latlng=[-8.52, 179.2], currencies={})}
    )
    outcome = await assemble_destination(
        _country("Tuvalu"), llm=StubLLM(), countries=countries, geocoder=StubGeocoder({}), weather=StubWeather()
    )
    assert isinstance(outcome, Resolved)
    assert outcome.record.currency == "N/A"


async def test_assemble_destinations_drops_failures_and_keeps_order(countries, geocoder):
    candidates = [
        _city("Austin"),
        _city("Gondor City", country="Gondor"),
        _country("Japan"),
        _city("Springfield"),
        _city("Denver"),
    ]

    records = await assemble_destinations(
        candidates, llm=StubLLM(), countries=countries, geocoder=geocoder, weather=StubWeather()
    )

    assert [r.name for r in records] == ["Austin", "Japan", "Denver"]


async def test_assemble_destinations_all_failing_returns_empty(countries, geocoder):
    records = await assemble_destinations(
        [_country("Antarctica"), _country("Nauru")],
        llm=StubLLM(),
        countries=countries,
        geocoder=geocoder,
        weather=StubWeather(),
    )
    assert records == []


# ---------------------------------------------------------------------------
# Scheduling
# ---------------------------------------------------------------------------


class RecordingCountries(StubCountries):
    def __init__(self, records, events: List[str]) -> None:
        super().__init__(records)
        self.events = events

    async def by_name(self, name: str) -> Optional[CountryRecord]:
        self.events.append(f"country:{name}")
        return await super().by_name(name)


class RecordingWeather(StubWeather):
    def __init__(self, events: List[str], delay: float) -> None:
        super().__init__()
        self.events = events
        self.delay = delay

    async def current(self, place: str) -> WeatherSnapshot:
        self.events.append(f"weather:{place}:start")
        await asyncio.sleep(self.delay)
        self.events.append(f"weather:{place}:end")
        return await super().current(place)


class RecordingLLM(StubLLM):
    def __init__(self, events: List[str], delay: float) -> None:
        super().__init__()
        self.events = events
        self.delay = delay

    async def ainvoke(self, prompt: str):
        self.events.append("attractions:start")
        try:
            return await super().ainvoke(prompt)
        finally:
            self.events.append("attractions:end")


async def test_weather_and_attractions_overlap_within_candidate(countries, geocoder):
    events: List[str] = []
    recording = RecordingCountries(countries.records, events)

    outcome = await assemble_destination(
        _city("Austin"),
        llm=RecordingLLM(events, delay=0.05),
        countries=recording,
        geocoder=geocoder,
        weather=RecordingWeather(events, delay=0.05),
    )

    assert isinstance(outcome, Resolved)
    assert events[0] == "country:United States"
    last_start = max(events.index("weather:Austin:start"), events.index("attractions:start"))
    first_end = min(events.index("weather:Austin:end"), events.index("attractions:end"))
    assert last_start < first_end


async def test_candidates_are_assembled_one_after_another(countries, geocoder):
    events: List[str] = []
    recording = RecordingCountries(countries.records, events)

    records = await assemble_destinations(
        [_city("Austin"), _country("Japan"), _city("Denver")],
        llm=RecordingLLM(events, delay=0.01),
        countries=recording,
        geocoder=geocoder,
        weather=RecordingWeather(events, delay=0.02),
    )

    assert [r.name for r in records] == ["Austin", "Japan", "Denver"]
    lookups = [i for i, event in enumerate(events) if event.startswith("country:")]
    assert len(lookups) == 3
    for previous, following in zip(lookups, lookups[1:]):
        finished = events[previous:following]
        assert any(event.startswith("weather:") and event.endswith(":end") for event in finished)
        assert finished.count("attractions:start") == finished.count("attractions:end") == 1
