"""Resolution of model candidates into concrete, mappable locations."""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from src.core.errors import CandidateSkipped
from src.core.schemas import LocationCandidate, ResolvedLocation
from src.services.countries import CountryRecord
from src.services.geocoding import GeocodeResult

logger = logging.getLogger(__name__)


class CountryLookup(Protocol):
    async def by_name(self, name: str) -> Optional[CountryRecord]: ...


class Geocoder(Protocol):
    async def locate(self, query: str) -> Optional[GeocodeResult]: ...


async def resolve_location(
    candidate: LocationCandidate,
    countries: CountryLookup,
    geocoder: Geocoder,
) -> ResolvedLocation:
    """Resolve a candidate to coordinates, flag and currency.

    Cities are geocoded as ``"{city},{cca2}"``. Countries are represented by
    their capital, whose name then fills both the headline and the subtext.

    Raises:
        CandidateSkipped: when the country, the city or the capital cannot be found.
        httpx.HTTPError: on transport or non-404 HTTP failures.
    """

    country = await countries.by_name(candidate.country_name)
    if country is None:
        raise CandidateSkipped(candidate.name, f"no country record for {candidate.country_name!r}")

    if candidate.is_city:
        hit = await geocoder.locate(f"{candidate.name},{country.cca2}")
        if hit is None:
            raise CandidateSkipped(candidate.name, "geocoding returned no result")
        latlng = hit.latlng
        display_name = candidate.name
        subtext = country.name.common
    else:
        capital = country.capital_name
        capital_latlng = country.capitalInfo.latlng
        if not capital or not capital_latlng or len(capital_latlng) < 2:
            raise CandidateSkipped(candidate.name, "country has no capital coordinates")
        latlng = (capital_latlng[0], capital_latlng[1])
        display_name = capital
        subtext = capital

    logger.debug(f"Resolved {candidate.name} to {display_name} at {latlng}")
    return ResolvedLocation(
        display_name=display_name,
        subtext=subtext,
        latlng=latlng,
        flag_url=country.flags.svg,
        currency_name=country.currency_name,
    )
