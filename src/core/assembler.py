"""Per-candidate assembly of destination cards.

Each candidate is resolved, then its weather and attractions are fetched
concurrently. A failure anywhere in that chain turns into a ``Skipped``
outcome so that the remaining candidates are still processed.
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Protocol, Sequence

from langchain_core.language_models.chat_models import BaseChatModel

from src.core.errors import CandidateSkipped
from src.core.recommendations import request_attractions
from src.core.resolver import CountryLookup, Geocoder, resolve_location
from src.core.schemas import (
    CandidateOutcome,
    DestinationRecord,
    LocationCandidate,
    Resolved,
    Skipped,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)


class WeatherSource(Protocol):
    async def current(self, place: str) -> WeatherSnapshot: ...


async def assemble_destination(
    candidate: LocationCandidate,
    *,
    llm: BaseChatModel,
    countries: CountryLookup,
    geocoder: Geocoder,
    weather: WeatherSource,
) -> CandidateOutcome:
    """Build the destination card for one candidate, or explain why it was skipped."""

    try:
        location = await resolve_location(candidate, countries, geocoder)
        snapshot, attractions = await asyncio.gather(
            weather.current(location.display_name),
            request_attractions(llm, candidate.name),
        )
    except CandidateSkipped as exc:
        logger.warning(f"Skipping candidate {candidate.name}: {exc.reason}")
        return Skipped(name=candidate.name, reason=exc.reason)
    except Exception as exc:
        logger.error(f"Failed to fetch full data for {candidate.name}: {exc}")
        return Skipped(name=candidate.name, reason=f"{type(exc).__name__}: {exc}")

    return Resolved(
        DestinationRecord(
            name=candidate.name,
            capital=location.subtext,
            flag=location.flag_url,
            currency=location.currency_name,
            latlng=location.latlng,
            weather=snapshot,
            attractions=attractions,
        )
    )


async def assemble_destinations(
    candidates: Sequence[LocationCandidate],
    *,
    llm: BaseChatModel,
    countries: CountryLookup,
    geocoder: Geocoder,
    weather: WeatherSource,
) -> List[DestinationRecord]:
    """Assemble candidates one after another, keeping only the resolved ones in order."""

    records: List[DestinationRecord] = []
    for candidate in candidates:
        outcome = await assemble_destination(
            candidate,
            llm=llm,
            countries=countries,
            geocoder=geocoder,
            weather=weather,
        )
        if isinstance(outcome, Resolved):
            records.append(outcome.record)

    logger.info(f"Assembled {len(records)} of {len(candidates)} destinations")
    return records
