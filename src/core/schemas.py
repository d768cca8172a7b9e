"""Pydantic data models for the budget destination pipeline.

The models follow a destination through the pipeline:

- BudgetQuery: validated request parameters (budget + currency)
- LocationCandidate: one city or country proposed by the language model
- ResolvedLocation: a candidate resolved to coordinates, flag and currency
- WeatherSnapshot: current conditions at the resolved place
- DestinationRecord: the final card returned to the front end
- CacheEntry: a batch of records stored under one (budget, currency) key
- Resolved / Skipped: the outcome of assembling a single candidate
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.core.types import LatLng, NonEmptyStr

DEFAULT_CURRENCY = "USD"

# Leading ASCII integer, the rest of the value is ignored.
_BUDGET_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


class BudgetQuery(BaseModel):
    """Budget and currency supplied by the caller.

    The budget is taken literally: zero and negative values are accepted and
    passed on to the model as-is.
    """

    budget: int = Field(description="Budget for a one-week trip")
    currency: str = Field(default=DEFAULT_CURRENCY, description="Currency code, e.g. USD")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, budget: Optional[str], currency: Optional[str] = None) -> "BudgetQuery":
        """Build a query from raw query-string values.

        Raises:
            ValueError: if ``budget`` does not start with a base-10 integer.
        """

        if budget is None:
            raise ValueError("budget is required")
        match = _BUDGET_PATTERN.match(budget)
        if match is None:
            raise ValueError(f"budget {budget!r} does not start with an integer")
        return cls(budget=int(match.group(1)), currency=currency or DEFAULT_CURRENCY)


class LocationCandidate(BaseModel):
    """A destination proposed by the model, before any lookup happens."""

    name: NonEmptyStr
    type: Literal["city", "country"]
    country: Optional[NonEmptyStr] = Field(
        default=None, description="Country the city belongs to; required for cities"
    )

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="after")
    def _city_needs_country(self) -> "LocationCandidate":
        if self.type == "city" and not self.country:
            raise ValueError("city candidates must declare their country")
        return self

    @property
    def is_city(self) -> bool:
        return self.type == "city"

    @property
    def country_name(self) -> str:
        """Name used for the country metadata lookup."""

        name = self.country if self.is_city else self.name
        return (name or "").strip()


class ResolvedLocation(BaseModel):
    """A candidate resolved against country metadata and geocoding."""

    display_name: str = Field(description="City name, or the capital for country candidates")
    subtext: str = Field(description="Country common name, or the capital again for countries")
    latlng: LatLng
    flag_url: str
    currency_name: str = "N/A"

    model_config = ConfigDict(frozen=True)


class WeatherSnapshot(BaseModel):
    """Current weather in metric units."""

    temp: float = Field(description="Temperature in degrees Celsius")
    description: str

    model_config = ConfigDict(frozen=True)


class DestinationRecord(BaseModel):
    """Destination card returned by ``GET /api/destinations``."""

    name: str
    capital: str
    flag: str
    currency: str
    latlng: LatLng
    weather: WeatherSnapshot
    attractions: List[str]

    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """One computed batch of destinations and the instant it was stored."""

    timestamp: float
    data: Tuple[DestinationRecord, ...]


@dataclass(frozen=True, slots=True)
class Resolved:
    record: DestinationRecord


@dataclass(frozen=True, slots=True)
class Skipped:
    name: str
    reason: str


CandidateOutcome = Union[Resolved, Skipped]


__all__ = [
    "DEFAULT_CURRENCY",
    "BudgetQuery",
    "CacheEntry",
    "CandidateOutcome",
    "DestinationRecord",
    "LocationCandidate",
    "Resolved",
    "ResolvedLocation",
    "Skipped",
    "WeatherSnapshot",
]
