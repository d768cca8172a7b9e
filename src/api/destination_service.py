from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Tuple

from langchain_core.language_models.chat_models import BaseChatModel

from src.core.assembler import WeatherSource, assemble_destinations
from src.core.budget import RateSource, normalize_budget
from src.core.cache import ResultCache, make_cache_key
from src.core.config import ApiSettings
from src.core.errors import RecommendationError
from src.core.recommendations import request_recommendations
from src.core.resolver import CountryLookup, Geocoder
from src.core.schemas import BudgetQuery, DestinationRecord
from src.services import (
    create_countries_client,
    create_exchange_rate_client,
    create_geocoder,
    create_weather_client,
)

logger = logging.getLogger(__name__)


def _build_llm(settings: ApiSettings) -> BaseChatModel:
    from langchain_xai import ChatXAI

    return ChatXAI(
        model=settings.llm_model,
        temperature=0,
        api_key=settings.ensure("xai_api_key"),
    )


class DestinationService:
    """Container for the destination pipeline and its dependencies.

    This class sequences one request through the pipeline:
    - Cache check keyed by (budget, currency)
    - Budget normalisation and the model recommendation call
    - Sequential per-candidate assembly (resolution, weather, attractions)
    - Storing the assembled batch in the result cache

    Concurrent cache misses for the same key share a single in-flight
    computation instead of each calling the model and the data providers.

    Attributes:
        settings: API configuration with external service credentials
        llm: Chat model used for recommendations and attractions
        rates: Exchange-rate source for budget normalisation
        countries: Country metadata lookup
        geocoder: City geocoder
        weather: Current weather source
        cache: Time-boxed result cache
        _inflight: Running computations keyed by cache key
    """

    def __init__(
        self,
        settings: ApiSettings,
        *,
        llm: Optional[BaseChatModel] = None,
        rates: Optional[RateSource] = None,
        countries: Optional[CountryLookup] = None,
        geocoder: Optional[Geocoder] = None,
        weather: Optional[WeatherSource] = None,
        cache: Optional[ResultCache] = None,
    ) -> None:
        """Initialise the service, building any collaborator not supplied.

        Args:
            settings: Configuration containing API keys and tunables
            llm, rates, countries, geocoder, weather, cache: optional
                pre-built collaborators, mainly for tests
        """
        self.settings = settings
        self.llm = llm if llm is not None else _build_llm(settings)
        self.rates = rates if rates is not None else create_exchange_rate_client(settings)
        self.countries = countries if countries is not None else create_countries_client(settings)
        self.geocoder = geocoder if geocoder is not None else create_geocoder(settings)
        self.weather = weather if weather is not None else create_weather_client(settings)
        self.cache = cache if cache is not None else ResultCache(
            ttl_s=settings.cache_ttl_s,
            max_entries=settings.cache_max_entries,
        )
        self._inflight: Dict[str, asyncio.Task] = {}

    def __repr__(self) -> str:
        llm_name = getattr(self.llm, "model_name", None) or getattr(self.llm, "model", None) or type(self.llm).__name__
        return (
            f"DestinationService(llm='{llm_name}', cached_keys={len(self.cache)}, "
            f"inflight={len(self._inflight)})"
        )

    async def close(self) -> None:
        """Cancel pending computations and close every HTTP client owned by the service."""

        pending = list(self._inflight.values())
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._inflight.clear()

        for client in (self.rates, self.countries, self.geocoder, self.weather):
            aclose = getattr(client, "aclose", None)
            if aclose is not None:
                await aclose()

    async def get_destinations(self, query: BudgetQuery) -> List[DestinationRecord]:
        """Return destination cards for a budget, from cache when fresh.

        Raises:
            RecommendationError: if the model produced no usable candidates.
        """

        key = make_cache_key(query.budget, query.currency)
        entry = self.cache.get(key)
        if entry is not None:
            logger.info(f"Cache hit for {key}")
            return list(entry.data)

        task = self._inflight.get(key)
        if task is None:
            logger.info(f"Cache miss for {key}, computing destinations")
            task = asyncio.create_task(self._compute(key, query))
            self._inflight[key] = task
            task.add_done_callback(lambda done: self._forget(key, done))
        else:
            logger.info(f"Joining in-flight computation for {key}")

        return list(await asyncio.shield(task))

    def _forget(self, key: str, task: asyncio.Task) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        # Mark the failure as retrieved even when every waiter was cancelled.
        if not task.cancelled() and task.exception() is not None:
            logger.debug(f"Computation for {key} failed: {task.exception()!r}")

    async def _compute(self, key: str, query: BudgetQuery) -> Tuple[DestinationRecord, ...]:
        budget_context = await normalize_budget(query.budget, query.currency, self.rates)
        candidates = await request_recommendations(self.llm, budget_context)
        if not candidates:
            raise RecommendationError("The model did not return any suggestions.")

        records = await assemble_destinations(
            candidates,
            llm=self.llm,
            countries=self.countries,
            geocoder=self.geocoder,
            weather=self.weather,
        )
        return self.cache.put(key, records).data
