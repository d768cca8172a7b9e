"""FastAPI surface for the budget destination suggestions service."""
from __future__ import annotations

# Load environment variables from .env file
from dotenv import load_dotenv

# Load .env file before any other imports that might need environment variables
load_dotenv()


from typing import List, Optional
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
import logging
from fastapi.middleware.cors import CORSMiddleware

from src.api.dependencies import get_destination_service, get_settings, lifespan
from src.api.schemas import (
    INVALID_BUDGET_MESSAGE,
    PIPELINE_FAILURE_MESSAGE,
    ErrorResponse,
    HealthResponse,
)
from src.core.errors import RecommendationError
from src.core.schemas import BudgetQuery, DestinationRecord

logger = logging.getLogger(__name__)

app = FastAPI(title="Destinations API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().allowed_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.get(
    "/api/destinations",
    response_model=List[DestinationRecord],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_destinations(
    budget: Optional[str] = Query(default=None, description="Trip budget as a base-10 integer"),
    currency: Optional[str] = Query(default=None, description="Currency code, defaults to USD"),
):
    """Suggest up to five destinations for a one-week trip on the given budget.

    The chat model picks candidates according to the budget tier:
    - under 200 USD: five cities in the currency's home country
    - 200 to 700 USD: five budget-friendly cities from different countries
    - over 700 USD: five diverse countries

    Each candidate is then enriched with flag, currency, coordinates, current
    weather and attractions. Candidates that cannot be resolved are left out,
    so the list may be shorter than five or empty.

    Results are cached per (budget, currency) for one hour.

    Returns:
        200 with the list of destination cards, 400 when ``budget`` is not an
        integer, 500 when no recommendations could be obtained.
    """

    try:
        query = BudgetQuery.parse(budget, currency)
    except ValueError:
        logger.info(f"Rejected destinations request with budget={budget!r}")
        return _error(400, INVALID_BUDGET_MESSAGE)

    logger.info(f"Destinations requested for budget {query.budget} {query.currency}")
    try:
        service = get_destination_service()
        return await service.get_destinations(query)
    except RecommendationError as exc:
        logger.error(f"No recommendations for {query.budget} {query.currency}: {exc}")
        return _error(500, PIPELINE_FAILURE_MESSAGE)
    except Exception as exc:
        logger.error(f"Major error in API orchestration: {exc}", exc_info=True)
        return _error(500, PIPELINE_FAILURE_MESSAGE)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Simple health endpoint used for readiness probes."""

    return HealthResponse(status="healthy", service="destinations-api")
