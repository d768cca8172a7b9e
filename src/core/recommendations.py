"""Chat-model requests for destination candidates and their attractions."""
from __future__ import annotations

import logging
from typing import List

from langchain_core.language_models.chat_models import BaseChatModel

from src.core.budget import BudgetContext
from src.core.post_processing import (
    build_attractions,
    build_candidates,
    message_text,
    parse_json_output,
)
from src.core.prompts import attractions_prompt, recommendation_prompt
from src.core.schemas import LocationCandidate

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 5
MAX_ATTRACTIONS = 3
FALLBACK_ATTRACTIONS = ("Famous landmarks", "Local markets")


def make_recommendation_prompt(budget_context: BudgetContext) -> str:
    """Render the three-tier recommendation prompt for a budget."""

    return recommendation_prompt.format(budget_context=budget_context.render())


async def request_recommendations(
    llm: BaseChatModel, budget_context: BudgetContext
) -> List[LocationCandidate]:
    """Ask the model for up to five destinations matching the budget tier.

    Tier selection and country distinctness are left to the model. Only the
    shape of the reply is checked here. Any failure yields an empty list.
    """

    prompt = make_recommendation_prompt(budget_context)
    try:
        reply = await llm.ainvoke(prompt)
        payload = parse_json_output(message_text(reply))
        candidates = build_candidates(payload, limit=MAX_CANDIDATES)
    except Exception as e:
        logger.error(f"Error calling the model for locations: {e}")
        return []

    logger.info(
        f"Model suggested {len(candidates)} locations for "
        f"{budget_context.budget} {budget_context.currency}"
    )
    return candidates


async def request_attractions(llm: BaseChatModel, location_name: str) -> List[str]:
    """Ask the model for the three most famous attractions of a place.

    Never raises: on any failure the generic fallback pair is returned.
    """

    prompt = attractions_prompt.format(location_name=location_name)
    try:
        reply = await llm.ainvoke(prompt)
        return build_attractions(parse_json_output(message_text(reply)), limit=MAX_ATTRACTIONS)
    except Exception as e:
        logger.error(f"Error calling the model for sights in {location_name}: {e}")
        return list(FALLBACK_ATTRACTIONS)
