"""Budget normalisation used to give the model a USD point of reference."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from src.core.prompts import budget_context_converted, budget_context_plain

logger = logging.getLogger(__name__)

USD = "USD"


class RateSource(Protocol):
    async def rate(self, base: str, target: str = USD) -> float: ...


@dataclass(frozen=True, slots=True)
class BudgetContext:
    """The caller's budget plus an optional approximate USD figure."""

    budget: int
    currency: str
    usd_estimate: Optional[float] = None

    def render(self) -> str:
        """Sentence describing the budget, as embedded in the model prompt."""

        if self.usd_estimate is None:
            return budget_context_plain.format(budget=self.budget, currency=self.currency)
        return budget_context_converted.format(
            budget=self.budget,
            currency=self.currency,
            usd_estimate=round(self.usd_estimate),
        )


async def normalize_budget(budget: int, currency: str, rates: RateSource) -> BudgetContext:
    """Attach an approximate USD value to a non-USD budget.

    The conversion is best effort: if the rate lookup fails the budget is
    described in its original currency only.
    """

    if currency == USD:
        return BudgetContext(budget=budget, currency=currency)

    try:
        rate = await rates.rate(currency, USD)
    except Exception as exc:
        logger.error(f"Failed to fetch exchange rate for {currency}: {exc}")
        return BudgetContext(budget=budget, currency=currency)

    return BudgetContext(budget=budget, currency=currency, usd_estimate=budget * rate)
