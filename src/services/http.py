"""Shared plumbing for the thin async JSON-over-HTTP provider clients."""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx


class AsyncJsonClient:
    """Base wrapper owning one ``httpx.AsyncClient`` with a fixed timeout."""

    def __init__(self, *, base_url: str, timeout_s: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"accept": "application/json"},
            timeout=httpx.Timeout(timeout_s),
        )

    async def aclose(self) -> None:
        """Close the underlying HTTPX client."""

        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self._client.aclose()

    async def _aget(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Execute a GET request and return the parsed JSON body."""

        response = await self._client.get(path, params=params)
        response.raise_for_status()
        return response.json()
