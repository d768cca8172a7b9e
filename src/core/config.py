"""Configuration helpers for API keys and environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

DEFAULT_FRONTEND_URL = "http://localhost:3000"


@dataclass(slots=True)
class ApiSettings:
    """Centralised container for the external service credentials and tunables."""

    xai_api_key: Optional[str] = None
    llm_model: str = "grok-4-fast-reasoning"
    openweather_api_key: Optional[str] = None
    frontend_url: Optional[str] = None
    port: int = 3000
    http_timeout_s: float = 10.0
    cache_ttl_s: float = 3600.0
    cache_max_entries: int = 256
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ApiSettings":
        """Load settings from the process environment."""

        return cls(
            xai_api_key=os.getenv("XAI_API_KEY"),
            llm_model=os.getenv("LLM_MODEL", "grok-4-fast-reasoning"),
            openweather_api_key=os.getenv("OPENWEATHER_API_KEY"),
            frontend_url=os.getenv("FRONTEND_URL"),
            port=int(os.getenv("PORT", "3000")),
            http_timeout_s=float(os.getenv("HTTP_TIMEOUT_S", "10")),
            cache_ttl_s=float(os.getenv("CACHE_TTL_S", "3600")),
            cache_max_entries=int(os.getenv("CACHE_MAX_ENTRIES", "256")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def ensure(self, field: str) -> str:
        """Return the requested field and fail fast if it is missing."""

        value = getattr(self, field)
        if not value:
            raise RuntimeError(f"Missing configuration value: {field}")
        return value

    @property
    def allowed_origins(self) -> List[str]:
        """Origins accepted by the CORS middleware."""

        return [self.frontend_url or DEFAULT_FRONTEND_URL]
