from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.apollo.ai"
DEFAULT_TIMEOUT = 30.0
DEFAULT_CLUSTERING_TIMEOUT = 300.0


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    debug: bool = False
    timeout: float = DEFAULT_TIMEOUT
    clustering_timeout: float = DEFAULT_CLUSTERING_TIMEOUT

    @classmethod
    def from_env(cls) -> ClientConfig:
        api_key = os.getenv("APOLLO_AI_API_KEY")
        if not api_key:
            raise ValueError("APOLLO_AI_API_KEY is not set")

        return cls(
            api_key=api_key,
            base_url=os.getenv("APOLLO_AI_BASE_URL", DEFAULT_BASE_URL),
            debug=os.getenv("APOLLO_AI_DEBUG", "false").lower() in ("true", "1", "yes", "on"),
            timeout=float(os.getenv("APOLLO_AI_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )

    def url_for(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
