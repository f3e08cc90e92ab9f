"""Phish.net configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import float_env_var, int_env_var, optional_env_var, require_env_vars
from .http_resilience import ResilienceConfig, RetryPolicy

PHISHNET_BASE_URL = "https://api.phish.net/v5"
PHISHNET_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class PhishNetConfig:
    """Holds Phish.net API configuration values."""

    api_key: str
    resilience: ResilienceConfig


def get_phishnet_config(*, resilience: ResilienceConfig | None = None) -> PhishNetConfig:
    values = require_env_vars(("PHISHNET_API_KEY",))
    return PhishNetConfig(
        api_key=values["PHISHNET_API_KEY"],
        resilience=resilience
        or ResilienceConfig(
            name="phishnet",
            base_url=optional_env_var("PHISHNET_BASE_URL", PHISHNET_BASE_URL),
            timeout_seconds=float_env_var("PHISHNET_TIMEOUT_SECONDS", PHISHNET_TIMEOUT_SECONDS),
            # retries are opt-in
            retry=RetryPolicy(total=int_env_var("PHISHNET_RETRIES", 0, minimum=0)),
            default_headers={"Accept": "application/json"},
        ),
    )
