"""Settings for the HTTP service."""

from __future__ import annotations

from dataclasses import dataclass

from .env import int_env_var, optional_env_var

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8787
DEFAULT_FETCH_WORKERS = 1
SHOW_ID_PARAM = "showid"


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    fetch_workers: int = DEFAULT_FETCH_WORKERS


def get_service_config() -> ServiceConfig:
    return ServiceConfig(
        host=optional_env_var("SETLISTCACHE_HOST", DEFAULT_HOST),
        port=int_env_var("SETLISTCACHE_PORT", DEFAULT_PORT, minimum=1),
        fetch_workers=int_env_var(
            "SETLISTCACHE_FETCH_WORKERS", DEFAULT_FETCH_WORKERS, minimum=1
        ),
    )
