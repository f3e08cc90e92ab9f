"""Application configuration helpers."""

from __future__ import annotations

from .env import require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .phishnet import PhishNetConfig, get_phishnet_config
from .service import SHOW_ID_PARAM, ServiceConfig, get_service_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "SHOW_ID_PARAM",
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "PhishNetConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "ServiceConfig",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_phishnet_config",
    "get_service_config",
    "get_storage_config",
    "require_env_var",
    "require_env_vars",
]
