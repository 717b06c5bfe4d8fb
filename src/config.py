"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration.
Values can be overridden via environment variables:
- ITIN_SERVICE_NAME=flight-itinerary
- ITIN_SERVER_PORT=9000
- ITIN_SERVER_ALLOWED_ORIGINS='["https://example.com"]'
- ITIN_LOG_LEVEL=DEBUG
- ITIN_LOG_STRUCTURED=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseSettings):
    """HTTP server configuration.

    Environment variables prefixed with ITIN_SERVER_.
    """

    model_config = SettingsConfigDict(env_prefix="ITIN_SERVER_")

    host: str = "0.0.0.0"
    port: int = 8080
    allowed_origins: List[str] = Field(default_factory=lambda: ["*"])
    docs_url: Optional[str] = "/swagger"
    shutdown_timeout_seconds: int = 10


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with ITIN_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ITIN_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"
    structured: bool = True  # JSON lines


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.server.port)
        print(config.observability.level)

    Environment variables prefixed with ITIN_.
    """

    model_config = SettingsConfigDict(env_prefix="ITIN_")

    service_name: str = "flight-itinerary"
    version: str = "1.0.0"
    api_prefix: str = "/api/v1"

    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
