"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
the upstream distance API, the form defaults and the logging setup.

Configuration can be overridden via environment variables:
- ZD_API_BASE_URL=https://example.test/api/distance
- ZD_API_BACKEND=static
- ZD_UI_SERVER_PORT=8080
- ZD_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOURCES: tuple[str, str, str, str] = ("95131", "32220", "07305", "75050")


class DistanceApiConfig(BaseSettings):
    """Upstream distance API configuration.

    Environment variables prefixed with ZD_API_.
    """

    model_config = SettingsConfigDict(env_prefix="ZD_API_")

    base_url: str = "https://distancefindapi.onrender.com/api/distance"
    # None keeps the transport default (requests waits indefinitely)
    timeout_seconds: Optional[float] = None
    backend: Literal["http", "static"] = "http"
    user_agent: str = "zip-distance-finder"


class UIConfig(BaseSettings):
    """Form and server configuration for the Gradio app.

    Environment variables prefixed with ZD_UI_.
    """

    model_config = SettingsConfigDict(env_prefix="ZD_UI_")

    title: str = "ZIP Code Distance Calculator"
    default_sources: tuple[str, str, str, str] = DEFAULT_SOURCES
    footer_text: str = "Powered by Bespoke Systems"
    default_theme: Literal["light", "dark"] = "light"
    server_name: str = "127.0.0.1"
    server_port: int = 7860


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with ZD_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ZD_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.api.base_url)
        print(config.ui.default_sources)

    Environment variables prefixed with ZD_.
    """

    model_config = SettingsConfigDict(env_prefix="ZD_")

    api: DistanceApiConfig = Field(default_factory=DistanceApiConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

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
