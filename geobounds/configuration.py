"""Mini README: Centralised configuration for geobounds.

Structure:
    * MAX_COLLECTION_DEPTH - hard cap on geometry collection nesting.
    * GeoboundsSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``GEOBOUNDS_*`` environment variables (or a
    local ``.env`` file). The configuration is cached so validation happens
    once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

# Deepest GeometryCollection nesting accepted anywhere in the package. The
# bounds calculators recurse once per level, so this also bounds their stack
# usage.
MAX_COLLECTION_DEPTH = 64


class GeoboundsSettings(BaseSettings):
    """Runtime configuration for the geobounds tools and service."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name (DEBUG, INFO, WARNING, ...).",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the HTTP service exposes.",
        ge=1,
        le=65535,
    )
    max_collection_depth: int = Field(
        MAX_COLLECTION_DEPTH,
        description=(
            "Nesting depth accepted when parsing GeoJSON geometry collections."
            " Cannot exceed the package-wide MAX_COLLECTION_DEPTH."
        ),
        ge=1,
        le=MAX_COLLECTION_DEPTH,
    )

    class Config:
        env_prefix = "GEOBOUNDS_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing and reject names the logging module does not know."""

        name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value}")
        return name


@lru_cache()
def get_settings() -> GeoboundsSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return GeoboundsSettings()
