"""
releasestats: Configuration Management

This module provides centralised configuration management for the
statistics generator. It loads configuration from environment variables
(optionally via a .env file), with strongly typed access via Pydantic
BaseSettings.

Key responsibilities:
- Load and validate configuration from environment variables
- Provide typed configuration objects for logging and generation
- Expose a cached global configuration accessor for convenience

External dependencies:
- pydantic: Data validation and settings management
- pydantic-settings: Environment variable integration for settings
- python-dotenv: Optional .env loading for local development
- numpy: Random generator construction from the configured seed

Thread safety: Thread-safe (configuration is immutable after initial load)
"""

# ============================================================================
# Imports
# ============================================================================

from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# ============================================================================
# Data Models
# ============================================================================


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        level: Log level name (e.g. "INFO", "DEBUG").
        file: Path to the primary log file.
    """

    level: str = "INFO"
    file: str = "releasestats.log"


class GenerationConfig(BaseModel):
    """Settings consumed by the statistics generator.

    Attributes:
        catalog_file: Path to the YAML catalog holding datasets,
            releases and events.
        random_seed: Optional seed for the random generator. ``None``
            means every run draws fresh entropy.
    """

    catalog_file: str = "configs/catalog.yaml"
    random_seed: Optional[int] = None


class StatsConfig(BaseSettings):
    """Main configuration loaded from environment variables.

    Environment variables use the following mapping:

    - LOG_LEVEL / LOG_FILE for logging
    - ENVIRONMENT for environment name (development/staging/production)
    - STATS_CATALOG_FILE / STATS_RANDOM_SEED for generation
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: str = Field(default="releasestats.log", alias="LOG_FILE")

    # Environment
    environment: str = Field(default="development", alias="ENVIRONMENT")

    # Generation
    catalog_file: str = Field(default="configs/catalog.yaml", alias="STATS_CATALOG_FILE")
    random_seed: Optional[int] = Field(default=None, alias="STATS_RANDOM_SEED")

    @property
    def logging(self) -> LoggingConfig:
        """Return the logging section as a :class:`LoggingConfig`."""

        return LoggingConfig(level=self.log_level, file=self.log_file)

    @property
    def generation(self) -> GenerationConfig:
        """Return the generation section as a :class:`GenerationConfig`."""

        return GenerationConfig(
            catalog_file=self.catalog_file,
            random_seed=self.random_seed,
        )

    def rng(self) -> np.random.Generator:
        """Return a random generator seeded from ``random_seed``."""

        return np.random.default_rng(self.random_seed)


# ============================================================================
# Public API
# ============================================================================


def load_config(env_file: Optional[Path] = None) -> StatsConfig:
    """Load the generator configuration.

    For local development this function will attempt to load a `.env`
    file from the working directory if one is present. Environment
    variables always take precedence over values from `.env`.

    Args:
        env_file: Optional explicit path to a `.env` file. If omitted,
            the function will look for `.env` in the current working
            directory.

    Returns:
        A fully populated :class:`StatsConfig` instance.

    Raises:
        FileNotFoundError: If an explicit ``env_file`` is provided but
            does not exist.
    """

    if env_file is not None:
        if not env_file.exists():
            msg = f"Environment file not found: {env_file}"
            raise FileNotFoundError(msg)
        # An explicit env_file overrides existing values so tests and
        # local runs can reliably control configuration.
        load_dotenv(env_file, override=True)
    else:
        default_env = Path(".env")
        if default_env.exists():
            load_dotenv(default_env)

    return StatsConfig()  # type: ignore[call-arg]


_global_config: Optional[StatsConfig] = None


def get_config() -> StatsConfig:
    """Return the global configuration singleton.

    The configuration is loaded on first access and cached for
    subsequent calls.

    Returns:
        A cached :class:`StatsConfig` instance.
    """

    global _global_config
    if _global_config is None:
        _global_config = load_config()
    return _global_config
