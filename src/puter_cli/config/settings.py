"""Configuration settings for the Puter CLI."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import (
    DEFAULT_API_BASE_URL,
    ENV_API_BASE_URL,
    ENV_API_KEY,
    ENV_VERBOSE,
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    This uses Pydantic Settings for environment variable loading.
    """

    model_config = SettingsConfigDict(env_prefix="PUTER_", extra="ignore")

    # API settings
    API_BASE_URL: str = os.environ.get(ENV_API_BASE_URL, DEFAULT_API_BASE_URL)
    API_KEY: str = os.environ.get(ENV_API_KEY, "")

    # General settings
    VERBOSE: bool = os.environ.get(ENV_VERBOSE, "false").lower() in (
        "true",
        "1",
        "yes",
    )


# Create a singleton settings instance
settings = Settings()
