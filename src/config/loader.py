"""Configuration loader."""

from functools import lru_cache

from pydantic import ValidationError

from src.config.base import Settings
from src.core.exceptions import ConfigurationError


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def reload_settings() -> Settings:
    """Drop the cached settings and load them again from the environment."""
    get_settings.cache_clear()
    return get_settings()
