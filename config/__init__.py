"""Configuration module - orchestrates all configuration components."""

import logging
from functools import cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.directories import DirectoryConfig

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Main configuration container that orchestrates all config components."""

    # On-disk layout
    directories: DirectoryConfig = Field(default_factory=DirectoryConfig)

    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
    )


@cache
def get_config() -> Config:
    """
    Get the process configuration.
    The result is cached; call ``get_config.cache_clear()`` to reload it.
    """
    config = Config()
    logger.debug("Loaded directory configuration: %s", config.directories)
    return config


__all__ = ["Config", "DirectoryConfig", "get_config"]
