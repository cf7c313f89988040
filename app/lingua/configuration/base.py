"""Shared base classes for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class LinguaSettings(BaseSettings):
    """Base class for all lingua settings.

    Settings inherit from this class to get consistent configuration
    behavior (env file loading, case sensitivity, population by field name).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
