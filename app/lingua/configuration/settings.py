"""Lingua configuration settings."""

import json
from typing import Annotated, Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode, SettingsConfigDict

from lingua.configuration.base import LinguaSettings

DEFAULT_CANDIDATE_LANGUAGES = ["en", "de", "fr", "es", "it", "ja", "zh"]


class I18nSettings(LinguaSettings):
    """Translation source and language selection settings.

    Environment variables use the ``LINGUA_`` prefix, e.g.
    ``LINGUA_LANGUAGE_DIR=/srv/app/languages``.
    """

    LANGUAGE_DIR: str = Field(default="languages", alias="LINGUA_LANGUAGE_DIR")
    BASE_URL: Optional[str] = Field(default=None, alias="LINGUA_BASE_URL")
    LANGUAGES: Annotated[list[str], NoDecode] = Field(
        default_factory=list, alias="LINGUA_LANGUAGES"
    )
    CANDIDATE_LANGUAGES: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_CANDIDATE_LANGUAGES),
        alias="LINGUA_CANDIDATE_LANGUAGES",
    )
    DEFAULT_LANGUAGE: str = Field(default="en", alias="LINGUA_DEFAULT_LANGUAGE")
    AUTO_DETECT_LANGUAGE: bool = Field(default=True, alias="LINGUA_AUTO_DETECT")
    REQUIRE_INITIALIZATION: bool = Field(
        default=False, alias="LINGUA_REQUIRE_INITIALIZATION"
    )
    HTTP_TIMEOUT: int = Field(default=10, alias="LINGUA_HTTP_TIMEOUT")

    @field_validator("BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        """Normalise the base URL so paths can be joined with a single slash."""
        if not value:
            return None
        return value.rstrip("/")

    @field_validator("LANGUAGES", "CANDIDATE_LANGUAGES", mode="before")
    @classmethod
    def split_language_list(cls, value: Any) -> Any:
        """Accept "en,de" as well as a JSON list such as '["en", "de"]'."""
        if not isinstance(value, str):
            return value
        if value.strip().startswith("["):
            return json.loads(value)
        return [v.strip() for v in value.split(",") if v.strip()]

    @field_validator("DEFAULT_LANGUAGE")
    @classmethod
    def require_default_language(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("DEFAULT_LANGUAGE must not be empty")
        return value.strip()


class Settings(LinguaSettings):
    """Lingua configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
