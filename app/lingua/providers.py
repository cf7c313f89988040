"""
Factory functions for dependency injection.

Provides application-scoped providers for settings and the translation
service. Applications that need several independent registries should
construct LanguageRegistry instances directly instead.
"""

from functools import lru_cache

from lingua.configuration import Settings
from lingua.i18n.factory import create_registry
from lingua.i18n.service import TranslationService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_service() -> TranslationService:
    """
    Get application-scoped translation service.

    The registry is built and initialized from ``get_settings().i18n`` on
    first call.

    Returns:
        TranslationService: Cached service wrapping an initialized registry.
    """
    return TranslationService(create_registry(get_settings().i18n))
