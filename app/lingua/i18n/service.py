"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and
testing with mocks.
"""

from typing import Optional, Set

from lingua.i18n.factory import create_registry
from lingua.i18n.models import CallbackHandle
from lingua.i18n.notifications import ChangeCallback
from lingua.i18n.registry import LanguageRegistry
from lingua.i18n.resolver import Params


class TranslationService:
    """Class-based translation service.

    This is a thin facade: all actual work is delegated to the underlying
    LanguageRegistry.

    Usage:
        # Via provider
        from lingua.providers import get_translation_service

        service = get_translation_service()
        service.t("menu.file.save")

        # Direct instantiation
        service = TranslationService(registry)
        message = service.translate("greeting", {"name": "Alice"})
    """

    def __init__(self, registry: Optional[LanguageRegistry] = None):
        """Initialize translation service.

        Args:
            registry: Optional pre-configured registry. If not provided,
                creates and initializes one via the factory.
        """
        self._registry = registry or create_registry()

    def translate(
        self, key: str, params: Params = None, language: Optional[str] = None
    ) -> str:
        """Resolve a key, raising KeyNotFoundError / LanguageNotAvailableError."""
        return self._registry.translate(key, params, language)

    def t(self, key: str, params: Params = None, language: Optional[str] = None) -> str:
        """Resolve a key, falling back to the key text."""
        return self._registry.t(key, params, language)

    def has_key(self, key: str, language: Optional[str] = None) -> bool:
        return self._registry.has_key(key, language)

    def set_language(self, language: str) -> None:
        self._registry.set_language(language)

    def get_language(self) -> str:
        return self._registry.get_language()

    def get_languages(self) -> Set[str]:
        return self._registry.get_languages()

    def on_language_change(self, callback: ChangeCallback) -> CallbackHandle:
        return self._registry.register_change_callback(callback)

    @property
    def registry(self) -> LanguageRegistry:
        """Access the underlying LanguageRegistry."""
        return self._registry
