"""Exceptions for the i18n system.

All errors raised by the registry, loaders and config reader inherit from
``LinguaError`` so callers can handle the whole family in one place.
"""

from typing import Optional


class LinguaError(Exception):
    """Base exception for all lingua errors.

    Example:
        try:
            registry.initialize("languages")
        except LinguaError as e:
            logger.error("i18n_initialization_failed", error=str(e))
    """

    pass


class SourceAccessError(LinguaError):
    """Raised when the translation source (directory, URL) cannot be read."""

    pass


class NoLanguagesFoundError(SourceAccessError):
    """Raised when initialization loads zero languages from its source."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"No language files found in '{source}'")


class TranslationParseError(LinguaError):
    """Raised when a language resource is not a valid JSON object.

    Attributes:
        language: Language code whose resource failed to parse.
        error: Underlying parser error message.
    """

    def __init__(self, language: str, error: str):
        self.language = language
        self.error = error
        super().__init__(f"Failed to parse language file {language}: {error}")


class LanguageNotAvailableError(LinguaError):
    """Raised when a language code has no loaded translation table."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Language '{language}' is not available")


class KeyNotFoundError(LinguaError):
    """Raised when a dotted key does not resolve in the active table."""

    def __init__(self, key: str, language: Optional[str] = None):
        self.key = key
        self.language = language
        super().__init__(f"Translation key '{key}' not found")


class LanguageFileNotFoundError(LinguaError):
    """Raised when the resource for a specific language cannot be located."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Language file for '{language}' not found")


class NotInitializedError(LinguaError):
    """Raised when a registry that requires initialization is queried early."""

    def __init__(self):
        super().__init__("Lingua registry has not been initialized")


class ConfigFileNotFoundError(LinguaError):
    """Raised when a config file path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Config file not found: {path}")


class ConfigFileReadError(LinguaError):
    """Raised when a config file exists but cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading config file {path}: {reason}")


class ValueNotFoundInConfigError(LinguaError):
    """Raised when a key has no entry in a config file."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Could not find value for key '{key}' in config file")
