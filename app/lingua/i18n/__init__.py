"""i18n system - runtime translation tables and language state.

Main components:
- models: TranslationKey, RegistryState, CallbackHandle, parse_table
- loader: ResourceLoader variants (filesystem, HTTP, async HTTP)
- resolver: dotted-key lookup and {{param}} interpolation
- registry: LanguageRegistry with strict and lenient resolution
- locale: system locale detection
- config_file: language code extraction from config files
"""

from lingua.i18n.config_file import read_config_value
from lingua.i18n.exceptions import (
    ConfigFileNotFoundError,
    ConfigFileReadError,
    KeyNotFoundError,
    LanguageFileNotFoundError,
    LanguageNotAvailableError,
    LinguaError,
    NoLanguagesFoundError,
    NotInitializedError,
    SourceAccessError,
    TranslationParseError,
    ValueNotFoundInConfigError,
)
from lingua.i18n.factory import create_loader, create_registry, create_registry_async
from lingua.i18n.loader import (
    AsyncHttpResourceLoader,
    AsyncResourceLoader,
    FileSystemResourceLoader,
    HttpResourceLoader,
    ResourceLoader,
)
from lingua.i18n.locale import detect_system_language, primary_language
from lingua.i18n.models import (
    CallbackHandle,
    RegistryState,
    TranslationKey,
    parse_table,
)
from lingua.i18n.registry import LanguageRegistry, load_lang_from_config
from lingua.i18n.resolver import interpolate, resolve
from lingua.i18n.service import TranslationService

__all__ = [
    "AsyncHttpResourceLoader",
    "AsyncResourceLoader",
    "CallbackHandle",
    "ConfigFileNotFoundError",
    "ConfigFileReadError",
    "FileSystemResourceLoader",
    "HttpResourceLoader",
    "KeyNotFoundError",
    "LanguageFileNotFoundError",
    "LanguageNotAvailableError",
    "LanguageRegistry",
    "LinguaError",
    "NoLanguagesFoundError",
    "NotInitializedError",
    "RegistryState",
    "ResourceLoader",
    "SourceAccessError",
    "TranslationKey",
    "TranslationParseError",
    "TranslationService",
    "ValueNotFoundInConfigError",
    "create_loader",
    "create_registry",
    "create_registry_async",
    "detect_system_language",
    "interpolate",
    "load_lang_from_config",
    "parse_table",
    "primary_language",
    "read_config_value",
    "resolve",
]
