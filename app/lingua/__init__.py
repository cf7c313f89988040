"""Lingua - runtime internationalization for Python applications.

Loads per-language JSON translation tables, tracks the active language and
resolves dotted keys such as ``menu.file.save`` with ``{{name}}``
parameter substitution.

Usage:
    from lingua import LanguageRegistry

    registry = LanguageRegistry()
    registry.initialize("languages")
    registry.set_language("de")
    registry.t("greeting", {"name": "Alice"})
"""

from lingua.i18n import (
    CallbackHandle,
    FileSystemResourceLoader,
    HttpResourceLoader,
    AsyncHttpResourceLoader,
    LanguageRegistry,
    LinguaError,
    TranslationService,
    create_registry,
)

__version__ = "0.2.0"

__all__ = [
    "CallbackHandle",
    "FileSystemResourceLoader",
    "HttpResourceLoader",
    "AsyncHttpResourceLoader",
    "LanguageRegistry",
    "LinguaError",
    "TranslationService",
    "create_registry",
]
