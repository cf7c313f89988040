"""Factory functions for creating i18n components.

Builds registries from settings so applications do not have to wire
loaders by hand.
"""

from pathlib import Path
from typing import Optional, Union

import structlog

from lingua.configuration import I18nSettings
from lingua.i18n.loader import (
    AsyncHttpResourceLoader,
    AsyncResourceLoader,
    FileSystemResourceLoader,
    HttpResourceLoader,
    ResourceLoader,
)
from lingua.i18n.registry import LanguageRegistry

logger = structlog.get_logger()


def create_loader(
    settings: Optional[I18nSettings] = None,
    asynchronous: bool = False,
) -> Union[ResourceLoader, AsyncResourceLoader]:
    """Create the resource loader selected by settings.

    A configured BASE_URL selects a network loader; otherwise the
    filesystem loader reads LANGUAGE_DIR.

    Args:
        settings: I18n settings (default: loaded from environment).
        asynchronous: Return an awaitable loader for BASE_URL sources.
    """
    settings = settings or I18nSettings()

    if settings.BASE_URL:
        loader_cls = AsyncHttpResourceLoader if asynchronous else HttpResourceLoader
        return loader_cls(
            settings.BASE_URL,
            candidates=settings.CANDIDATE_LANGUAGES,
            timeout=settings.HTTP_TIMEOUT,
        )
    return FileSystemResourceLoader(Path(settings.LANGUAGE_DIR))


def create_registry(
    settings: Optional[I18nSettings] = None,
    loader: Optional[ResourceLoader] = None,
    initialize: bool = True,
) -> LanguageRegistry:
    """Create and configure a LanguageRegistry.

    Args:
        settings: I18n settings (default: loaded from environment).
        loader: Explicit loader overriding the settings-selected one.
        initialize: Whether to bulk-load languages immediately.

    Returns:
        LanguageRegistry: Configured registry.

    Raises:
        NoLanguagesFoundError: If initialize is True and nothing loads.

    Usage:
        # Defaults from environment (LINGUA_LANGUAGE_DIR, ...)
        registry = create_registry()

        # Lazy: configure now, load later
        registry = create_registry(initialize=False)
        registry.load_from_text("en", '{"hello": "Hello"}')
    """
    settings = settings or I18nSettings()
    loader = loader or create_loader(settings)

    registry = LanguageRegistry(
        loader=loader,
        default_language=settings.DEFAULT_LANGUAGE,
        auto_detect=settings.AUTO_DETECT_LANGUAGE,
        require_initialization=settings.REQUIRE_INITIALIZATION,
    )

    if initialize:
        languages = settings.LANGUAGES or None
        count = registry.initialize(languages=languages)
        logger.info(
            "registry_created_with_preload",
            source=loader.source,
            language_count=count,
        )
    else:
        logger.info("registry_created_lazy", source=loader.source)

    return registry


async def create_registry_async(
    settings: Optional[I18nSettings] = None,
    loader: Optional[AsyncResourceLoader] = None,
) -> LanguageRegistry:
    """Create a registry and initialize it from an asynchronous loader."""
    settings = settings or I18nSettings()
    if loader is None:
        created = create_loader(settings, asynchronous=True)
        if not isinstance(created, AsyncResourceLoader):
            raise ValueError("create_registry_async() requires BASE_URL to be set")
        loader = created

    registry = LanguageRegistry(
        loader=loader,
        default_language=settings.DEFAULT_LANGUAGE,
        auto_detect=settings.AUTO_DETECT_LANGUAGE,
        require_initialization=settings.REQUIRE_INITIALIZATION,
    )
    count = await registry.initialize_async(languages=settings.LANGUAGES or None)
    logger.info(
        "registry_created_with_preload",
        source=loader.source,
        language_count=count,
    )
    return registry
