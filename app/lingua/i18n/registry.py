"""Language registry: loaded translation tables and the active language.

The registry owns every loaded table and the single active-language
selector, and exposes the strict (``translate``) and lenient (``t``)
resolution entry points.

Thread safety:
    The table map is an immutable snapshot. Writers serialise on a lock,
    copy the map, insert, and rebind it; readers take one attribute read
    and never block each other or observe a half-inserted table.

    Change callbacks run on the thread that called ``set_language``,
    after the table lock is released and before ``set_language`` returns.
    Switches are serialised together with their notifications, so the
    last callback invocation always reports the final active language.
    Callbacks must not call ``set_language`` or load languages themselves;
    defer such work instead.

Partial effects:
    ``initialize`` is not transactional across languages. When it aborts
    on a failing language, languages inserted before the failure stay
    loaded even though the call raises.
"""

import copy
import threading
from pathlib import Path
from typing import Dict, Iterable, Optional, Set, Union

from lingua.i18n.config_file import read_config_value
from lingua.i18n.exceptions import (
    KeyNotFoundError,
    LanguageFileNotFoundError,
    LanguageNotAvailableError,
    LinguaError,
    NoLanguagesFoundError,
    NotInitializedError,
    SourceAccessError,
)
from lingua.i18n.loader import (
    AsyncHttpResourceLoader,
    AsyncResourceLoader,
    FileSystemResourceLoader,
    HttpResourceLoader,
    ResourceLoader,
)
from lingua.i18n.locale import LocaleDetector, detect_system_language
from lingua.i18n.models import (
    CallbackHandle,
    RegistryState,
    TranslationTable,
    parse_table,
)
from lingua.i18n.notifications import ChangeCallback, ChangeNotifier
from lingua.i18n.resolver import Params, resolve
from lingua.logging import get_module_logger

logger = get_module_logger()

DEFAULT_LANGUAGE = "en"

Source = Union[ResourceLoader, AsyncResourceLoader, Path, str, None]


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class LanguageRegistry:
    """Registry of loaded languages with an active-language selector.

    Attributes:
        loader: Resource loader used by initialize() and load_language().
        auto_detect: Whether initialize() activates the system language.
        require_initialization: Whether queries raise NotInitializedError
            until an initialize() call has succeeded.
    """

    def __init__(
        self,
        loader: Optional[Union[ResourceLoader, AsyncResourceLoader]] = None,
        default_language: str = DEFAULT_LANGUAGE,
        locale_detector: Optional[LocaleDetector] = detect_system_language,
        auto_detect: bool = True,
        require_initialization: bool = False,
    ):
        self.loader = loader
        self.auto_detect = auto_detect
        self.require_initialization = require_initialization
        self._locale_detector = locale_detector
        self._tables: Dict[str, TranslationTable] = {}
        self._active = default_language
        self._state = RegistryState.UNINITIALIZED
        self._write_lock = threading.Lock()
        self._switch_lock = threading.RLock()
        self._notifier = ChangeNotifier()

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state == RegistryState.READY

    @property
    def active_language(self) -> str:
        return self.get_language()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _resolve_loader(self, source: Source, asynchronous: bool):
        if source is None:
            if self.loader is None:
                raise SourceAccessError("No translation source configured")
            return self.loader
        if isinstance(source, (ResourceLoader, AsyncResourceLoader)):
            return source
        if isinstance(source, str) and _is_url(source):
            if asynchronous:
                return AsyncHttpResourceLoader(source)
            return HttpResourceLoader(source)
        return FileSystemResourceLoader(source)

    def _insert(self, language: str, table: TranslationTable) -> None:
        with self._write_lock:
            tables = dict(self._tables)
            tables[language] = table
            self._tables = tables
        logger.info("language_loaded", language=language, key_count=len(table))

    def _begin_initialize(self, loader) -> None:
        self.loader = loader
        self._state = RegistryState.INITIALIZING
        logger.info("initializing_registry", source=loader.source)

    def _skip_or_raise(self, loader, error: LanguageFileNotFoundError) -> None:
        if not loader.skip_missing:
            raise error
        logger.info(
            "skipped_missing_language", language=error.language, source=loader.source
        )

    def _finish_initialize(self, loader, count: int) -> int:
        if count == 0:
            raise NoLanguagesFoundError(loader.source)
        self._state = RegistryState.READY
        logger.info(
            "registry_initialized",
            source=loader.source,
            language_count=count,
        )
        self._activate_system_language()
        return count

    def _fail_initialize(self, loader, error: LinguaError) -> None:
        self._state = RegistryState.UNINITIALIZED
        logger.error(
            "registry_initialization_failed",
            source=loader.source,
            error=str(error),
            loaded_languages=sorted(self._tables),
        )

    def initialize(
        self,
        source: Source = None,
        languages: Optional[Iterable[str]] = None,
    ) -> int:
        """Bulk-load languages and make the registry ready.

        Args:
            source: ResourceLoader, http(s) base URL or directory path.
                Defaults to the loader given at construction.
            languages: Explicit language codes to load instead of
                discovering them from the source.

        Returns:
            Number of languages loaded.

        Raises:
            NoLanguagesFoundError: If no language could be loaded.
            SourceAccessError: If the source cannot be enumerated.
            TranslationParseError: If a language resource is malformed.
            LanguageFileNotFoundError: If a resource is missing and the
                loader does not skip missing languages.
        """
        loader = self._resolve_loader(source, asynchronous=False)
        if isinstance(loader, AsyncResourceLoader):
            raise TypeError("Asynchronous loaders require initialize_async()")

        self._begin_initialize(loader)
        try:
            codes = list(languages) if languages is not None else loader.discover()
            count = 0
            for code in codes:
                try:
                    self.load_language(code)
                except LanguageFileNotFoundError as e:
                    self._skip_or_raise(loader, e)
                    continue
                count += 1
            return self._finish_initialize(loader, count)
        except LinguaError as e:
            self._fail_initialize(loader, e)
            raise

    async def initialize_async(
        self,
        source: Source = None,
        languages: Optional[Iterable[str]] = None,
    ) -> int:
        """Awaitable initialize() for asynchronous loaders.

        Fetches happen without holding the registry lock; only each table
        insertion takes it.
        """
        loader = self._resolve_loader(source, asynchronous=True)
        if not isinstance(loader, AsyncResourceLoader):
            raise TypeError("initialize_async() requires an asynchronous loader")

        self._begin_initialize(loader)
        try:
            codes = (
                list(languages) if languages is not None else await loader.discover()
            )
            count = 0
            for code in codes:
                try:
                    await self.load_language_async(code)
                except LanguageFileNotFoundError as e:
                    self._skip_or_raise(loader, e)
                    continue
                count += 1
            return self._finish_initialize(loader, count)
        except LinguaError as e:
            self._fail_initialize(loader, e)
            raise

    def load_language(self, language: str) -> None:
        """Load one language from the configured loader.

        The table is inserted only after it parsed completely.

        Raises:
            LanguageFileNotFoundError: If the resource cannot be read.
            TranslationParseError: If the resource is not a JSON object.
        """
        loader = self._resolve_loader(None, asynchronous=False)
        if isinstance(loader, AsyncResourceLoader):
            raise TypeError("Asynchronous loaders require load_language_async()")
        self._insert(language, parse_table(language, loader.read(language)))

    async def load_language_async(self, language: str) -> None:
        """Awaitable load_language() for asynchronous loaders."""
        loader = self._resolve_loader(None, asynchronous=True)
        if not isinstance(loader, AsyncResourceLoader):
            raise TypeError("load_language_async() requires an asynchronous loader")
        raw_text = await loader.read(language)
        self._insert(language, parse_table(language, raw_text))

    def load_from_text(self, language: str, raw_text: str) -> None:
        """Insert or replace a language from raw JSON text.

        Independent of the configured source; used to embed translations.

        Raises:
            TranslationParseError: If the text is not a JSON object.
        """
        self._insert(language, parse_table(language, raw_text))

    # ------------------------------------------------------------------
    # Active language
    # ------------------------------------------------------------------

    def set_language(self, language: str) -> None:
        """Make a loaded language active and notify change callbacks.

        Setting the already-active language is allowed and still notifies.

        Raises:
            LanguageNotAvailableError: If the language is not loaded. The
                active language is left unchanged.
        """
        with self._switch_lock:
            with self._write_lock:
                if language not in self._tables:
                    logger.warning(
                        "language_not_available",
                        language=language,
                        available=sorted(self._tables),
                    )
                    raise LanguageNotAvailableError(language)
                previous = self._active
                self._active = language

            logger.info("language_changed", language=language, previous=previous)
            self._notifier.notify(language)

    def _activate_system_language(self) -> None:
        if not self.auto_detect or self._locale_detector is None:
            return
        try:
            detected = self._locale_detector()
        except Exception as e:
            logger.debug("system_language_detection_failed", error=str(e))
            return
        if detected and detected in self._tables:
            self.set_language(detected)
        else:
            logger.debug(
                "system_language_not_loaded",
                detected=detected,
                active=self._active,
            )

    def _require_ready(self) -> None:
        if self.require_initialization and self._state != RegistryState.READY:
            raise NotInitializedError()

    def get_language(self) -> str:
        """Return the active language code."""
        self._require_ready()
        return self._active

    def get_languages(self) -> Set[str]:
        """Return the loaded language codes. Order carries no meaning."""
        self._require_ready()
        return set(self._tables)

    def has_language(self, language: str) -> bool:
        return language in self._tables

    def get_table(self, language: str) -> TranslationTable:
        """Return a deep copy of a loaded language table.

        Raises:
            LanguageNotAvailableError: If the language is not loaded.
        """
        table = self._tables.get(language)
        if table is None:
            raise LanguageNotAvailableError(language)
        return copy.deepcopy(table)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def translate(
        self,
        key: str,
        params: Params = None,
        language: Optional[str] = None,
    ) -> str:
        """Resolve a dotted key, raising on failure.

        Args:
            key: Dotted translation key (e.g., "menu.file.save").
            params: Mapping or (name, value) pairs substituted into
                ``{{name}}`` placeholders, in order.
            language: Language to resolve in (default: active language).

        Returns:
            Resolved string.

        Raises:
            NotInitializedError: If initialization is required and missing.
            LanguageNotAvailableError: If the language has no loaded table.
            KeyNotFoundError: If the key does not fully resolve.
        """
        self._require_ready()
        code = language if language is not None else self._active
        table = self._tables.get(code)
        if table is None:
            raise LanguageNotAvailableError(code)

        try:
            return resolve(table, key, params, code)
        except KeyNotFoundError:
            logger.debug("translation_not_found", key=key, language=code)
            raise

    def t(
        self,
        key: str,
        params: Params = None,
        language: Optional[str] = None,
    ) -> str:
        """Resolve a dotted key, returning the key itself on failure."""
        try:
            return self.translate(key, params, language)
        except LinguaError:
            return key

    def has_key(self, key: str, language: Optional[str] = None) -> bool:
        """Check whether a key resolves in a language (default: active)."""
        try:
            self.translate(key, language=language)
        except LinguaError:
            return False
        return True

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def register_change_callback(self, callback: ChangeCallback) -> CallbackHandle:
        """Register a callback invoked with the new code on every switch.

        Returns:
            Handle for unregister_change_callback().
        """
        return self._notifier.register(callback)

    def unregister_change_callback(self, handle: CallbackHandle) -> bool:
        """Remove a callback. Returns False if the handle is unknown."""
        return self._notifier.unregister(handle)

    def on_language_change(self, callback: ChangeCallback) -> ChangeCallback:
        """Decorator form of register_change_callback().

        Example:
            @registry.on_language_change
            def refresh_labels(language: str) -> None:
                ...
        """
        self.register_change_callback(callback)
        return callback

    # ------------------------------------------------------------------
    # Config files
    # ------------------------------------------------------------------

    def language_from_config(self, path: Union[Path, str], key: str) -> str:
        """Read a language code from a config file and check it is loaded.

        Raises:
            ConfigFileNotFoundError: If the path does not exist.
            ConfigFileReadError: If the file cannot be read.
            ValueNotFoundInConfigError: If the key is absent.
            LanguageNotAvailableError: If the code is not loaded.
        """
        language = read_config_value(path, key)
        if not self.has_language(language):
            raise LanguageNotAvailableError(language)
        return language


def load_lang_from_config(
    registry: LanguageRegistry, path: Union[Path, str], key: str
) -> str:
    """Module-level form of LanguageRegistry.language_from_config()."""
    return registry.language_from_config(path, key)

