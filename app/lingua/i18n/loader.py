"""Translation resource loading interface and implementations.

A resource loader answers two questions for the registry: which language
codes its source offers, and what raw JSON text belongs to a given code.
Parsing and registry insertion happen in the registry, so loaders stay
thin I/O wrappers.

Variants:
- FileSystemResourceLoader: ``<directory>/<code>.json`` files.
- HttpResourceLoader: ``<base_url>/<code>.json`` over a requests session.
- AsyncHttpResourceLoader: the same over an httpx.AsyncClient, for hosts
  running an event loop.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional

import httpx
import requests
import structlog

from lingua.configuration.settings import DEFAULT_CANDIDATE_LANGUAGES
from lingua.i18n.exceptions import (
    LanguageFileNotFoundError,
    SourceAccessError,
    TranslationParseError,
)

logger = structlog.get_logger()

LANGUAGE_FILE_SUFFIX = ".json"


def _decode_body(language: str, body: bytes) -> str:
    """Decode a fetched resource as UTF-8 regardless of the declared charset."""
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise TranslationParseError(language, str(e)) from e


class ResourceLoader(ABC):
    """Abstract base for blocking translation resource loaders.

    Attributes:
        skip_missing: When True, bulk loading skips codes whose resource is
            missing instead of aborting. Used by sources that probe a list
            of candidate codes.
    """

    skip_missing: bool = False

    @property
    @abstractmethod
    def source(self) -> str:
        """Human-readable description of the source (path or URL)."""

    @abstractmethod
    def discover(self) -> List[str]:
        """List the language codes this source offers.

        Raises:
            SourceAccessError: If the source cannot be enumerated.
        """

    @abstractmethod
    def read(self, language: str) -> str:
        """Return the raw JSON text for one language.

        Raises:
            LanguageFileNotFoundError: If the resource cannot be located or read.
        """


class AsyncResourceLoader(ABC):
    """Abstract base for translation resource loaders that must be awaited."""

    skip_missing: bool = False

    @property
    @abstractmethod
    def source(self) -> str:
        """Human-readable description of the source."""

    @abstractmethod
    async def discover(self) -> List[str]:
        """List the language codes this source offers."""

    @abstractmethod
    async def read(self, language: str) -> str:
        """Return the raw JSON text for one language.

        Raises:
            LanguageFileNotFoundError: If the resource cannot be fetched.
        """


class FileSystemResourceLoader(ResourceLoader):
    """Loader for ``<code>.json`` files in a single directory.

    Only immediate files are considered; sub-directories are ignored.

    Attributes:
        language_dir: Directory holding the language files.
    """

    def __init__(self, language_dir: Path | str):
        self.language_dir = Path(language_dir)

    @property
    def source(self) -> str:
        return str(self.language_dir)

    def discover(self) -> List[str]:
        """Scan the directory for ``<code>.json`` files.

        Returns:
            Language codes in sorted order.

        Raises:
            SourceAccessError: If the directory cannot be listed.
        """
        try:
            entries = list(self.language_dir.iterdir())
        except OSError as e:
            logger.error(
                "language_dir_access_failed",
                language_dir=str(self.language_dir),
                error=str(e),
            )
            raise SourceAccessError(
                f"Failed to access language directory: {self.language_dir}: {e}"
            ) from e

        codes = sorted(
            entry.name[: -len(LANGUAGE_FILE_SUFFIX)]
            for entry in entries
            if entry.name.endswith(LANGUAGE_FILE_SUFFIX) and entry.is_file()
        )
        logger.debug(
            "discovered_language_files",
            language_dir=str(self.language_dir),
            languages=codes,
        )
        return codes

    def read(self, language: str) -> str:
        path = self.language_dir / f"{language}{LANGUAGE_FILE_SUFFIX}"
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("language_file_unreadable", path=str(path), error=str(e))
            raise LanguageFileNotFoundError(language) from e


class HttpResourceLoader(ResourceLoader):
    """Loader fetching ``<base_url>/<code>.json`` over HTTP.

    The source cannot be enumerated, so discovery returns a fixed list of
    candidate codes and bulk loading skips candidates that are not served.
    Non-success responses and transport errors both count as "language
    file not found". Bodies are decoded as UTF-8 whatever charset the
    server declares.

    Attributes:
        base_url: Base URL without trailing slash.
        candidates: Codes probed during bulk loading.
        timeout: Request timeout in seconds.
    """

    skip_missing = True

    def __init__(
        self,
        base_url: str,
        candidates: Optional[Iterable[str]] = None,
        timeout: int = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.candidates = list(
            candidates if candidates is not None else DEFAULT_CANDIDATE_LANGUAGES
        )
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    @property
    def source(self) -> str:
        return self.base_url

    def url_for(self, language: str) -> str:
        return f"{self.base_url}/{language}{LANGUAGE_FILE_SUFFIX}"

    def discover(self) -> List[str]:
        return list(self.candidates)

    def read(self, language: str) -> str:
        url = self.url_for(language)
        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("language_fetch_failed", url=url, error=str(e))
            raise LanguageFileNotFoundError(language) from e

        if not response.ok:
            logger.info(
                "language_fetch_unsuccessful",
                url=url,
                status_code=response.status_code,
            )
            raise LanguageFileNotFoundError(language)
        return _decode_body(language, response.content)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()


class AsyncHttpResourceLoader(AsyncResourceLoader):
    """Awaitable counterpart of HttpResourceLoader built on httpx.

    Attributes:
        base_url: Base URL without trailing slash.
        candidates: Codes probed during bulk loading.
        timeout: Request timeout in seconds.
    """

    skip_missing = True

    def __init__(
        self,
        base_url: str,
        candidates: Optional[Iterable[str]] = None,
        timeout: int = 10,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.candidates = list(
            candidates if candidates is not None else DEFAULT_CANDIDATE_LANGUAGES
        )
        self.timeout = timeout
        self._client = client

    @property
    def source(self) -> str:
        return self.base_url

    def url_for(self, language: str) -> str:
        return f"{self.base_url}/{language}{LANGUAGE_FILE_SUFFIX}"

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def discover(self) -> List[str]:
        return list(self.candidates)

    async def read(self, language: str) -> str:
        url = self.url_for(language)
        try:
            response = await self._get_client().get(url)
        except httpx.HTTPError as e:
            logger.warning("language_fetch_failed", url=url, error=str(e))
            raise LanguageFileNotFoundError(language) from e

        if not response.is_success:
            logger.info(
                "language_fetch_unsuccessful",
                url=url,
                status_code=response.status_code,
            )
            raise LanguageFileNotFoundError(language)
        return _decode_body(language, response.content)

    async def aclose(self) -> None:
        """Close the HTTP client if this loader created or was given one."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
