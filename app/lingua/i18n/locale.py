"""System locale detection.

Reduces locale strings such as ``en-US`` or ``de_DE.UTF-8`` to their
primary language subtag so they can be matched against loaded language
codes.
"""

import locale
import os
import re
from typing import Callable, Optional

import structlog

logger = structlog.get_logger(component="i18n.locale")

LocaleDetector = Callable[[], Optional[str]]

_SUBTAG_SEPARATORS = re.compile(r"[-_.]")

# Environment variables consulted in POSIX precedence order.
_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")

_NEUTRAL_LOCALES = {"C", "POSIX"}


def primary_language(locale_str: Optional[str]) -> Optional[str]:
    """Extract the primary language subtag from a locale string.

    Args:
        locale_str: Locale string (e.g., "en-US", "de_DE.UTF-8", "fr").

    Returns:
        Text before the first "-", "_" or ".", or None if that is empty.
    """
    if not locale_str:
        return None
    language = _SUBTAG_SEPARATORS.split(locale_str.strip(), maxsplit=1)[0]
    return language or None


def _system_locale_string() -> Optional[str]:
    for var in _LOCALE_ENV_VARS:
        value = os.environ.get(var, "").strip()
        if value and value not in _NEUTRAL_LOCALES:
            return value

    try:
        value, _ = locale.getlocale()
    except ValueError:
        return None
    if value and value not in _NEUTRAL_LOCALES:
        return value
    return None


def detect_system_language() -> Optional[str]:
    """Detect the primary language of the host system locale.

    Best effort: returns None when no usable locale is configured.
    """
    locale_str = _system_locale_string()
    language = primary_language(locale_str)
    logger.debug("detected_system_language", locale=locale_str, language=language)
    return language
