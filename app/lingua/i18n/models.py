"""Translation models for the i18n system.

Defines core data structures shared by the registry, resolver and loaders.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from lingua.i18n.exceptions import TranslationParseError

# Nested mapping of string keys to sub-tables or leaf values, as parsed from JSON.
TranslationTable = Dict[str, Any]


class RegistryState(str, Enum):
    """Lifecycle states of a LanguageRegistry."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


@dataclass(frozen=True)
class TranslationKey:
    """A dotted translation key split into its path segments.

    Keys address a path through nested tables (e.g., "menu.file.save").
    Unlike namespace-only keys, any depth is allowed; a key without dots
    addresses a top-level leaf.

    Attributes:
        segments: Ordered path segments.
    """

    segments: Tuple[str, ...]

    def __str__(self) -> str:
        """Return the full dot-separated key path."""
        return ".".join(self.segments)

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from a dot-separated string.

        Splitting is literal: empty segments (e.g. from "a..b") are kept and
        only match an empty-string key in the table.

        Args:
            key_string: Dot-separated key (e.g., "menu.file.save").

        Returns:
            TranslationKey instance.
        """
        return cls(segments=tuple(key_string.split(".")))

    @property
    def parents(self) -> Tuple[str, ...]:
        """Segments that must resolve to nested tables."""
        return self.segments[:-1]

    @property
    def leaf(self) -> str:
        """Final segment addressing the leaf value."""
        return self.segments[-1]


@dataclass(frozen=True)
class CallbackHandle:
    """Opaque token returned when registering a language change callback.

    Attributes:
        callback_id: Monotonic identifier unique within one notifier.
    """

    callback_id: int


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_table(language: str, raw_text: str) -> TranslationTable:
    """Parse raw JSON text into a translation table.

    Args:
        language: Language code the text belongs to (for error reporting).
        raw_text: JSON document text.

    Returns:
        Parsed table.

    Raises:
        TranslationParseError: If the text is not valid JSON or its top-level
            value is not an object.
    """
    try:
        data = json.loads(raw_text, parse_constant=_reject_constant)
    except (ValueError, TypeError) as e:
        raise TranslationParseError(language, str(e)) from e

    if not isinstance(data, dict):
        raise TranslationParseError(
            language, f"expected a JSON object, got {type(data).__name__}"
        )
    return data
