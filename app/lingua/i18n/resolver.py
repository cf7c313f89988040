"""Dotted-key resolution and parameter interpolation.

Given a translation table, a dotted key and a parameter list, produce the
resolved string. The walk stops at the first segment that is missing or
that does not lead into a nested table; there is no partial or fallback
lookup.
"""

import json
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union

from lingua.i18n.exceptions import KeyNotFoundError
from lingua.i18n.models import TranslationKey, TranslationTable

Params = Union[Mapping[str, Any], Sequence[Tuple[str, Any]], None]

_MISSING = object()


def normalize_params(params: Params) -> Iterable[Tuple[str, str]]:
    """Turn a mapping or pair sequence into ordered (name, value) strings.

    Mappings are applied in insertion order.
    """
    if not params:
        return ()
    items = params.items() if isinstance(params, Mapping) else params
    return [(str(name), str(value)) for name, value in items]


def walk(
    table: TranslationTable, key: TranslationKey, language: Optional[str] = None
) -> Any:
    """Follow the key path through nested tables and return the leaf value.

    Raises:
        KeyNotFoundError: If any parent segment is absent or not a table, or
            the final segment is absent.
    """
    current: Any = table
    for segment in key.parents:
        current = current.get(segment, _MISSING)
        if not isinstance(current, dict):
            raise KeyNotFoundError(str(key), language)

    value = current.get(key.leaf, _MISSING)
    if value is _MISSING:
        raise KeyNotFoundError(str(key), language)
    return value


def stringify_leaf(value: Any) -> str:
    """Render a leaf value as template text.

    Strings are used verbatim. Anything else is serialised as compact JSON
    with surrounding quote characters stripped, so numbers and booleans
    render in their plain textual form (``5``, ``true``, ``null``).
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).strip('"')


def interpolate(template: str, params: Params) -> str:
    """Replace every ``{{name}}`` occurrence with its value.

    Pairs are applied once each, in order, as a global substring
    replacement over the accumulated string. Replacement values are not
    re-expanded by the pair that inserted them, and placeholders without a
    matching parameter are left untouched.
    """
    result = template
    for name, value in normalize_params(params):
        result = result.replace("{{" + name + "}}", value)
    return result


def resolve(
    table: TranslationTable,
    key: str,
    params: Params = None,
    language: Optional[str] = None,
) -> str:
    """Resolve a dotted key against a table and substitute parameters.

    Args:
        table: Root translation table of one language.
        key: Dotted translation key (e.g., "menu.file.save").
        params: Optional mapping or (name, value) pairs.
        language: Language code, attached to KeyNotFoundError for context.

    Returns:
        Resolved and interpolated string.

    Raises:
        KeyNotFoundError: If the key path does not fully resolve.
    """
    value = walk(table, TranslationKey.from_string(key), language)
    return interpolate(stringify_leaf(value), params)
