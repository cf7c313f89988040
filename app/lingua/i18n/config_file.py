"""Extract a single value from a loosely formatted config file.

Understands the common shapes of JSON, TOML and plain ``key=value`` files
line by line, without parsing the whole document:

    # comment
    // comment
    language=de
    language = "de"
    "language": "de",

Each line is split on the first ``:`` and, failing a key match, the first
``=``. Surrounding quotes and a trailing comma are stripped from values.
"""

from pathlib import Path

import structlog

from lingua.i18n.exceptions import (
    ConfigFileNotFoundError,
    ConfigFileReadError,
    ValueNotFoundInConfigError,
)

logger = structlog.get_logger()

SEPARATORS = (":", "=")
COMMENT_PREFIXES = ("#", "//")


def _clean_value(raw: str) -> str:
    return raw.strip().strip('"').strip(",").strip('"')


def read_config_value(path: Path | str, key: str) -> str:
    """Return the first value stored under ``key`` in a config file.

    Args:
        path: Path to the config file.
        key: Key to look up; surrounding quotes are ignored.

    Returns:
        The value with quotes and trailing comma removed.

    Raises:
        ConfigFileNotFoundError: If the path does not exist.
        ConfigFileReadError: If the file cannot be read as text.
        ValueNotFoundInConfigError: If no line carries the key.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigFileNotFoundError(str(path))

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("config_file_read_failed", path=str(path), error=str(e))
        raise ConfigFileReadError(str(path), str(e)) from e

    clean_key = key.strip('"').strip()

    for line in content.splitlines():
        line = line.strip()
        if line.startswith(COMMENT_PREFIXES):
            continue

        for sep in SEPARATORS:
            pos = line.find(sep)
            if pos == -1:
                continue
            if line[:pos].strip().strip('"') == clean_key:
                value = _clean_value(line[pos + 1 :])
                logger.debug("config_value_found", path=str(path), key=clean_key)
                return value

    raise ValueNotFoundInConfigError(key)
