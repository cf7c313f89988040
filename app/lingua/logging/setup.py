"""Structlog configuration and logger setup.

Importing lingua never configures logging: module loggers are lazy
structlog proxies that follow whatever configuration the host
application installs. Applications without their own setup can call
``configure_logging()`` once at startup for console output in development
and JSON in production.

Usage:
    from lingua.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("language_loaded", language="de")
"""

import inspect
import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from lingua.configuration import Settings


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> BoundLogger:
    """Configure structured logging for an application using lingua.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Controls JSON
            vs console output. Defaults to settings.is_production.
        settings: Settings to read defaults from (default: loaded from
            environment).

    Returns:
        Configured logger instance
    """
    settings = settings or Settings()

    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Binds ``component`` (last module path segment) and ``module_path``.
    The returned logger stays lazy, so it is safe to create at import time.

    Example:
        # In lingua/i18n/registry.py
        logger = get_module_logger()
        # context: {"component": "registry", "module_path": "lingua.i18n.registry"}
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    if frame is None:
        return logger

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        return structlog.stdlib.get_logger(
            component=parts[-1],
            module_path=module_name,
        )

    return structlog.stdlib.get_logger(component="unknown")
