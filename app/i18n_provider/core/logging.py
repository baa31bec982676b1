"""i18n provider structured logging module.

Importing the library never touches logging configuration. Module loggers are
lazy structlog proxies that follow whatever the host configures. Hosts without
their own setup may call `configure_logging()` once at startup.
"""

import inspect
import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from .config import Settings, get_settings

LIBRARY_LOGGER_NAME = "i18n_provider"

logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(settings: Optional[Settings] = None) -> BoundLogger:
    """Configure structlog rendering and the library log level.

    Console rendering outside production, JSON in production. The root logger
    only gets a handler if it has none yet.

    Args:
        settings: Settings to read LOG_LEVEL and PREFIX from
            (default: get_settings()).

    Returns:
        Logger bound to the library name.
    """
    settings = settings or get_settings()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if not settings.is_production:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.getLogger(LIBRARY_LOGGER_NAME).setLevel(level)
    logging.basicConfig(format="%(message)s", level=level)

    return structlog.stdlib.get_logger(LIBRARY_LOGGER_NAME)


def get_module_logger() -> BoundLogger:
    """Get a lazy logger for the calling module with full path context."""
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None

    if module:
        parts = module.__name__.split(".")
        return structlog.stdlib.get_logger(
            module.__name__, component=parts[-1], module_path=module.__name__
        )

    return structlog.stdlib.get_logger(LIBRARY_LOGGER_NAME, component="unknown")
