"""Structlog configuration and logger access.

Usage::

    from route_i18n.core.logging import configure_logging, get_logger

    configure_logging("INFO", is_production=False)  # once, at startup
    logger = get_logger(__name__)
    logger.warning("translation_missing", key="common.save")

Loggers returned by ``get_logger`` are lazy proxies, so modules can create
them at import time before ``configure_logging`` has run.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.stdlib import BoundLogger


def _is_test_environment() -> bool:
    """Return True when running under pytest."""
    return "pytest" in sys.modules


def configure_logging(log_level: str = "INFO", is_production: bool = False) -> None:
    """Configure structlog on top of the standard logging module.

    Development renders colourful console lines, production emits one JSON
    object per line. Under pytest output is suppressed entirely and the
    structlog defaults are left alone so ``structlog.testing.capture_logs``
    keeps working.
    """
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)
        return

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
        force=True,
    )
    # Silence noisy third-party loggers.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> BoundLogger:
    """Return a (lazy) structlog logger bound to ``name``."""
    return structlog.get_logger(name)
