"""Process-wide logging for the storefront API.

structlog renders every record, including the ones written through plain
``logging`` loggers, which reach it via ``ProcessorFormatter``. Records are
reshaped by the storefront schema processor before rendering.

Environment:
- ``LOG_FORMAT``: ``json`` or ``console``; otherwise JSON only in deployed
  environments (``APP_ENV`` qa, staging, prod, production)
- ``LOG_LEVEL``: stdlib level name, INFO by default
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from storefront_api.infrastructure.observability.logging.schema_processor import (
    storefront_schema_processor,
)

JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})

# libraries whose INFO output is noise next to the request log
QUIET_LOGGERS = ("pymongo", "httpx", "PIL")

_configured = False


def _renderer(log_format: str, app_env: str) -> Any:
    use_json = log_format == "json" or (log_format != "console" and app_env in JSON_ENVIRONMENTS)
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Installs the structlog pipeline and the stdlib bridge once per process."""
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    renderer = _renderer(
        os.environ.get("LOG_FORMAT", "").lower(), os.environ.get("APP_ENV", "local").lower()
    )
    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        storefront_schema_processor,
    ]
    structlog.configure(
        processors=[*pre_chain, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *pre_chain,
                renderer,
            ],
        )
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(_level(os.environ.get("LOG_LEVEL", "INFO")))
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class LoggerFactoryService:
    @staticmethod
    def build_logger(name: str) -> logging.Logger:
        """Module logger; its records go through the structlog pipeline."""
        configure_logging()
        return logging.getLogger(name)
