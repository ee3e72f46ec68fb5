from __future__ import annotations

import logging
import sys

import structlog

_CONFIGURED = False


def configure_logging() -> None:
    """Opt-in JSON logging setup for applications built on these helpers."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def get_logger(name: str = "appcommon"):
    # Leaves structlog configuration to the host (see configure_logging).
    return structlog.get_logger(name)
