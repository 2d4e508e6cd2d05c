"""
Logging setup shared by anything embedding the engine.

Library modules only call logging.getLogger("taqvim.<area>"); the host
process calls configure_logging() once to route stdlib and structlog
records to stdout.
"""

from __future__ import annotations

import logging
import sys

import structlog

from config.settings import settings


def configure_logging(level: str | None = None) -> None:
    level_name = (level or settings.log_level).upper()

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        stream=sys.stdout,
        force=True,
    )
    structlog.get_logger("taqvim").debug("logging configured", level=level_name)
