"""Logging configuration for trusty.

All logging goes through loguru. Standard library loggers (uvicorn, asyncpg)
are routed into loguru by an intercept handler so the service writes a single
log stream.
"""

import inspect
import logging
import sys
from typing import Optional

from loguru import logger

from .settings import TrustySettings, get_settings


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller outside the logging module so loguru reports the right origin
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


# Libraries whose loggers are replaced by the intercept handler
INTERCEPTED_LOGGERS = (
    "uvicorn",
    "uvicorn.error",
    "uvicorn.access",
    "asyncpg",
    "fastapi",
)


def setup_logging(settings: Optional[TrustySettings] = None) -> None:
    """Configure loguru sinks and route stdlib logging into them.

    Args:
        settings: Settings to read log level, format and file options from
    """
    settings = settings or get_settings()

    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=settings.log_format,
        backtrace=settings.debug,
        diagnose=settings.debug,
    )

    if settings.log_file:
        logger.add(
            settings.log_file,
            level=settings.log_level,
            format=settings.log_format,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    logger.debug(f"Logging configured at level {settings.log_level}")
