"""Logging configuration for typed_events."""

import logging
import sys

from loguru import logger


class InterceptHandler(logging.Handler):
    """Intercept standard logging messages toward loguru."""

    def emit(self, record):
        # Get corresponding loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(log_level: str | None = None, intercept_stdlib: bool = False):
    """Configure loguru output and enable the package's log messages.

    The package is silent until this is called (or until the host application
    calls ``logger.enable("typed_events")`` itself).

    Args:
        log_level: Log level to use. Falls back to ``Settings.log_level``.
        intercept_stdlib: Also redirect all standard logging records to loguru.
    """
    if log_level is None:
        from typed_events.settings import get_settings

        log_level = get_settings().log_level

    log_level = log_level.upper()

    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        level=log_level,
        colorize=True,
    )
    logger.enable("typed_events")

    logger.info(f"Log level set to: {log_level}")

    if intercept_stdlib:
        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
