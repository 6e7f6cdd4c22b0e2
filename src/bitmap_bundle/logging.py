"""Centralized logging configuration using loguru.

The package disables its own loguru records on import, as libraries should, so
embedding applications see nothing unless they opt in. Calling
``setup_logging`` (the CLI does this at startup) re-enables them.

Example:
    from bitmap_bundle.logging import setup_logging

    setup_logging(level="DEBUG")

    # Then use loguru's logger in any module
    from loguru import logger
    logger.debug("Resolved 56x56 from 64x64")

"""

import sys
from typing import Any

from loguru import logger

PACKAGE = "bitmap_bundle"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: str | None = None,
) -> Any:
    """Configure loguru handlers and enable records from this package.

    Args:
        level: Minimum log level to capture. One of: DEBUG, INFO, WARNING, ERROR, CRITICAL.
        json_output: If True, serialize records as JSON lines.
        log_file: Optional file path to also write logs to.

    Returns:
        The configured loguru logger instance.

    """
    logger.remove()

    if json_output:
        logger.add(sys.stderr, format="{message}", serialize=True, level=level)
    else:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        logger.add(
            log_file,
            format=CONSOLE_FORMAT,
            level=level,
            rotation="10 MB",
            retention="7 days",
            compression="gz",
        )

    logger.enable(PACKAGE)
    return logger


def get_logger(name: str | None = None) -> Any:
    """Get a logger instance, optionally bound to a specific name.

    Args:
        name: Optional name to bind to the logger context.

    Returns:
        A loguru logger instance, optionally with name context.

    """
    if name:
        return logger.bind(name=name)
    return logger
