"""
Logging setup for applications using the SDK

Modules log through ``logging.getLogger(__name__)`` under the
``battlenet_api`` logger; nothing is configured until ``setup_logging`` is
called.
"""

import logging
from typing import Optional

SDK_LOGGER = "battlenet_api"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger, optionally setting its level

    Args:
        name: Logger name (typically __name__ from calling module)
        level: Optional logging level (defaults to None to inherit)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def setup_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    debug: bool = False
) -> logging.Logger:
    """
    Configure application-wide logging

    Args:
        level: Logging level (default: INFO)
        format_string: Custom format string (optional)
        debug: Log the SDK at DEBUG regardless of ``level``

    Returns:
        The SDK logger
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        force=True
    )
    return get_logger(SDK_LOGGER, logging.DEBUG if debug else None)
