import sys
from typing import TextIO

from loguru import logger

__all__ = ["LOGGER_NAME", "configure_logging"]

LOGGER_NAME = "unsplash_client"

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str = "INFO", sink: TextIO = sys.stderr) -> int:
    """
    Turn on unsplash-client log output.

    The package keeps its records disabled by default so that importing it
    never writes to an application's sinks. This enables them and adds a sink
    that only receives records emitted from this package.

    Args:
        level: Minimum level (DEBUG logs every request and response status).
        sink: Stream receiving the formatted records.

    Returns:
        The loguru handler id, usable with ``logger.remove``.
    """
    logger.enable(LOGGER_NAME)
    return logger.add(sink, level=level, format=LOG_FORMAT, filter=LOGGER_NAME)
