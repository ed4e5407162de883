"""
Logging infrastructure.

Provides logging utilities shared by the workflow engine and the API.
"""
import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(level: Optional[str]) -> str:
    return (level or os.getenv("LOG_LEVEL", "INFO")).upper()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once for the whole process.

    Args:
        level: Log level name; defaults to the LOG_LEVEL env var or INFO
    """
    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    A stream handler is attached only when nothing upstream will print
    the record already.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(None))
    return logger
