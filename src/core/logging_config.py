"""Logging setup for the web application."""

import logging

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger once for the whole process.

    Args:
        level: Logging level name, e.g. "INFO" or "DEBUG".
    """
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    # Keep the multipart parser quiet unless explicitly debugging
    logging.getLogger("multipart").setLevel(logging.WARNING)
