"""
Logging setup shared by the grid and explorer modules.
"""

import logging
import sys
from typing import Optional

from .config import LOG_LEVEL


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Return a logger writing to stdout with a timestamped format.

    Args:
        name: Logger name (typically __name__)
        level: Logging level name; falls back to SAMPLE_SIZE_EXPLORER_LOG_LEVEL,
            then to INFO when the name is not a logging level

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    log_level = getattr(logging, (level or LOG_LEVEL).upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logger.setLevel(log_level)

    # Avoid duplicate handlers on repeated setup
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
        ))
        logger.addHandler(handler)

    return logger
