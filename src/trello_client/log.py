"""
Logging Setup

Console and optional file handlers for the ``trello_client`` logger.
"""

import logging
import sys
from typing import Optional

from .config import config


def setup_logging(
    log_level: Optional[str] = None,
    log_to_file: bool = False
) -> logging.Logger:
    """
    Set up logging for the client package.
    
    Args:
        log_level: Level name for the console handler (uses config default if None).
        log_to_file: Also write DEBUG output to ``config.log.log_file_path``.
    
    Returns:
        The configured ``trello_client`` logger.
    
    Raises:
        ValueError: If the level name is not a standard logging level.
    """
    log_level = (log_level or config.log.log_level).upper()
    level = logging.getLevelName(log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    
    logger = logging.getLogger("trello_client")
    logger.setLevel(logging.DEBUG if log_to_file else level)
    
    # Drop handlers from a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    
    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)
    
    # File handler
    if log_to_file:
        config.log.log_directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            config.log.log_file_path,
            mode='w',
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(config.log.log_format))
        logger.addHandler(file_handler)
    
    return logger
