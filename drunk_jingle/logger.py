"""
Logging setup for drunk-jingle.

Library modules log through logging.getLogger(__name__) below the
'drunk_jingle' facility; applications call setup_logger() once to attach
console and (optionally) rotating file handlers.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import MapperConfig


# Log format
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Maximum log file size before rotation (10 MB)
MAX_LOG_SIZE = 10 * 1024 * 1024

# Number of backup files to keep
BACKUP_COUNT = 5

LOGGER_NAME = 'drunk_jingle'


def setup_logger(config: Optional[MapperConfig] = None) -> logging.Logger:
    """
    Setup the package logger.

    Args:
        config: Mapper configuration (log level and optional log file)

    Returns:
        The 'drunk_jingle' logger
    """
    config = config or MapperConfig()
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()  # Clear existing handlers
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.log_file:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.log_file,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logger initialized (level: {config.log_level}, file: {config.log_file})")
    return logger
