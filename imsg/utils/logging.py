"""Logging configuration and utilities.

Codec modules log through children of the ``imsg`` logger, so an
application can turn their output on without touching the root logger.
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = 'imsg'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Handler installed by the last setup_logging() call
_handler: Optional[logging.Handler] = None


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the package logger.
    
    Records are written by the package's own handler and do not propagate
    to the root logger. Calling this again replaces the handler installed
    by a previous call.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
               Default: INFO
        stream: Where to write records (default: sys.stdout)
    
    Returns:
        The configured package logger
    
    Raises:
        ValueError: If the level name is not a known logging level
    """
    global _handler
    
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')
    
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
    
    _handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(numeric_level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.
    
    Args:
        name: Name of the module (typically __name__)
        
    Returns:
        Logger instance configured for the module
    """
    return logging.getLogger(name)
