"""Utility modules for logging and exception handling."""

from imsg.utils.logging import setup_logging, get_logger
from imsg.utils.exceptions import (
    ImsgError,
    DataTooLargeError,
    LengthOutOfBoundsError,
    InsufficientDataError,
    ConfigurationError,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'ImsgError',
    'DataTooLargeError',
    'LengthOutOfBoundsError',
    'InsufficientDataError',
    'ConfigurationError',
]
