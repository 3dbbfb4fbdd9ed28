"""Configuration module for managing logging settings."""

from imsg.config.settings import (
    LoggingConfig,
    Config,
)

__all__ = [
    'LoggingConfig',
    'Config',
]
