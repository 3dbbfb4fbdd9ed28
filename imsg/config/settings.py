"""Configuration management for applications embedding the codec.

The codec itself reads no configuration; these settings only control how
its log output is set up.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import os

from dotenv import find_dotenv, load_dotenv

from imsg.utils.exceptions import ConfigurationError
from imsg.utils.logging import setup_logging

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    
    level: str = "WARNING"
    
    def validate(self) -> None:
        """Validate logging configuration parameters."""
        if self.level.upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Log level must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got: {self.level}"
            )


class Config:
    """Main configuration loader and manager."""
    
    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration manager.
        
        Args:
            env_file: Path of a .env file to read; by default one is
                      searched for from the working directory
        """
        self.env_file = env_file
        self.logging: Optional[LoggingConfig] = None
    
    def load_env_file(self) -> bool:
        """
        Load the .env file into the environment without overriding
        variables that are already set.
        
        Returns:
            True if a file was found and read
        """
        path = self.env_file or find_dotenv(usecwd=True)
        if not path:
            return False
        return load_dotenv(dotenv_path=path, override=False)
    
    def load_logging_config(self) -> LoggingConfig:
        """
        Load logging configuration from environment variables.
        
        The .env file, if any, is read first.
        
        Environment variables:
            IMSG_LOG_LEVEL: Logging level name (default: WARNING)
        
        Returns:
            Validated LoggingConfig instance
            
        Raises:
            ConfigurationError: If the level is not a valid logging level
        """
        self.load_env_file()
        config = LoggingConfig(
            level=os.getenv('IMSG_LOG_LEVEL', 'WARNING'),
        )
        config.validate()
        self.logging = config
        return config
    
    def apply_logging(self) -> int:
        """
        Load logging configuration and configure the logging module with it.
        
        Returns:
            Numeric logging level that was applied
        """
        config = self.load_logging_config()
        setup_logging(config.level)
        return getattr(logging, config.level.upper())
