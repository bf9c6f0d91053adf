"""Configuration management for the cookbook package.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import logging
import os

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()

LOG_TYPES = ("text", "json")


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Logging level for cookbook loggers: any name the logging module knows (DEBUG, INFO, WARN, ...)
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        # Log output format: "text" (colored console) or "json" (structured)
        self.LOG_TYPE: str = os.getenv("LOG_TYPE", "text").lower()
        # Name of the module-level logger
        self.LOGGER_NAME: str = os.getenv("LOGGER_NAME", "cookbook")

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a variable holds an unsupported value.
        """
        if not isinstance(getattr(logging, self.LOG_LEVEL, None), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name such as INFO or WARNING, got: {self.LOG_LEVEL}")
        if self.LOG_TYPE not in LOG_TYPES:
            raise ValueError(f"LOG_TYPE must be 'text' or 'json', got: {self.LOG_TYPE}")
        if not self.LOGGER_NAME.strip():
            raise ValueError("LOGGER_NAME must not be empty")


# Create module-level config instance and validate immediately
config = Config()
config.validate()
