"""
Configuration settings for the Shopify REST client.
Handles environment variable loading and validation.
"""

import os
import logging
from typing import Optional

from dotenv import load_dotenv

from .constants import (
    ENV_STORE,
    ENV_API_KEY,
    ENV_PASSWORD,
    ENV_REQUEST_TIMEOUT,
    ENV_LOG_LEVEL,
    LOG_FORMAT,
    REQUEST_TIMEOUT,
)


class Settings:
    """
    Store credentials and client options read from the environment.

    A .env file in the working directory is loaded first; variables already
    present in the environment win.
    """

    def __init__(self, dotenv_path: Optional[str] = None):
        load_dotenv(dotenv_path)

    # Store Configuration
    @property
    def store(self) -> str:
        """Get store name from environment."""
        return os.getenv(ENV_STORE, "")

    @property
    def api_key(self) -> str:
        """Get private app API key from environment."""
        return os.getenv(ENV_API_KEY, "")

    @property
    def password(self) -> str:
        """Get private app password from environment."""
        return os.getenv(ENV_PASSWORD, "")

    @property
    def request_timeout(self) -> float:
        """Get transport timeout in seconds from environment."""
        return float(os.getenv(ENV_REQUEST_TIMEOUT, str(REQUEST_TIMEOUT)))

    # Logging Configuration
    @property
    def log_level(self) -> str:
        """Get log level from environment."""
        return os.getenv(ENV_LOG_LEVEL, "INFO")

    def validate_required_vars(self) -> None:
        """
        Validate that all required environment variables are set.
        Raises ValueError if any required variable is missing.
        """
        required_vars = [
            (ENV_STORE, self.store),
            (ENV_API_KEY, self.api_key),
            (ENV_PASSWORD, self.password),
        ]

        missing_vars = [name for name, value in required_vars if not value]

        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}. "
                f"Please check your .env file or environment configuration."
            )

    def setup_logging(self) -> None:
        """Setup logging configuration based on environment variables."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper(), logging.INFO),
            format=LOG_FORMAT,
        )
