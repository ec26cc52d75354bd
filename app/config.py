"""
Configuration settings for the YouTube summary API.
"""

import os
from typing import List
from dotenv import load_dotenv

from app.utils.logger import logging, set_level


# Ensure environment variables are loaded
load_dotenv()


class ConfigurationError(Exception):
    """Raised when required configuration is missing at startup."""


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Video Summary API"
    APP_VERSION = "0.2.0"

    # API keys
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")

    # YouTube Data API
    YOUTUBE_API_URL = os.getenv("YOUTUBE_API_URL", "https://www.googleapis.com/youtube/v3/videos")

    # Summarization defaults
    DEFAULT_SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "gpt-4o")
    SUMMARY_MAX_TOKENS = 2000
    SUMMARY_TEMPERATURE = 0.7
    MAX_CONTENT_CHARS = 60000

    # Outbound call timeouts (seconds)
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))
    LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "60"))

    LOG_LEVEL = "INFO"
    FAIL_FAST = False

    @classmethod
    def missing_keys(cls) -> List[str]:
        """Return the names of required secrets that are not set."""
        required = {
            "OPENAI_API_KEY": cls.OPENAI_API_KEY,
            "YOUTUBE_API_KEY": cls.YOUTUBE_API_KEY,
        }
        return [name for name, value in required.items() if not value]

    @classmethod
    def initialize(cls):
        """Validate the application configuration."""
        missing = cls.missing_keys()
        if not missing:
            return

        if cls.FAIL_FAST:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        for name in missing:
            logging.warning(f"{name} environment variable not set.")
        logging.warning("Please set it in the .env file or environment variables.")


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    LOG_LEVEL = "INFO"
    FAIL_FAST = True


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
set_level(config.LOG_LEVEL)
