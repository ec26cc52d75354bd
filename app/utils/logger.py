"""
Application logger, writing to ``logs/youtubesummary.log`` and stdout.

Modules import it as ``from app.utils.logger import logging``.
"""

import sys
import logging as std_logging
from pathlib import Path

LOGGER_NAME = "youtubesummary"
LOG_FORMAT = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
LOG_DIR = Path(__file__).resolve().parents[2] / "logs"
LOG_FILE = LOG_DIR / "youtubesummary.log"


def _create_logger() -> std_logging.Logger:
    logger = std_logging.getLogger(LOGGER_NAME)
    logger.setLevel(std_logging.INFO)

    # Re-imports (e.g. uvicorn reload) must not stack handlers
    if logger.handlers:
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    formatter = std_logging.Formatter(LOG_FORMAT)
    for handler in (
        std_logging.FileHandler(LOG_FILE, encoding="utf-8"),
        std_logging.StreamHandler(sys.stdout),
    ):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def set_level(level_name: str) -> None:
    """Set the application log level from a name such as ``"DEBUG"``."""
    logging.setLevel(getattr(std_logging, level_name.upper(), std_logging.INFO))


logging = _create_logger()
