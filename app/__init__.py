"""
YouTube Video Summary API.

This application accepts a YouTube link, looks up the video's title and
description, and generates a summary with an LLM model.
"""

from app.config import config

__version__ = config.APP_VERSION
