"""
Data models for the YouTube summary application.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict
from app.config import config


class VideoSnippet(BaseModel):
    """The ``snippet`` part of a YouTube Data API video resource."""
    title: str = ""
    description: str = ""

    model_config = ConfigDict(extra="ignore")


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    model: str = config.DEFAULT_SUMMARY_MODEL
    temperature: float = config.SUMMARY_TEMPERATURE
    max_tokens: int = config.SUMMARY_MAX_TOKENS
    timeout: Optional[float] = config.LLM_TIMEOUT
    max_retries: int = 0
