from pydantic import BaseModel
from typing import Any, Optional

from app.core.prompts import DEFAULT_LOCALE


class SummarizeRequest(BaseModel):
    """Model for requesting video summarization."""
    videoUrl: Any = None
    locale: Optional[str] = DEFAULT_LOCALE.value


class SummaryResponse(BaseModel):
    """Model for summary responses."""
    summary: str


class ErrorResponse(BaseModel):
    """Model for error responses."""
    error: str
    receivedUrl: Any = None
