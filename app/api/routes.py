"""
API routes for the YouTube summary application.
"""

from functools import lru_cache

from fastapi import APIRouter, Depends

from app.api.schemas import SummarizeRequest, SummaryResponse, ErrorResponse
from app.core.orchestrator import SummaryService
from app.core.prompts import DEFAULT_LOCALE

router = APIRouter(prefix="/api", tags=["youtube"])


@lru_cache(maxsize=1)
def get_summary_service() -> SummaryService:
    """Shared service instance, so outbound connections are pooled."""
    return SummaryService()


@router.post(
    "/summarize",
    response_model=SummaryResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def summarize_video(
    request: SummarizeRequest,
    service: SummaryService = Depends(get_summary_service),
):
    """
    Summarize a YouTube video by URL.

    - Uses the video's title and description in place of a transcript
    - Answers in the requested locale (Korean by default)
    """
    locale = request.locale or DEFAULT_LOCALE.value
    summary = service.summarize(request.videoUrl, locale)
    return SummaryResponse(summary=summary)
