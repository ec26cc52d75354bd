"""
Sequencing of the summary workflow: video ID, metadata, then summarization.
"""

from typing import Any, Optional

from app.config import config
from app.core.content import build_content_source, truncate_content
from app.core.metadata import YouTubeMetadataClient
from app.core.prompts import DEFAULT_LOCALE, Locale, get_no_transcript_message
from app.core.summarizer import TranscriptSummarizer
from app.core.video_id import extract_video_id
from app.utils.error_handling import NoContentError, VideoIdError
from app.utils.logger import logging


class SummaryService:
    """Produces a summary for a YouTube URL."""

    def __init__(
        self,
        metadata_client: Optional[YouTubeMetadataClient] = None,
        summarizer: Optional[TranscriptSummarizer] = None,
        max_content_chars: int = config.MAX_CONTENT_CHARS,
    ):
        self.metadata_client = metadata_client or YouTubeMetadataClient()
        self.summarizer = summarizer or TranscriptSummarizer()
        self.max_content_chars = max_content_chars

    def summarize(self, video_url: Any, locale: Optional[str] = DEFAULT_LOCALE.value) -> str:
        """
        Summarize the video at ``video_url``.

        The metadata lookup is optional: if it fails the request continues
        and ends in a NoContentError. A failed model call is always fatal.

        Args:
            video_url: URL as submitted by the client
            locale: Language tag for prompts and messages

        Returns:
            The summary text

        Raises:
            VideoIdError: If no video ID can be extracted from the URL
            NoContentError: If there is no text to summarize
            UpstreamServiceError: If the language model call fails
        """
        logging.info(f"Received URL: {video_url}")
        resolved_locale = Locale.parse(locale)

        video_id = extract_video_id(video_url)
        if not video_id:
            logging.error(f"Failed to extract video ID from URL: {video_url}")
            raise VideoIdError(video_url)
        logging.info(f"Successfully extracted video ID: {video_id}")

        snippet = self.metadata_client.get_snippet_or_none(video_id)
        content = build_content_source(snippet)

        if not content.strip():
            logging.error("No transcript or description available")
            raise NoContentError(get_no_transcript_message(resolved_locale))

        content = truncate_content(content, self.max_content_chars)
        return self.summarizer.summarize(content, resolved_locale)
