"""
Building the text handed to the summarizer in place of a transcript.
"""

from typing import Optional

from app.config import config
from app.models.schemas import VideoSnippet
from app.utils.logger import logging


def build_content_source(snippet: Optional[VideoSnippet]) -> str:
    """
    Combine a video's title and description into summarizable text.

    Args:
        snippet: Video metadata, or None if it could not be fetched

    Returns:
        The synthesized text, or an empty string when there is no description
    """
    if snippet is None or not snippet.description:
        logging.info("No description available")
        return ""

    content = f"[Video title: {snippet.title}]\n\n{snippet.description}"
    logging.info(f"Using video description as transcript, length: {len(content)}")
    return content


def truncate_content(content: str, max_chars: int = config.MAX_CONTENT_CHARS) -> str:
    """Cut ``content`` down to its first ``max_chars`` characters."""
    if len(content) <= max_chars:
        return content
    logging.info(f"Trimming content from {len(content)} to {max_chars} chars")
    return content[:max_chars]
