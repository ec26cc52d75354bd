"""
Client for the YouTube Data API video metadata endpoint.
"""

from typing import Optional

import requests

from app.config import config
from app.models.schemas import VideoSnippet
from app.utils.logger import logging


class MetadataFetchError(Exception):
    """Raised when video metadata could not be retrieved."""


class YouTubeMetadataClient:
    """Class to fetch video snippets from the YouTube Data API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: str = config.YOUTUBE_API_URL,
        timeout: Optional[float] = config.HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: YouTube Data API key (if None, uses the configured key)
            api_url: Videos endpoint of the YouTube Data API
            timeout: Seconds to wait for a response
            session: Session to reuse connections across requests
        """
        self.api_key = api_key or config.YOUTUBE_API_KEY
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_snippet(self, video_id: str) -> Optional[VideoSnippet]:
        """
        Fetch the title and description of a video.

        Args:
            video_id: YouTube video ID

        Returns:
            The video's snippet, or None if the API returned no such video

        Raises:
            MetadataFetchError: If the key is missing or the request fails
        """
        if not self.api_key:
            raise MetadataFetchError("YouTube API key is not configured")

        params = {
            "id": video_id,
            "part": "snippet",
            "key": self.api_key,
        }

        try:
            response = self.session.get(self.api_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise MetadataFetchError(str(e)) from e

        if not isinstance(data, dict):
            raise MetadataFetchError("Unexpected response from YouTube API")

        items = data.get("items")
        if not isinstance(items, list) or not items or not isinstance(items[0], dict):
            return None

        snippet = items[0].get("snippet")
        if not isinstance(snippet, dict):
            return None

        return VideoSnippet(
            title=str(snippet.get("title") or ""),
            description=str(snippet.get("description") or ""),
        )

    def get_snippet_or_none(self, video_id: str) -> Optional[VideoSnippet]:
        """Fetch a snippet, logging and swallowing any failure."""
        logging.info("Getting video information from YouTube API")
        try:
            return self.fetch_snippet(video_id)
        except MetadataFetchError as e:
            logging.error(f"YouTube API error: {str(e)}")
            return None
