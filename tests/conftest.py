"""
Configuration for pytest tests.
"""

import os
import pytest
from unittest.mock import MagicMock

# Set before the app modules read their configuration
os.environ.setdefault("OPENAI_API_KEY", "test_openai_key")
os.environ.setdefault("YOUTUBE_API_KEY", "test_youtube_key")
os.environ["ENVIRONMENT"] = "development"

from fastapi.testclient import TestClient

from app.api.app import app
from app.api.routes import get_summary_service
from app.core.metadata import YouTubeMetadataClient
from app.core.orchestrator import SummaryService
from app.core.summarizer import TranscriptSummarizer
from app.models.schemas import VideoSnippet


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/QiZ62yswdPw?si=IHWvSDSvLUQXqYpm"


@pytest.fixture
def snippet():
    """Fixture to create a video snippet."""
    return VideoSnippet(
        title="Test Video",
        description="A video about unit testing with pytest and mock objects.",
    )


@pytest.fixture
def mock_metadata_client(snippet):
    """Fixture to mock the YouTube metadata client."""
    client = MagicMock(spec=YouTubeMetadataClient)
    client.get_snippet_or_none.return_value = snippet
    return client


@pytest.fixture
def mock_summarizer():
    """Fixture to mock the transcript summarizer."""
    summarizer = MagicMock(spec=TranscriptSummarizer)
    summarizer.summarize.return_value = "This is a summarized transcript of the video."
    return summarizer


@pytest.fixture
def service(mock_metadata_client, mock_summarizer):
    return SummaryService(metadata_client=mock_metadata_client, summarizer=mock_summarizer)


@pytest.fixture
def client(service):
    """Test client with the summary service replaced by the mocked one."""
    app.dependency_overrides[get_summary_service] = lambda: service
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
