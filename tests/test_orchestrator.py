"""
Tests for the summary service that sequences the workflow.
"""

import pytest

from app.core.orchestrator import SummaryService
from app.core.prompts import NO_TRANSCRIPT_MESSAGES, Locale
from app.models.schemas import VideoSnippet
from app.utils.error_handling import NoContentError, UpstreamServiceError, VideoIdError


def test_summarize(service, mock_metadata_client, mock_summarizer, test_video_url):
    """Test a successful run fetches metadata then summarizes it."""
    summary = service.summarize(test_video_url, "en")

    assert summary == "This is a summarized transcript of the video."
    mock_metadata_client.get_snippet_or_none.assert_called_once_with("QiZ62yswdPw")
    mock_summarizer.summarize.assert_called_once_with(
        "[Video title: Test Video]\n\nA video about unit testing with pytest and mock objects.",
        Locale.EN,
    )


def test_invalid_url(service, mock_metadata_client):
    """Test no external call is made when the URL has no video ID."""
    with pytest.raises(VideoIdError) as exc_info:
        service.summarize("", "ko")

    assert exc_info.value.to_payload() == {
        "error": "Could not extract a valid YouTube video ID from the provided URL.",
        "receivedUrl": "",
    }
    mock_metadata_client.get_snippet_or_none.assert_not_called()


def test_invalid_url_not_a_string(service):
    with pytest.raises(VideoIdError) as exc_info:
        service.summarize(None, "ko")

    assert "receivedUrl" not in exc_info.value.to_payload()


def test_invalid_url_keeps_raw_value(service):
    with pytest.raises(VideoIdError) as exc_info:
        service.summarize(["https://youtu.be/QiZ62yswdPw"], "ko")

    assert exc_info.value.to_payload()["receivedUrl"] == ["https://youtu.be/QiZ62yswdPw"]


@pytest.mark.parametrize("locale", ["ko", "en"])
def test_empty_description(service, mock_metadata_client, mock_summarizer, test_video_url, locale):
    """Test an empty description gives the locale's no-transcript message."""
    mock_metadata_client.get_snippet_or_none.return_value = VideoSnippet(title="Test Video", description="")

    with pytest.raises(NoContentError) as exc_info:
        service.summarize(test_video_url, locale)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == NO_TRANSCRIPT_MESSAGES[Locale(locale)]
    mock_summarizer.summarize.assert_not_called()


def test_metadata_failure_means_no_content(service, mock_metadata_client, test_video_url):
    mock_metadata_client.get_snippet_or_none.return_value = None

    with pytest.raises(NoContentError):
        service.summarize(test_video_url, "en")


def test_unknown_locale_no_content_uses_default_message(service, mock_metadata_client, test_video_url):
    mock_metadata_client.get_snippet_or_none.return_value = None

    with pytest.raises(NoContentError) as exc_info:
        service.summarize(test_video_url, "fr")

    assert exc_info.value.message == NO_TRANSCRIPT_MESSAGES[Locale.KO]


def test_unknown_locale_passed_to_summarizer_as_none(service, mock_summarizer, test_video_url):
    service.summarize(test_video_url, "fr")

    assert mock_summarizer.summarize.call_args[0][1] is None


def test_long_content_is_truncated(service, mock_metadata_client, mock_summarizer, test_video_url):
    """Test a 70,000 character content source reaches the model as 60,000."""
    title = "Test Video"
    prefix = f"[Video title: {title}]\n\n"
    mock_metadata_client.get_snippet_or_none.return_value = VideoSnippet(
        title=title,
        description="x" * (70000 - len(prefix)),
    )

    service.summarize(test_video_url, "en")

    content = mock_summarizer.summarize.call_args[0][0]
    assert len(content) == 60000
    assert content.startswith(prefix)


def test_summarizer_failure_propagates(service, mock_summarizer, test_video_url):
    mock_summarizer.summarize.side_effect = UpstreamServiceError("OpenAI failed: boom")

    with pytest.raises(UpstreamServiceError):
        service.summarize(test_video_url, "en")


def test_custom_content_limit(mock_metadata_client, mock_summarizer, test_video_url):
    service = SummaryService(
        metadata_client=mock_metadata_client,
        summarizer=mock_summarizer,
        max_content_chars=20,
    )

    service.summarize(test_video_url, "en")

    assert len(mock_summarizer.summarize.call_args[0][0]) == 20
