"""
Centralized error handling for the application.

Every failure the summary endpoint can report is a ``SummaryServiceError``
carrying its HTTP status, so routes raise and the exception handlers in
``app.api.app`` shape the JSON body.
"""

from typing import Dict, Any
import traceback

from app.utils.logger import logging


class SummaryServiceError(Exception):
    """Base error for the summary endpoint."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class InvalidRequestError(SummaryServiceError):
    """The request body could not be parsed."""

    status_code = 400

    def __init__(self, message: str = "Invalid request body"):
        super().__init__(message)


class VideoIdError(SummaryServiceError):
    """No video identifier could be extracted from the submitted URL."""

    status_code = 400

    def __init__(self, received_url: Any):
        super().__init__("Could not extract a valid YouTube video ID from the provided URL.")
        self.received_url = received_url

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        if self.received_url is not None:
            payload["receivedUrl"] = self.received_url
        return payload


class NoContentError(SummaryServiceError):
    """Neither a transcript nor a description is available for the video."""

    status_code = 400


class UpstreamServiceError(SummaryServiceError):
    """The language model call failed."""

    status_code = 500


class EmptySummaryError(UpstreamServiceError):
    """The language model answered without any usable text."""

    def __init__(self, message: str = "Failed to generate summary"):
        super().__init__(message)


def log_exception(context: str, error: Exception, with_traceback: bool = False):
    """
    Log an exception with a short context prefix.

    Args:
        context: What was being attempted when the error occurred
        error: The exception that occurred
        with_traceback: Whether to also log the current traceback
    """
    logging.error(f"{context}: {str(error)}")
    if with_traceback:
        logging.error("".join(traceback.format_exception(type(error), error, error.__traceback__)))
