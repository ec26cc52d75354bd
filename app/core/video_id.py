"""
Extraction of YouTube video identifiers from user-submitted URLs.

YouTube links come in several shapes. Each shape is handled by its own rule,
tried in order, and whatever candidate a rule produces is validated against
the identifier format before being returned.
"""

import re
from typing import Any, Callable, NamedTuple, Optional
from urllib.parse import urlsplit, parse_qs

from app.utils.logger import logging


VIDEO_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{11}")
FALLBACK_PATTERN = re.compile(r"([A-Za-z0-9_-]{11})")
_PATH_TERMINATORS = re.compile(r"[?#&]")


class VideoIdRule(NamedTuple):
    """A URL shape: the marker that identifies it and how to pull the ID out."""
    name: str
    marker: str
    extract: Callable[[str, str], str]


def extract_after_marker(url: str, marker: str) -> str:
    """Return the path segment following ``marker``, up to the first ? # or &."""
    parts = url.split(marker)
    if len(parts) < 2:
        return ""
    return _PATH_TERMINATORS.split(parts[1], maxsplit=1)[0]


def extract_query_param(url: str, marker: str) -> str:
    """Return the first ``v`` query parameter of an absolute watch URL."""
    try:
        parts = urlsplit(url)
    except ValueError as e:
        logging.debug(f"Could not parse watch URL {url!r}: {e}")
        return ""
    if not parts.scheme or not parts.netloc:
        logging.debug(f"Watch URL {url!r} is not absolute")
        return ""
    values = parse_qs(parts.query, keep_blank_values=True).get("v")
    return values[0] if values else ""


RULES = (
    VideoIdRule("short link", "youtu.be/", extract_after_marker),
    VideoIdRule("watch page", "youtube.com/watch", extract_query_param),
    VideoIdRule("legacy player", "youtube.com/v/", extract_after_marker),
    VideoIdRule("embedded player", "youtube.com/embed/", extract_after_marker),
)


def find_candidate(url: str) -> str:
    """Run the first rule whose marker occurs in ``url``, else the fallback scan."""
    for rule in RULES:
        if rule.marker in url:
            candidate = rule.extract(url, rule.marker)
            logging.debug(f"Extracted {candidate!r} using the {rule.name} rule")
            return candidate

    match = FALLBACK_PATTERN.search(url)
    if match:
        logging.debug(f"Extracted {match.group(1)!r} using the fallback pattern")
        return match.group(1)
    return ""


def is_valid_video_id(candidate: Any) -> bool:
    return isinstance(candidate, str) and VIDEO_ID_PATTERN.fullmatch(candidate) is not None


def extract_video_id(url: Any) -> Optional[str]:
    """
    Extract the 11-character video ID from a YouTube URL.

    Args:
        url: Raw URL as submitted by the user; may be empty or not a string

    Returns:
        The video ID, or None if no valid ID could be found
    """
    if not isinstance(url, str) or not url:
        logging.debug("URL is empty or not a string")
        return None

    candidate = find_candidate(url)
    if is_valid_video_id(candidate):
        return candidate

    logging.debug(f"Could not extract a valid video ID from {url!r}")
    return None
