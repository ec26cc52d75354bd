"""
Command line entry point for the YouTube Video Summary API.
"""

import sys
import argparse
from typing import Optional

from app.config import config
from app.core.orchestrator import SummaryService
from app.core.prompts import DEFAULT_LOCALE, Locale
from app.core.summarizer import TranscriptSummarizer
from app.models.schemas import SummaryConfig
from app.utils.error_handling import SummaryServiceError


def summarize_youtube_video(
    url: str,
    locale: str = DEFAULT_LOCALE.value,
    model: Optional[str] = None,
) -> str:
    """
    Summarize a YouTube video without going through the HTTP API.

    Args:
        url: YouTube video URL
        locale: Language of the summary
        model: Language model to use (defaults to the configured model)

    Returns:
        The summary text
    """
    summary_config = SummaryConfig(model=model or config.DEFAULT_SUMMARY_MODEL)
    service = SummaryService(summarizer=TranscriptSummarizer(summary_config=summary_config))
    return service.summarize(url, locale)


def main(argv=None) -> int:
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube Video Summarizer")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--locale", default=DEFAULT_LOCALE.value,
                        choices=[locale.value for locale in Locale],
                        help="Language of the summary")
    parser.add_argument("--model", default=config.DEFAULT_SUMMARY_MODEL,
                        help="Language model for summarization")

    args = parser.parse_args(argv)

    config.initialize()

    try:
        summary = summarize_youtube_video(args.url, args.locale, args.model)
    except SummaryServiceError as e:
        print(e.message, file=sys.stderr)
        return 1

    print("\n" + "=" * 80)
    print(summary)
    print("=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
