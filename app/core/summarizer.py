"""
Module for summarizing video content using LLM models.
"""

from typing import Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from app.config import config
from app.core.prompts import Locale, get_system_prompt, get_user_prompt
from app.models.schemas import SummaryConfig
from app.utils.error_handling import EmptySummaryError, UpstreamServiceError
from app.utils.logger import logging


# Placeholders keep braces in video descriptions from being read as template fields
SUMMARY_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{system_prompt}"),
    ("human", "{instruction}{content}"),
])


class TranscriptSummarizer:
    """Class to handle summarization of video content."""

    def __init__(self, api_key: Optional[str] = None, summary_config: Optional[SummaryConfig] = None):
        """
        Initialize the summarizer with API key.

        Args:
            api_key: OpenAI API key (if None, uses the configured key)
            summary_config: Model settings for summarization
        """
        self.api_key = api_key or config.OPENAI_API_KEY
        self.config = summary_config or SummaryConfig()

    def _create_llm(self):
        return init_chat_model(
            model=self.config.model,
            model_provider="openai",
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            timeout=self.config.timeout,
            max_retries=self.config.max_retries,
            api_key=self.api_key,
        )

    def build_messages(self, content: str, locale: Optional[Locale]):
        """Build the system and user messages for ``content``."""
        return SUMMARY_PROMPT.format_messages(
            system_prompt=get_system_prompt(locale),
            instruction=get_user_prompt(locale),
            content=content,
        )

    def summarize(self, content: str, locale: Optional[Locale]) -> str:
        """
        Summarize the given content.

        Args:
            content: Text to summarize
            locale: Language of the summary; None uses the generic prompts

        Returns:
            Summarized text

        Raises:
            UpstreamServiceError: If the model call fails
            EmptySummaryError: If the model returns no text
        """
        messages = self.build_messages(content, locale)

        logging.info(f"Sending request to {self.config.model}...")
        try:
            llm = self._create_llm()
            response = llm.invoke(messages)
        except Exception as e:
            logging.error(f"OpenAI error: {str(e)}")
            raise UpstreamServiceError(f"OpenAI failed: {str(e)}") from e

        summary = getattr(response, "content", None)
        if not isinstance(summary, str) or not summary:
            logging.error("Invalid response from OpenAI")
            raise EmptySummaryError()

        logging.info(f"Summary generated, length: {len(summary)}")
        return summary
