"""
Locale-specific prompts and user-facing messages.
"""

from enum import Enum
from typing import Any, Optional


class Locale(str, Enum):
    """Languages the summary endpoint can answer in."""
    KO = "ko"
    EN = "en"

    @classmethod
    def parse(cls, tag: Any) -> Optional["Locale"]:
        """Return the matching locale, or None for an unknown tag."""
        try:
            return cls(tag)
        except ValueError:
            return None


# Shared with the front end's message bundle loader
DEFAULT_LOCALE = Locale.KO


SYSTEM_PROMPTS = {
    Locale.KO: (
        "당신은 유쾌하고 친절한 유튜브 영상 설명 어시스턴트입니다. "
        "전문적인 내용을 쉽게 풀어서 설명하며, 시청자가 이해하기 쉽도록 명확한 구조와 예시를 제공합니다. "
        "중요한 내용은 소제목(예: ## 이처럼 작성하세요)으로 구분하고, "
        "리스트나 번호 매기기를 통해 정보를 정리해 주세요."
    ),
    Locale.EN: (
        "You are a helpful, friendly, and conversational YouTube video summarizer. "
        "You respond in a warm, engaging tone using clear explanations, subheadings, "
        "bullet points, and numbered lists. Structure your responses with helpful "
        "formatting like Markdown-style **bold**, _italics_, and numbered or bulleted "
        "lists. Always try to make complex ideas simple."
    ),
}

USER_PROMPTS = {
    Locale.KO: "다음 자막을 이용해 유튜브 동영상을 요약해주세요:\n\n",
    Locale.EN: "Please summarize this youtube video using the transcript:\n\n",
}

GENERIC_SYSTEM_PROMPT = "You are a helpful video summarizer."
GENERIC_USER_PROMPT = "Please summarize this content: "

NO_TRANSCRIPT_MESSAGES = {
    Locale.KO: "이 동영상에 사용 가능한 자막이 없습니다. 자막이 활성화된 다른 동영상을 시도해보세요.",
    Locale.EN: (
        "No transcript is available for this video. "
        "Please try a different video that has captions enabled."
    ),
}


def get_system_prompt(locale: Optional[Locale]) -> str:
    if locale is None:
        return GENERIC_SYSTEM_PROMPT
    return SYSTEM_PROMPTS[locale]


def get_user_prompt(locale: Optional[Locale]) -> str:
    if locale is None:
        return GENERIC_USER_PROMPT
    return USER_PROMPTS[locale]


def get_no_transcript_message(locale: Optional[Locale]) -> str:
    """Unknown locales get the default locale's message."""
    return NO_TRANSCRIPT_MESSAGES[locale or DEFAULT_LOCALE]
