"""
Geologist LLM Tool
Anthropic API 기반 지질학자 답변 도구
"""

import logging
from typing import Optional

import anthropic

from ..config import get_anthropic_api_key, get_model_settings
from .base import LookupResult

logger = logging.getLogger(__name__)


def _create_prompt(question: str, context: str) -> str:
    return f"""## Reference Material
{context or "(no reference material available)"}

## Question
{question}

Answer as a geological expert in at most five sentences. Use the reference
material where it is relevant and do not invent sources."""


def ask_geologist(question: str, context: str = "", api_key: Optional[str] = None) -> LookupResult:
    """
    LLM에게 질문하고 답변 텍스트 반환

    Returns:
        LookupResult with the answer text; failure when no API key is
        configured or the API call fails.
    """
    api_key = api_key or get_anthropic_api_key()
    if not api_key:
        return LookupResult.failure("Anthropic API key not configured")

    settings = get_model_settings()
    api_params = {
        "model": settings.get("name", "claude-sonnet-4-20250514"),
        "max_tokens": int(settings.get("max_tokens", 1024)),
        "messages": [{"role": "user", "content": _create_prompt(question, context)}],
    }
    if settings.get("system_prompt"):
        api_params["system"] = settings["system_prompt"]

    try:
        client = anthropic.Anthropic(api_key=api_key)
        response = client.messages.create(**api_params)
        response_text = response.content[0].text.strip()
    except (anthropic.APIError, IndexError, AttributeError) as e:
        logger.warning("Anthropic answer failed: %s", e)
        return LookupResult.failure(str(e))

    if not response_text:
        return LookupResult.failure("empty model response")
    return LookupResult.success(response_text)
