from __future__ import annotations

import logging
from typing import Optional

from openai import AsyncOpenAI

from app.ai.openai_client import get_client
from app.ai.prompts import DEFAULT_DESCRIPTION, TRIP_SYSTEM_PROMPT, TRIP_USER_TEMPLATE
from app.ai.sanitizer import strip_reasoning
from app.core.config import settings
from app.core.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

PLAN_FAILED_MESSAGE = "Failed to plan trip"


def resolve_description(text_prompt: Optional[str]) -> str:
    if text_prompt and text_prompt.strip():
        return text_prompt.strip()
    return DEFAULT_DESCRIPTION


def build_messages(description: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": TRIP_SYSTEM_PROMPT},
        {"role": "user", "content": TRIP_USER_TEMPLATE.format(description=description)},
    ]


async def generate_trip_plan(text_prompt: Optional[str], client: Optional[AsyncOpenAI] = None) -> str:
    """
    Ask the completion router for three destinations matching the described vibe and
    return the plan with any reasoning preamble removed.
    """
    client = client or get_client()
    if client is None:
        logger.error("HF_TOKEN is not configured; cannot call the completion router.")
        raise ConfigurationError(PLAN_FAILED_MESSAGE)

    description = resolve_description(text_prompt)
    try:
        completion = await client.chat.completions.create(
            model=settings.completion_model,
            messages=build_messages(description),
            temperature=settings.completion_temperature,
            max_tokens=settings.completion_max_tokens,
        )
    except Exception as exc:
        logger.exception("Completion request failed: %s", exc)
        raise UpstreamError(PLAN_FAILED_MESSAGE) from exc

    raw = ""
    if completion.choices:
        content = completion.choices[0].message.content
        raw = str(content) if content is not None else ""
    return strip_reasoning(raw)
