from __future__ import annotations

from typing import Optional

from openai import AsyncOpenAI

from app.core.config import settings

_client: Optional[AsyncOpenAI] = None

if settings.hf_token:
    _client = AsyncOpenAI(base_url=settings.completion_base_url, api_key=settings.hf_token)


def get_client() -> Optional[AsyncOpenAI]:
    """Returns the OpenAI-compatible router client if an api key is configured."""
    return _client
