from __future__ import annotations

import logging
from typing import Optional

from openai import AsyncOpenAI

from go_outing.core.config import settings

logger = logging.getLogger(__name__)

_client: Optional[AsyncOpenAI] = None

if settings.openai_api_key:
    # One attempt per request; failures are reported, never retried.
    _client = AsyncOpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.openai_timeout_seconds,
        max_retries=0,
    )
else:
    logger.error("OPENAI_API_KEY is not set; suggestion requests will fail until it is configured.")


def get_client() -> Optional[AsyncOpenAI]:
    """Returns AsyncOpenAI client if api key is configured."""
    return _client
