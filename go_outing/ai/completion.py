from __future__ import annotations

import logging
from typing import Optional

import openai
from openai import AsyncOpenAI

from go_outing.ai.prompts import PromptPair
from go_outing.core.config import settings
from go_outing.core.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


async def request_completion(client: Optional[AsyncOpenAI], prompt: PromptPair) -> str:
    """
    Send the prompt pair to the chat completion endpoint and return the reply text.

    Raises ConfigurationError when no client is configured (missing credential) and
    UpstreamError for any failure of the remote call itself: non-success status,
    timeout, connection failure, or an envelope without reply content.
    """
    if client is None:
        raise ConfigurationError()

    try:
        response = await client.chat.completions.create(
            model=settings.openai_model,
            messages=prompt.to_messages(),  # type: ignore[arg-type]
            temperature=settings.openai_temperature,
            max_tokens=settings.openai_max_tokens,
        )
    except openai.APIStatusError as exc:
        body = exc.response.text
        logger.error("OpenAI error: %s %s", exc.status_code, body)
        raise UpstreamError("OpenAI API error", details=body, upstream_status=exc.status_code) from exc
    except openai.APITimeoutError as exc:
        logger.error("OpenAI request timed out after %ss", settings.openai_timeout_seconds)
        raise UpstreamError("OpenAI API timeout", details=str(exc)) from exc
    except openai.APIConnectionError as exc:
        logger.error("OpenAI connection failed: %s", exc)
        raise UpstreamError("OpenAI API unreachable", details=str(exc)) from exc
    except openai.APIError as exc:
        logger.error("OpenAI returned an unusable response: %s", exc)
        raise UpstreamError("Malformed OpenAI response", details=str(exc)) from exc

    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, KeyError, TypeError) as exc:
        logger.error("OpenAI response has no choices: %r", response)
        raise UpstreamError("Malformed OpenAI response", details=str(response)[:1000]) from exc

    if not isinstance(content, str) or not content.strip():
        logger.error("OpenAI response carried empty content")
        raise UpstreamError("Malformed OpenAI response", details="empty completion content")
    return content
