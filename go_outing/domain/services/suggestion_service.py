from __future__ import annotations

import logging
from typing import Optional

from openai import AsyncOpenAI

from go_outing.ai.completion import request_completion
from go_outing.ai.prompts import build_prompt
from go_outing.api.models.schemas import OutingRequest, SuggestionsResponse
from go_outing.domain.normalizer import normalize_suggestions

logger = logging.getLogger(__name__)


class SuggestionService:
    def __init__(self, client: Optional[AsyncOpenAI]):
        self.client = client

    async def suggest(self, request: OutingRequest) -> SuggestionsResponse:
        prompt = build_prompt(request)
        logger.info(
            "Requesting suggestions: location=%r type=%r mode=%r budget=%s",
            request.location,
            request.type,
            request.mode,
            request.budget,
        )
        content = await request_completion(self.client, prompt)
        normalized = normalize_suggestions(content, request.budget, request.location)
        return SuggestionsResponse(suggestions=normalized["suggestions"])
