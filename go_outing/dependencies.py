from typing import Optional

from fastapi import Depends
from openai import AsyncOpenAI

from go_outing.ai.openai_client import get_client
from go_outing.core.config import settings
from go_outing.domain.services.suggestion_service import SuggestionService


def get_completion_client() -> Optional[AsyncOpenAI]:
    return get_client()


def get_suggestion_service(
    client: Optional[AsyncOpenAI] = Depends(get_completion_client),
) -> SuggestionService:
    return SuggestionService(client=client)


__all__ = [
    "get_completion_client",
    "get_suggestion_service",
    "settings",
]
