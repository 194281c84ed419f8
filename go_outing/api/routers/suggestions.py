import logging

from fastapi import APIRouter, Depends

from go_outing.api.models.schemas import OutingRequest, SuggestionsResponse
from go_outing.core.errors import APIError, InternalServerError
from go_outing.dependencies import get_suggestion_service
from go_outing.domain.services.suggestion_service import SuggestionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


@router.post("", response_model=SuggestionsResponse)
async def create_suggestions(
    body: OutingRequest, svc: SuggestionService = Depends(get_suggestion_service)
):
    try:
        return await svc.suggest(body)
    except APIError:
        raise
    except Exception as exc:
        logger.exception("Server error while building suggestions")
        raise InternalServerError(details=str(exc) or type(exc).__name__) from exc
