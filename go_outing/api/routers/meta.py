import time

from fastapi import APIRouter

from go_outing.api.models.schemas import PingResponse

router = APIRouter(tags=["meta"])


@router.get("/ping", response_model=PingResponse)
@router.get("/health", response_model=PingResponse)
async def ping():
    return PingResponse(ok=True, now=int(time.time() * 1000))
