import logging
from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from go_outing.api.routers import meta, suggestions
from go_outing.core.config import settings
from go_outing.core.errors import APIError, ValidationError, error_content
from go_outing.core.logging import setup_logging
from go_outing.core.middleware import BodySizeLimitMiddleware

setup_logging()
logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("location", "date", "budget", "mode", "type")
MISSING_FIELD_ERRORS = {"missing", "string_too_short"}

app = FastAPI(title=settings.project_name)

app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(suggestions.router, prefix=settings.api_prefix)
app.include_router(meta.router)


def to_validation_error(errors: Sequence[Dict[str, Any]]) -> ValidationError:
    first_error = errors[0] if errors else {}
    loc = first_error.get("loc", [])
    # Strip initial "body" so the path names the request field
    parts = [str(item) for item in loc if item != "body"]
    path = ".".join(parts)
    if first_error.get("type") == "json_invalid":
        message = "Request body is not valid JSON"
    elif any(err.get("type") in MISSING_FIELD_ERRORS for err in errors):
        message = f"Missing required fields: {', '.join(REQUIRED_FIELDS)}"
    else:
        # Union members append their type to loc (budget.int); report the field only
        message = f"Invalid value for field: {parts[0] if parts else 'body'}"
    details = f"{path}: {first_error.get('msg')}" if path else first_error.get("msg")
    return ValidationError(message, details)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc, APIError):
        if exc.status_code >= 500:
            logger.error("%s on %s: %s", exc.code, request.url.path, exc.detail)
        return JSONResponse(status_code=exc.status_code, content=error_content(str(exc.detail), exc.details))
    return JSONResponse(status_code=exc.status_code, content=error_content(str(exc.detail)))


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    return await http_exception_handler(request, to_validation_error(exc.errors()))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled server error: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content("Server error", str(exc) or type(exc).__name__),
    )
