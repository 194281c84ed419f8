from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class APIError(HTTPException):
    def __init__(self, status_code: int, code: str, message: str, details: Optional[str] = None):
        super().__init__(status_code=status_code, detail=message)
        self.code = code
        self.details = details


class ValidationError(APIError):
    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", message, details)


class PayloadTooLargeError(APIError):
    def __init__(self, limit: int):
        super().__init__(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, "PAYLOAD_TOO_LARGE", f"Request body exceeds {limit} bytes")


class ConfigurationError(APIError):
    def __init__(self, message: str = "Server missing OPENAI_API_KEY"):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, "CONFIGURATION_ERROR", message)


class UpstreamError(APIError):
    """The completion API failed or answered with something unusable."""

    def __init__(self, message: str, details: Optional[str] = None, upstream_status: Optional[int] = None):
        super().__init__(status.HTTP_502_BAD_GATEWAY, "UPSTREAM_ERROR", message, details)
        self.upstream_status = upstream_status


class InternalServerError(APIError):
    def __init__(self, details: Optional[str] = None, message: str = "Server error"):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", message, details)


def error_content(message: str, details: Optional[str] = None) -> Dict[str, Any]:
    content: Dict[str, Any] = {"error": message}
    if details is not None:
        content["details"] = details
    return content
