import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError as PostgRESTAPIError
from pydantic import BaseModel

logger = logging.getLogger("noteful.exceptions")

UNIQUE_VIOLATION = "23505"


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class ErrorDetail(BaseModel):
    code: str
    message: str


class NotefulErrorResponse(BaseModel):
    success: bool = False
    error: ErrorDetail


# ---------------------------------------------------------------------------
# Base exception hierarchy
# ---------------------------------------------------------------------------
class NotefulException(Exception):
    """Base for every error the API raises on purpose."""

    def __init__(self, code: str, message: str, status_code: int = 400):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(NotefulException):
    def __init__(self, resource: str):
        super().__init__(
            code="not_found",
            message=f"{resource} not found",
            status_code=status.HTTP_404_NOT_FOUND,
        )


class ConflictError(NotefulException):
    def __init__(self, message: str = "Resource already exists"):
        super().__init__(
            code="conflict",
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class ValidationError(NotefulException):
    def __init__(self, message: str = "Invalid request data"):
        super().__init__(
            code="validation_error",
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=NotefulErrorResponse(
            error=ErrorDetail(code=code, message=message)
        ).model_dump(),
    )


# ---------------------------------------------------------------------------
# NotefulException handler
# ---------------------------------------------------------------------------
async def noteful_exception_handler(request: Request, exc: NotefulException):
    return _error_response(exc.status_code, exc.code, exc.message)


# ---------------------------------------------------------------------------
# Request body / query validation (pydantic) -> 400
# ---------------------------------------------------------------------------
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request data"
    return _error_response(status.HTTP_400_BAD_REQUEST, "validation_error", message)


# ---------------------------------------------------------------------------
# PostgREST error mapping
# ---------------------------------------------------------------------------
POSTGREST_CODE_TO_STATUS: dict[str, tuple[int, str]] = {
    UNIQUE_VIOLATION: (400, "conflict"),
}


async def postgrest_error_handler(request: Request, exc: PostgRESTAPIError):
    pg_code = getattr(exc, "code", None) or ""
    error_message = getattr(exc, "message", None) or str(exc)

    mapped = POSTGREST_CODE_TO_STATUS.get(pg_code)
    if mapped:
        http_status, noteful_code = mapped
        logger.warning("PostgRESTAPIError: %s (code=%s, status=%s)", error_message, pg_code, http_status)
        return _error_response(http_status, noteful_code, "Resource already exists")

    logger.error("PostgRESTAPIError: %s (code=%s)", error_message, pg_code)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "db_error", "Internal server error"
    )


# ---------------------------------------------------------------------------
# Generic fallback handler
# ---------------------------------------------------------------------------
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    return _error_response(500, "internal_error", "Internal server error")
