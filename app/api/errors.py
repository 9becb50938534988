"""
API error handling and exception mapping.

Converts domain errors into the ``{"error": ...}`` bodies returned by the
API.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from app.api.schemas import ErrorResponse
from app.domain.exceptions import DomainError
from app.infra.config.logging_config import get_logger

logger = get_logger("api.errors")

STATUS_CODE_MAPPING = {
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "GENERATION_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors to 400/500 responses."""
    status_code = STATUS_CODE_MAPPING.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    if status_code < 500:
        logger.warning("domain.error", code=exc.code, error=exc.message)
    else:
        logger.error("domain.error", code=exc.code, error=exc.message)
    return _error(status_code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are client errors."""
    formatted_errors = [
        f"{' -> '.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    logger.warning("request.invalid", errors=formatted_errors)
    return _error(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request body: " + "; ".join(formatted_errors),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    logger.warning("http.error", status_code=exc.status_code, detail=str(exc.detail))
    return _error(exc.status_code, str(exc.detail))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unexpected.error", error_type=type(exc).__name__, error=str(exc))
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred."
    )


def setup_error_handlers(app) -> None:
    """
    Setup error handlers for the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
