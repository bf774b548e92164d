"""API router assembly and the exception handlers mapping failures to responses."""

import logging
from typing import Any, Dict, Sequence

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.departments import dept_router
from src.api.employees import emp_router
from src.api.validation_probe import validation_probe_router
from src.data.repository import store_failure
from src.utils.errors import (
    APIError,
    InternalFailureError,
    MalformedRequestError,
    NotFoundError,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Router Setup
# =============================================================================

api_router = APIRouter()
api_router.include_router(dept_router)
api_router.include_router(emp_router)
api_router.include_router(validation_probe_router)


# =============================================================================
# Exception Handlers (to be registered with FastAPI app)
# =============================================================================

def error_response(exc: APIError) -> JSONResponse:
    """Render an API error as its status code and ``{"message": ...}`` body."""
    response = exc.to_response()
    if response.status_code >= 500:
        logger.error("%s: %s", response.kind.value, response.message)
    return JSONResponse(
        status_code=response.status_code,
        content=response.to_dict(),
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle API errors and return structured responses."""
    return error_response(exc)


def describe_request_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """Summarize request parsing errors as ``location: message`` pairs."""
    parts = []
    for error in errors:
        loc = ".".join(str(x) for x in error.get("loc", ()))
        msg = error.get("msg", "invalid")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Convert malformed path, query or body input into MalformedRequest."""
    return error_response(MalformedRequestError(describe_request_errors(exc.errors())))


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Convert routing errors raised by the framework."""
    if exc.status_code == 404:
        return error_response(NotFoundError())
    if exc.status_code < 500:
        return error_response(MalformedRequestError(exc.detail))
    return error_response(InternalFailureError(exc.detail))


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle storage errors that escape the repositories."""
    return error_response(store_failure(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Unexpected error occurred")
    return error_response(InternalFailureError(str(exc) or type(exc).__name__))
