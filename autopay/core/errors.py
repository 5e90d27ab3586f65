"""
Centralized error types and safe error responses.

This module defines the application exceptions and the FastAPI exception
handlers shared by both HTTP services. Error details are only exposed
when debug mode is enabled.
"""
import logging
import traceback
from typing import Any

from fastapi import HTTPException
from fastapi.requests import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from autopay.core.config import settings

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standardized error response model."""
    error: str
    detail: str | None = None


class AutoPayError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize the error.

        Args:
            message: Error message
            details: Optional additional error details
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)


class PaymentProviderError(AutoPayError):
    """Exception raised when the payment provider call fails."""

    pass


class DuplicateIdentifierError(AutoPayError):
    """Exception raised when a payment identifier is already stored."""

    pass


def create_safe_error_message(error: Exception) -> str:
    """
    Create a safe error message that doesn't leak internal details.

    Args:
        error: The exception that occurred

    Returns:
        A safe error message for the caller
    """
    if settings.debug:
        return str(error)

    if isinstance(error, AutoPayError):
        return error.message

    safe_messages = {
        "ValueError": "Invalid input provided",
        "ValidationError": "Request validation failed",
        "NotFoundError": "Resource not found",
        "ConnectionError": "Service unavailable",
        "TimeoutError": "Request timed out",
        "HTTPException": "Request processing error",
    }

    return safe_messages.get(type(error).__name__, "An error occurred while processing your request")


def create_error_response(
    status_code: int, message: str, detail: str | None = None
) -> JSONResponse:
    """
    Create a standardized JSON error response.

    Args:
        status_code: HTTP status code
        message: Main error message
        detail: Optional additional detail

    Returns:
        JSONResponse with error information
    """
    error_response = ErrorResponse(
        error=message, detail=detail if settings.debug else None
    )

    logger.error(f"Error {status_code}: {message} - {detail}")

    return JSONResponse(
        status_code=status_code, content=error_response.model_dump()
    )


async def http_exception_handler(
    request: Request, exc: HTTPException
) -> JSONResponse:
    """
    Handle HTTPException globally.

    Args:
        request: The request that caused the exception
        exc: The HTTPException that was raised

    Returns:
        JSONResponse with error information
    """
    detail = str(exc.detail) if exc.detail else None
    return create_error_response(
        status_code=exc.status_code,
        message=create_safe_error_message(exc),
        detail=detail,
    )


async def general_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """
    Handle all other exceptions globally.

    Args:
        request: The request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with a generic error
    """
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)

    if settings.debug:
        detail = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    else:
        detail = None

    return create_error_response(
        status_code=500,
        message="Internal server error",
        detail=detail,
    )
