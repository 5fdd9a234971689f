"""
Error taxonomy for the interview backend and the FastAPI handlers that turn
every failure into the uniform ``{success: false, error, details?}`` shape.
"""
import logging
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base exception for all application errors."""

    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class ValidationError(AppError):
    """A generation request is missing fields or carries an invalid enum value."""

    status_code = 400


class ParseError(AppError):
    """The model reply could not be turned into a question list."""

    MALFORMED = "malformed"
    NOT_AN_ARRAY = "not_an_array"
    NO_VALID_QUESTIONS = "no_valid_questions"

    def __init__(self, kind: str, message: str, details: Optional[str] = None):
        self.kind = kind
        super().__init__(message, details)


class GenerationError(AppError):
    """The text-generation call itself failed."""


class PersistenceError(AppError):
    """A write to the document store failed."""


def error_body(message: str, details: Optional[str] = None) -> dict:
    body = {"success": False, "error": message}
    if details is not None:
        body["details"] = details
    return body


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message} ({exc.details})")
    else:
        logger.warning(f"{type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.details))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Request validation failed: {exc.errors()}")
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(status_code=400, content=error_body("Invalid request body", details))


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content=error_body(str(exc) or "Unknown error occurred"))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(f"HTTP exception: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)))
