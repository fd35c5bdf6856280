"""
Application error types and the handlers that turn them into JSON responses.
"""
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


class AppError(Exception):
    """
    Base class for errors reported to the client as
    ``{"success": false, "message": ...}``.
    """

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(AppError):
    """Missing or malformed input."""

    def __init__(self, message: str):
        super().__init__(message, 400)


class ConflictError(AppError):
    """Email or phone already belongs to a registered user."""

    def __init__(self, message: str):
        super().__init__(message, 400)


class AuthenticationError(AppError):
    def __init__(self, message: str):
        super().__init__(message, 400)


class RoleMismatchError(AppError):
    def __init__(self, message: str = "User with this role is not found"):
        super().__init__(message, 404)


class UnsupportedMediaError(AppError):
    def __init__(self, message: str = "File Format Not Supported!"):
        super().__init__(message, 400)


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


async def app_error_handler(request: Request, exc: AppError):
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return error_response(exc.message, exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """
    Report malformed request bodies (wrong JSON types, unreadable form data)
    with the same shape and status as field validation failures.
    """
    errors = exc.errors()
    logger.error(f"Request validation error: {errors}")
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    return error_response(message, 400)


def register_exception_handlers(app):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
