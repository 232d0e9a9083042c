"""
Application error hierarchy.

Every failure that should reach the client as a structured response is an
AppError subclass. Route handlers only raise these; the handlers registered
in register_error_handlers turn them into

    {"error": {"message": ..., "status": ...}}

so no endpoint ever builds an error body itself.
"""

import logging
from typing import Any, List, Union

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

Message = Union[str, List[str]]


class AppError(Exception):
    """Base class for errors carrying an HTTP status."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: Message = None):
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class BadRequestError(AppError):
    status_code = 400
    default_message = "Bad Request"


class InvalidInputError(BadRequestError):
    """Raised when an operation receives nothing it can act on."""
    default_message = "No data"


class UnauthorizedError(AppError):
    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not Found"


def error_response(message: Any, status_code: int) -> JSONResponse:
    """The single place an error body is shaped."""
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


def format_validation_errors(errors) -> List[str]:
    """
    Flatten pydantic error dicts into readable messages, keeping their order.

    ("body", "salary") / "Input should be greater than or equal to 0"
    becomes "salary: Input should be greater than or equal to 0".
    """
    messages = []
    for err in errors:
        loc = list(err.get("loc", ()))
        # FastAPI prefixes where the value came from
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        field = ".".join(str(part) for part in loc)
        messages.append(f"{field}: {err['msg']}" if field else err["msg"])
    return messages


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("AppError path=%s status=%s message=%r", request.url.path, exc.status_code, exc.message)
        else:
            logger.warning("AppError path=%s status=%s message=%r", request.url.path, exc.status_code, exc.message)
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        messages = format_validation_errors(exc.errors())
        logger.warning("ValidationError path=%s errors=%s", request.url.path, messages)
        return error_response(messages, 400)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning("HTTPException path=%s status=%s detail=%r", request.url.path, exc.status_code, exc.detail)
        return error_response(exc.detail, exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error at path=%s", request.url.path)
        return error_response(AppError.default_message, 500)
