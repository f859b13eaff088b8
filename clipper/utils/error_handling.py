"""
Centralized error handling for the application.
"""

import traceback
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from clipper.utils.logger import logging


class ClipperError(Exception):
    """Base error carrying the HTTP status and the message shown to clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ClipperError):
    """A required request field is missing or malformed."""

    status_code = 400


class ConfigurationError(ClipperError):
    """The AI provider credential is not configured."""


class VideoNotFoundError(ClipperError):
    """The download utility could not resolve the video."""


class ClipCreationError(ClipperError):
    """The clip pipeline did not produce an output file."""


class ExternalProcessError(ClipperError):
    """A delegated executable failed, timed out or could not be started."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Map the error taxonomy onto flat ``{"error": message}`` responses."""

    @app.exception_handler(ClipperError)
    async def clipper_error_handler(request: Request, exc: ClipperError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logging.debug(f"Rejected request body on {request.url.path}: {exc.errors()}")
        return error_response(400, "Invalid request body")

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        logging.error(f"Unhandled error on {request.url.path}: {str(exc)}")
        logging.error("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
        return error_response(500, str(exc))
