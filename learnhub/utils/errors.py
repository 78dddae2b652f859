import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class LearnHubError(Exception):
    """Base class for client-facing failures."""

    status_code = 400


class InvalidVideoUrlError(LearnHubError):
    def __init__(self, url: str):
        super().__init__("Invalid YouTube URL")
        self.url = url


class MissingContentSourceError(LearnHubError):
    pass


class UploadTooLargeError(LearnHubError):
    def __init__(self, limit: int):
        super().__init__(f"File too large. Max size is {limit} bytes")
        self.limit = limit


def register_exception_handlers(app: FastAPI):
    """Every error response is shaped as {"error": "<message>"}."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request data"})

    @app.exception_handler(LearnHubError)
    async def learnhub_error(request: Request, exc: LearnHubError):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
