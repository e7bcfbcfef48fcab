import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Missing or invalid 'mode' or 'messages' in request body"
GENERIC_ERROR_MESSAGE = "Unexpected server error"


class ConfigurationError(HTTPException):
    """Server is missing required configuration (e.g. the provider API key)."""

    def __init__(self, detail: str):
        super().__init__(status_code=500, detail=detail)


class UpstreamError(HTTPException):
    """The text-generation provider failed or returned something unusable."""

    def __init__(self, detail: str = ""):
        super().__init__(status_code=500, detail=detail or GENERIC_ERROR_MESSAGE)


class ClientError(HTTPException):
    def __init__(self, detail: str = INVALID_BODY_MESSAGE):
        super().__init__(status_code=400, detail=detail)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.info("Rejected request to %s: %s", request.url.path, errors)

    if request.url.path.startswith("/api/mentor"):
        message = INVALID_BODY_MESSAGE
    elif errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request: {field}: {first.get('msg')}" if field else f"Invalid request: {first.get('msg')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
