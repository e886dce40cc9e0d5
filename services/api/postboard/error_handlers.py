"""Global exception handlers.

Every failure leaves the service in the same envelope shape the handlers
use, so clients need a single decoder:
- RequestValidationError -> 422 envelope listing the offending fields
- HTTPException (unknown route, wrong method) -> envelope with its status
- Exception (catch-all) -> 500 envelope, details only in debug mode
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from postboard.services.envelope import create_error_response

logger = logging.getLogger("uvicorn.error")


def _envelope_response(message: str, status_code: int) -> JSONResponse:
    envelope = create_error_response(message, status_code=status_code)
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", by_alias=True),
    )


def format_validation_errors(errors: list[dict]) -> str:
    """Flatten pydantic error dicts into `loc: msg; loc: msg`."""
    parts = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{loc}: {error.get('msg', 'invalid value')}")
    return "Validation failed: " + "; ".join(parts)


def register_error_handlers(app: FastAPI, *, debug: bool = False) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = format_validation_errors(list(exc.errors()))
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return _envelope_response(message, 422)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _envelope_response(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        message = str(exc) if debug else "Internal server error"
        return _envelope_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR)
