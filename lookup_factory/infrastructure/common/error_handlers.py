"""Application-wide exception handlers rendering the error envelope."""

from http import HTTPStatus

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lookup_factory.exceptions import FactoryError
from lookup_factory.infrastructure.common.responses import send_bad_request, send_error
from lookup_factory.status_codes import StatusCode

logger = structlog.get_logger(__name__)


def _status_name(code: int) -> str:
    known = StatusCode.from_code(code)
    if known is not None:
        return known.name
    try:
        return HTTPStatus(code).name
    except ValueError:
        return str(code)


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework HTTP errors (unknown route, method not allowed) in the envelope."""
    status = StatusCode.from_code(exc.status_code)
    if status is not None:
        response = send_error(str(exc.detail), status)
    else:
        response = JSONResponse(
            content={"message": str(exc.detail), "statusCode": _status_name(exc.status_code)},
            status_code=exc.status_code,
        )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable request bodies as 400 instead of 422."""
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        return send_bad_request("Request body must be valid JSON.")
    message = "; ".join(str(error.get("msg", "Invalid request")) for error in errors)
    return send_bad_request(message or "Invalid request.")


async def factory_error_handler(_: Request, exc: FactoryError) -> JSONResponse:
    """Fallback for factory errors raised outside the lookup controllers."""
    if exc.status_code >= StatusCode.INTERNAL_SERVER_ERROR:
        logger.error("unhandled_factory_error", error=exc.message, exc_info=exc)
    return send_error(exc.message, exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-rendering exception handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(FactoryError, factory_error_handler)
