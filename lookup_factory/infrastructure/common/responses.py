"""
Helpers for sending standardized JSON responses.

Every response sets the numeric status that matches its symbolic outcome.
Failure bodies always use the ``{"message", "statusCode"}`` envelope.
"""

from collections.abc import Sequence
from typing import Any

from fastapi.responses import JSONResponse

from lookup_factory.domain.lookup.entities import LookupEntry
from lookup_factory.infrastructure.common.schemas.envelope import (
    ErrorEnvelope,
    LookupEntryResponse,
)
from lookup_factory.status_codes import StatusCode

Payload = LookupEntry | Sequence[LookupEntry] | ErrorEnvelope


def serialize(payload: Payload) -> Any:  # noqa: ANN401
    """Convert an entry, a sequence of entries or an envelope to JSON-ready data."""
    if isinstance(payload, ErrorEnvelope):
        return payload.model_dump(by_alias=True)
    if isinstance(payload, LookupEntry):
        return LookupEntryResponse(**payload.to_dict()).model_dump()
    return [LookupEntryResponse(**entry.to_dict()).model_dump() for entry in payload]


def send(payload: Payload, status_code: StatusCode) -> JSONResponse:
    """Send a payload with the given status code."""
    return JSONResponse(content=serialize(payload), status_code=status_code.code)


def send_ok(payload: Payload) -> JSONResponse:
    """Send a 200 OK response."""
    return send(payload, StatusCode.OK)


def send_created(entry: LookupEntry) -> JSONResponse:
    """Send a 201 Created response with the created entry."""
    return send(entry, StatusCode.CREATED)


def send_error(message: str, status_code: StatusCode) -> JSONResponse:
    """Send a failure envelope with the given status code."""
    return send(ErrorEnvelope.build(message, status_code), status_code)


def send_bad_request(message: str) -> JSONResponse:
    """Send a 400 Bad Request envelope."""
    return send_error(message, StatusCode.BAD_REQUEST)


def send_internal_server_error(message: str) -> JSONResponse:
    """Send a 500 Internal Server Error envelope."""
    return send_error(message, StatusCode.INTERNAL_SERVER_ERROR)
