"""Request adapter between HTTP bodies and the lookup service."""

from typing import Any, Generic, TypeVar

import structlog
from fastapi.responses import JSONResponse

from lookup_factory.application.lookup.services.lookup_service import LookupService
from lookup_factory.domain.lookup.entities import LookupEntry
from lookup_factory.exceptions import (
    ConflictError,
    EmptyValueError,
    FactoryError,
    MissingFieldError,
    ValidationError,
)
from lookup_factory.infrastructure.common.responses import (
    send_bad_request,
    send_created,
    send_internal_server_error,
    send_ok,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=LookupEntry)


def _error_message(error: Exception) -> str:
    if isinstance(error, FactoryError):
        return error.message
    return str(error) or "Internal server error"


class LookupController(Generic[T]):
    """
    Maps create and list requests onto a lookup service.

    Stateless: every call parses, validates, delegates and translates the
    outcome into a response. ValidationError and ConflictError become
    400 Bad Request, every other failure becomes 500 Internal Server Error.
    """

    def __init__(self, service: LookupService[T], request_value_key: str) -> None:
        self.service = service
        self.request_value_key = request_value_key

    def create(self, body: Any) -> JSONResponse:  # noqa: ANN401
        """
        Handle a creation request.

        Args:
            body: Decoded JSON body, expected to be an object holding
                ``request_value_key``

        Returns:
            201 with the created entry, 400 or 500 with an error envelope
        """
        try:
            value = self.extract_value(body)
            created = self.service.create(value)
        except (ValidationError, ConflictError) as e:
            return send_bad_request(e.message)
        except Exception as e:
            logger.error(
                f"Failed to create {self.service.kind}: {e!s}",
                kind=self.service.kind,
                exc_info=True,
            )
            return send_internal_server_error(_error_message(e))
        return send_created(created)

    def list_all(self) -> JSONResponse:
        """Handle a listing request: 200 with every entry, or 500."""
        try:
            entries = self.service.get_all()
        except Exception as e:
            logger.error(
                f"Failed to list {self.service.kind}: {e!s}",
                kind=self.service.kind,
                exc_info=True,
            )
            return send_internal_server_error(_error_message(e))
        return send_ok(entries)

    def extract_value(self, body: Any) -> str:  # noqa: ANN401
        """
        Pull the trimmed value out of a request body.

        Raises:
            MissingFieldError: If the body is not an object or lacks the key
            ValidationError: If the value is not a string
            EmptyValueError: If the trimmed value is empty
        """
        key = self.request_value_key
        if not isinstance(body, dict) or key not in body:
            raise MissingFieldError(key)

        raw = body[key]
        if not isinstance(raw, str):
            raise ValidationError(f"{key} must be a string.")

        value = raw.strip()
        if not value:
            raise EmptyValueError(key)
        return value
