"""
HTTP status code vocabulary.

Only OK, CREATED, BAD_REQUEST and INTERNAL_SERVER_ERROR are emitted by the
lookup endpoints. The remaining members are reserved for the transport layer.
"""

from enum import IntEnum

from starlette import status


class StatusCode(IntEnum):
    """Symbolic outcomes mapped to numeric HTTP status codes."""

    OK = status.HTTP_200_OK
    CREATED = status.HTTP_201_CREATED
    NO_CONTENT = status.HTTP_204_NO_CONTENT
    BAD_REQUEST = status.HTTP_400_BAD_REQUEST
    UNAUTHORIZED = status.HTTP_401_UNAUTHORIZED
    FORBIDDEN = status.HTTP_403_FORBIDDEN
    NOT_FOUND = status.HTTP_404_NOT_FOUND
    METHOD_NOT_ALLOWED = status.HTTP_405_METHOD_NOT_ALLOWED
    INTERNAL_SERVER_ERROR = status.HTTP_500_INTERNAL_SERVER_ERROR

    @property
    def code(self) -> int:
        """Numeric HTTP status code."""
        return int(self)

    @classmethod
    def from_code(cls, code: int) -> "StatusCode | None":
        """Look up the symbolic status for a numeric code, if it is in the vocabulary."""
        try:
            return cls(code)
        except ValueError:
            return None
