"""Custom exception hierarchy for the lookup factory."""

from lookup_factory.status_codes import StatusCode


class FactoryError(Exception):
    """Base exception for all lookup factory errors."""

    def __init__(
        self, message: str, status_code: StatusCode = StatusCode.INTERNAL_SERVER_ERROR
    ) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(FactoryError):
    """Request or entry value failed validation."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=StatusCode.BAD_REQUEST)


class EmptyValueError(ValidationError):
    """Entry value is empty once whitespace is trimmed."""

    def __init__(self, field: str = "value", *, message: str | None = None) -> None:
        """Initialize with the offending field name or a custom message."""
        self.field = field
        super().__init__(message or f"{field} cannot be empty.")


class MissingFieldError(ValidationError):
    """Required request field is absent from the body."""

    def __init__(self, field: str) -> None:
        """Initialize with the name of the missing field."""
        self.field = field
        super().__init__(f"Missing required field: {field}")


class ConflictError(FactoryError):
    """Operation conflicts with data that already exists."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=StatusCode.BAD_REQUEST)


class DuplicateValueError(ConflictError):
    """An entry with the same value already exists for this kind."""

    def __init__(self, kind: str, value: str | None = None) -> None:
        """Initialize with the entity kind name and the duplicate value."""
        self.kind = kind
        self.value = value
        super().__init__(f"{kind} already exists!")


class ConstructionError(FactoryError):
    """Entity kind could not be built from a single string value."""

    def __init__(self, kind: str, reason: str | None = None) -> None:
        """Initialize with the entity kind name and optional reason."""
        self.kind = kind
        self.reason = reason
        message = f"Could not instantiate class: {kind}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PersistenceError(FactoryError):
    """Storage layer failed to read or write entries."""
