"""Response envelope schemas shared by every lookup endpoint."""

from pydantic import BaseModel, ConfigDict, Field

from lookup_factory.status_codes import StatusCode


class LookupEntryResponse(BaseModel):
    """Schema for a serialized lookup entry."""

    id: int
    value: str

    model_config = ConfigDict(from_attributes=True)


class ErrorEnvelope(BaseModel):
    """Body of every failure response."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    status_code: str = Field(..., alias="statusCode")

    @classmethod
    def build(cls, message: str, status_code: StatusCode) -> "ErrorEnvelope":
        """Build an envelope whose statusCode is the symbolic name of the status."""
        return cls(message=message, status_code=status_code.name)
