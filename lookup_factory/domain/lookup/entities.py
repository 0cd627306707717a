"""Lookup entry entity and the concrete lookup kinds."""

from dataclasses import dataclass
from typing import Self

from lookup_factory.domain.common.entity import Entity, EntityId
from lookup_factory.exceptions import EmptyValueError


@dataclass(frozen=True)
class EntryId(EntityId):
    """Strongly-typed lookup entry identifier."""


@dataclass(eq=False)
class LookupEntry(Entity[EntryId]):
    """
    Lookup-table record: an integer identity plus a unique string value.

    The value is the business key. It is unique across all entries of the
    same kind and never changes once the entry has been persisted. Concrete
    kinds subclass this without adding fields, so a single service
    implementation can serve all of them.
    """

    # Identity
    id: EntryId

    # Content
    value: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not isinstance(self.value, str) or not self.value.strip():
            raise EmptyValueError()

    @classmethod
    def kind_name(cls) -> str:
        """Name of the lookup kind, used in user-facing messages."""
        return cls.__name__

    def to_dict(self) -> dict[str, int | str]:
        """Serialize to the ``{id, value}`` wire shape."""
        return {"id": self.id.value, "value": self.value}

    # Factory methods
    @classmethod
    def create(cls, value: str) -> Self:
        """Factory for creating a new, not yet persisted entry."""
        return cls(id=EntryId.generate(), value=value.strip())

    @classmethod
    def create_with_id(cls, id: EntryId, value: str) -> Self:
        """Factory for reconstituting an entry from persistence."""
        return cls(id=id, value=value)


@dataclass(eq=False)
class Category(LookupEntry):
    """Category lookup entry."""


@dataclass(eq=False)
class Role(LookupEntry):
    """Role lookup entry."""


@dataclass(eq=False)
class Tag(LookupEntry):
    """Tag lookup entry."""
