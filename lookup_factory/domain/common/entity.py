"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time.
Two persisted entities are equal if they have the same identity, regardless
of their attributes.

Example:
    @dataclass(eq=False)
    class Category(Entity[EntryId]):
        id: EntryId
        value: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed entity identifiers.

    Wraps a non-negative integer. Zero is the placeholder for an entity
    that has not been persisted yet; the store assigns the real value.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_assigned(self) -> bool:
        """Whether the store has assigned this identifier."""
        return self.value != 0

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. Usually these are set by the database"""
        return cls(0)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType and should be
    declared with ``@dataclass(eq=False)`` so identity comparison is kept.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if not self.id.is_assigned or not other.id.is_assigned:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if not self.id.is_assigned:
            return id(self)
        return hash((self.__class__, self.id))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
