"""Mapper for lookup ORM ↔ Domain conversion."""

from typing import Generic, TypeVar

from lookup_factory.domain.lookup.entities import EntryId, LookupEntry
from lookup_factory.infrastructure.lookup.models import LookupTableMixin

T = TypeVar("T", bound=LookupEntry)
M = TypeVar("M", bound=LookupTableMixin)


class LookupMapper(Generic[T, M]):
    """Mapper between one lookup kind and its table."""

    def __init__(self, entry_type: type[T], orm_type: type[M]) -> None:
        self.entry_type = entry_type
        self.orm_type = orm_type

    def to_domain(self, orm_model: M) -> T:
        """Convert ORM model to domain entity."""
        return self.entry_type.create_with_id(id=EntryId(orm_model.id), value=orm_model.value)

    def to_orm(self, domain_entity: T) -> M:
        """Convert a new domain entity to an ORM model."""
        return self.orm_type(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            value=domain_entity.value,
        )
