"""Generic create-or-fetch service for lookup entries."""

from collections.abc import Callable
from typing import Generic, TypeVar

import structlog

from lookup_factory.application.lookup.protocols.lookup_repository import (
    LookupRepositoryProtocol,
)
from lookup_factory.domain.lookup.entities import LookupEntry
from lookup_factory.exceptions import (
    ConstructionError,
    DuplicateValueError,
    EmptyValueError,
    FactoryError,
    PersistenceError,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=LookupEntry)

EntryFactory = Callable[[str], T]


class LookupService(Generic[T]):
    """
    Create-or-fetch and listing logic shared by every lookup kind.

    The service is parameterized only by a repository and an entry factory
    (a ``str -> entry`` constructor, usually ``Kind.create``). Errors are
    never recovered from here; they propagate to the caller.

    The duplicate check and the insert are not atomic. Repositories backed
    by a unique constraint report the losing side of a race as
    DuplicateValueError.
    """

    def __init__(
        self,
        repository: LookupRepositoryProtocol[T],
        factory: EntryFactory[T],
        kind: str,
    ) -> None:
        self.repository = repository
        self.factory = factory
        self.kind = kind

    def create(self, raw_value: str) -> T:
        """
        Create a new entry for a value that does not exist yet.

        Args:
            raw_value: Requested value, surrounding whitespace is ignored

        Returns:
            The persisted entry, carrying its store-assigned ID

        Raises:
            EmptyValueError: If the trimmed value is empty
            DuplicateValueError: If an entry with this value already exists
            ConstructionError: If the factory cannot build an entry from a string
            PersistenceError: If the repository fails
        """
        value = raw_value.strip()
        if not value:
            raise EmptyValueError()

        if self.repository.find_by_value(value) is not None:
            logger.info("duplicate_lookup_value", kind=self.kind, value=value)
            raise DuplicateValueError(self.kind, value)

        entry = self._construct(value)
        self.repository.save(entry)

        created = self.repository.find_by_value(value)
        if created is None:
            raise PersistenceError(f"{self.kind} '{value}' was saved but could not be read back")

        logger.info("created_lookup_entry", kind=self.kind, entry_id=created.id.value)
        return created

    def get_by_value(self, value: str) -> T | None:
        """Exact-match lookup, no trimming. Returns None when nothing matches."""
        return self.repository.find_by_value(value)

    def get_all(self) -> list[T]:
        """Get every entry of this kind."""
        return self.repository.find_all()

    def _construct(self, value: str) -> T:
        try:
            entry = self.factory(value)
        except FactoryError:
            raise
        except Exception as e:
            raise ConstructionError(self.kind, str(e)) from e

        if not isinstance(entry, LookupEntry):
            raise ConstructionError(
                self.kind, f"factory returned {type(entry).__name__}, not a lookup entry"
            )
        return entry
