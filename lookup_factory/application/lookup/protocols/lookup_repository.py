"""Protocol for lookup entry repositories."""

from typing import Protocol, TypeVar

from lookup_factory.domain.lookup.entities import LookupEntry

T = TypeVar("T", bound=LookupEntry)


class LookupRepositoryProtocol(Protocol[T]):
    """
    Protocol defining persistence operations for one lookup kind.

    Contract:
    - find_by_value() returns None if no entry matches (no exception)
    - save() assigns the identifier on first persistence
    - Storage failures are raised as PersistenceError; a storage-level
      uniqueness violation is raised as DuplicateValueError
    """

    def find_by_value(self, value: str) -> T | None:
        """
        Find an entry by exact value.

        Args:
            value: The value to match, compared as-is

        Returns:
            Entry if found, None otherwise
        """
        ...

    def save(self, entry: T) -> T:
        """
        Persist a new entry.

        Args:
            entry: The entry to save

        Returns:
            Saved entry with the store-assigned ID
        """
        ...

    def find_all(self) -> list[T]:
        """
        Get all entries of this kind.

        Returns:
            List of entries, ordered by ID
        """
        ...
