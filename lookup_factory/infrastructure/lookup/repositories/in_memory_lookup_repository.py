"""In-memory repository for lookup entries."""

import copy
import itertools
from typing import Generic, TypeVar

from lookup_factory.domain.lookup.entities import EntryId, LookupEntry
from lookup_factory.exceptions import DuplicateValueError

T = TypeVar("T", bound=LookupEntry)


class InMemoryLookupRepository(Generic[T]):
    """
    In-memory lookup repository for tests and throwaway wiring.

    Implementation notes:
    - Entries are keyed by value, which also enforces uniqueness
    - IDs are assigned sequentially from 1 and never reused
    - Returns deep copies so callers cannot mutate stored state
    - NOT thread-safe
    """

    def __init__(self, *, enforce_unique: bool = True) -> None:
        self._entries: dict[str, list[T]] = {}
        self._ids = itertools.count(1)
        self.enforce_unique = enforce_unique

    def find_by_value(self, value: str) -> T | None:
        entries = self._entries.get(value)
        if not entries:
            return None
        return copy.deepcopy(entries[0])

    def save(self, entry: T) -> T:
        if self.enforce_unique and entry.value in self._entries:
            raise DuplicateValueError(entry.kind_name(), entry.value)

        stored = copy.deepcopy(entry)
        stored.id = EntryId(next(self._ids))
        self._entries.setdefault(stored.value, []).append(stored)
        return copy.deepcopy(stored)

    def find_all(self) -> list[T]:
        entries = [entry for bucket in self._entries.values() for entry in bucket]
        entries.sort(key=lambda entry: entry.id.value)
        return [copy.deepcopy(entry) for entry in entries]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._entries.values())
