"""Repository implementations for lookup entries."""

from .in_memory_lookup_repository import InMemoryLookupRepository
from .lookup_repository import LookupRepository

__all__ = ["InMemoryLookupRepository", "LookupRepository"]
