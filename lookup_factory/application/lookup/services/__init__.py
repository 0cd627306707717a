from .lookup_service import EntryFactory, LookupService

__all__ = ["EntryFactory", "LookupService"]
