"""Lookup-table entities: an integer identity plus a unique string value."""

from .entities import Category, EntryId, LookupEntry, Role, Tag

__all__ = [
    "Category",
    "EntryId",
    "LookupEntry",
    "Role",
    "Tag",
]
