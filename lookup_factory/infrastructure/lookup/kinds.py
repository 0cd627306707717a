"""Lookup kinds exposed by the API."""

from dataclasses import dataclass

from lookup_factory.domain.lookup.entities import Category, LookupEntry, Role, Tag
from lookup_factory.infrastructure.lookup.models import (
    CategoryORM,
    LookupTableMixin,
    RoleORM,
    TagORM,
)


@dataclass(frozen=True)
class LookupKind:
    """
    Everything needed to expose one lookup kind.

    ``slug`` names the container providers (``<slug>_repository`` and
    ``<slug>_service``), ``path`` is where the router is mounted and
    ``request_value_key`` is the JSON key holding the value on create.
    """

    slug: str
    path: str
    request_value_key: str
    entry_type: type[LookupEntry]
    orm_model: type[LookupTableMixin]

    @property
    def name(self) -> str:
        return self.entry_type.kind_name()


CATEGORIES = LookupKind(
    slug="category",
    path="/categories",
    request_value_key="categoryName",
    entry_type=Category,
    orm_model=CategoryORM,
)

ROLES = LookupKind(
    slug="role",
    path="/roles",
    request_value_key="roleName",
    entry_type=Role,
    orm_model=RoleORM,
)

TAGS = LookupKind(
    slug="tag",
    path="/tags",
    request_value_key="tagName",
    entry_type=Tag,
    orm_model=TagORM,
)

LOOKUP_KINDS: tuple[LookupKind, ...] = (CATEGORIES, ROLES, TAGS)
