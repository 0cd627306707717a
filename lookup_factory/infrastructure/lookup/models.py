"""Database models for lookup tables."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from lookup_factory.database import Base


class LookupTableMixin:
    """Columns shared by every lookup table: surrogate key plus unique value."""

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True, index=True)
    value: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    def __repr__(self) -> str:
        """String representation of a lookup row."""
        return f"<{self.__class__.__name__}(id={self.id}, value='{self.value}')>"


class CategoryORM(LookupTableMixin, Base):
    """Category lookup table."""

    __tablename__ = "categories"


class RoleORM(LookupTableMixin, Base):
    """Role lookup table."""

    __tablename__ = "roles"


class TagORM(LookupTableMixin, Base):
    """Tag lookup table."""

    __tablename__ = "tags"
