"""SQLAlchemy repository for lookup entries."""

from typing import Generic, TypeVar

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from lookup_factory.domain.lookup.entities import LookupEntry
from lookup_factory.exceptions import DuplicateValueError, PersistenceError
from lookup_factory.infrastructure.lookup.mappers.lookup_mapper import LookupMapper
from lookup_factory.infrastructure.lookup.models import LookupTableMixin

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=LookupEntry)
M = TypeVar("M", bound=LookupTableMixin)


class LookupRepository(Generic[T, M]):
    """Repository for one lookup kind, backed by its own table."""

    def __init__(self, db: Session, entry_type: type[T], orm_model: type[M]) -> None:
        self.db = db
        self.orm_model = orm_model
        self.mapper: LookupMapper[T, M] = LookupMapper(entry_type, orm_model)

    @property
    def kind(self) -> str:
        return self.mapper.entry_type.kind_name()

    def find_by_value(self, value: str) -> T | None:
        """
        Find an entry by exact value.

        Args:
            value: The value to match

        Returns:
            Entry if found, None otherwise

        Raises:
            PersistenceError: If the query fails
        """
        stmt = select(self.orm_model).where(self.orm_model.value == value)
        try:
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("lookup_query_failed", kind=self.kind, exc_info=True)
            raise PersistenceError(f"Failed to look up {self.kind}") from e
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, entry: T) -> T:
        """
        Insert a new entry.

        Args:
            entry: The entry to save

        Returns:
            Saved entry with database-generated ID

        Raises:
            DuplicateValueError: If the unique constraint on value is violated
            PersistenceError: If the insert fails for any other reason
        """
        orm_model = self.mapper.to_orm(entry)
        try:
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("lookup_unique_constraint_violated", kind=self.kind, value=entry.value)
            raise DuplicateValueError(self.kind, entry.value) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("lookup_save_failed", kind=self.kind, exc_info=True)
            raise PersistenceError(f"Failed to save {self.kind}") from e
        return self.mapper.to_domain(orm_model)

    def find_all(self) -> list[T]:
        """
        Get all entries of this kind.

        Returns:
            List of entries, ordered by ID

        Raises:
            PersistenceError: If the query fails
        """
        stmt = select(self.orm_model).order_by(self.orm_model.id)
        try:
            orm_models = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            logger.error("lookup_list_failed", kind=self.kind, exc_info=True)
            raise PersistenceError(f"Failed to list {self.kind}") from e
        return [self.mapper.to_domain(orm) for orm in orm_models]
