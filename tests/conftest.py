"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lookup_factory.config import Settings
from lookup_factory.database import Base, get_db
from lookup_factory.domain.lookup.entities import Category, Role
from lookup_factory.infrastructure.lookup import models
from lookup_factory.infrastructure.lookup.repositories import (
    InMemoryLookupRepository,
    LookupRepository,
)
from lookup_factory.main import create_app

# Test database URL (in-memory SQLite, one shared connection across threads)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

test_settings = Settings(
    DATABASE_URL=TEST_DATABASE_URL,
    ENVIRONMENT="test",
    CREATE_TABLES_ON_STARTUP=False,
)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def app() -> FastAPI:
    """Application configured for tests."""
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI, db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def tableless_session() -> Generator[Session, None, None]:
    """Session on a fresh in-memory database where no table was ever created."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def tableless_client(
    app: FastAPI, tableless_session: Session
) -> Generator[TestClient, Any, None]:
    """Test client whose requests hit a database with no lookup tables."""

    def override_get_db() -> Generator[Session, None, None]:
        yield tableless_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def category_repository(db_session: Session) -> LookupRepository[Category, models.CategoryORM]:
    return LookupRepository(db_session, entry_type=Category, orm_model=models.CategoryORM)


@pytest.fixture
def in_memory_categories() -> InMemoryLookupRepository[Category]:
    return InMemoryLookupRepository()


@pytest.fixture
def in_memory_roles() -> InMemoryLookupRepository[Role]:
    return InMemoryLookupRepository()


def create_test_category(db_session: Session, value: str) -> models.CategoryORM:
    """Insert a category row directly, bypassing the service."""
    category = models.CategoryORM(value=value)
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category
