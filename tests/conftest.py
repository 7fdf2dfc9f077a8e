"""Shared pytest fixtures and configuration."""

from collections.abc import Generator

import pytest

from coursecatalog.store import CourseStore, Database, InstanceStore


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def database() -> Generator[Database, None, None]:
    """In-memory database with tables created."""
    db = Database(":memory:")
    db.create_tables()
    yield db
    db.close()


@pytest.fixture
def course_store(database: Database) -> CourseStore:
    return CourseStore(database)


@pytest.fixture
def instance_store(database: Database) -> InstanceStore:
    return InstanceStore(database)
