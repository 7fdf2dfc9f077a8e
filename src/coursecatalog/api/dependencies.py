"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends

from coursecatalog.services import CourseService, InstanceService
from coursecatalog.store import CourseStore, Database, InstanceStore


@dataclass
class Services:
    """Services sharing one Database."""

    database: Database
    courses: CourseService
    instances: InstanceService


def build_services(db_path: str = "coursecatalog.db") -> Services:
    """Open the database, create tables and wire stores into services."""
    database = Database(db_path)
    database.create_tables()
    return Services(
        database=database,
        courses=CourseService(CourseStore(database)),
        instances=InstanceService(InstanceStore(database)),
    )


# Global services (initialized on app startup)
_services: Services | None = None


def init_services(db_path: str = "coursecatalog.db") -> Services:
    """Initialize the global services."""
    global _services  # noqa: PLW0603
    if _services is not None:
        _services.database.close()
    _services = build_services(db_path)
    return _services


def close_services() -> None:
    """Close the global services and their database."""
    global _services  # noqa: PLW0603
    if _services is not None:
        _services.database.close()
        _services = None


def _require_services() -> Services:
    if _services is None:
        raise RuntimeError("Services not initialized. Call init_services() first.")
    return _services


def get_course_service() -> Generator[CourseService, None, None]:
    """Dependency that provides the CourseService."""
    yield _require_services().courses


def get_instance_service() -> Generator[InstanceService, None, None]:
    """Dependency that provides the InstanceService."""
    yield _require_services().instances


# Type aliases for dependency injection
CourseServiceDep = Annotated[CourseService, Depends(get_course_service)]
InstanceServiceDep = Annotated[InstanceService, Depends(get_instance_service)]
