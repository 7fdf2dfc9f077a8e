"""Fixtures for API route tests."""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from coursecatalog.api.app import API_PREFIX, add_exception_handlers
from coursecatalog.api.dependencies import get_course_service, get_instance_service
from coursecatalog.api.routes import courses, instances
from coursecatalog.services import CourseService, InstanceService
from coursecatalog.store import CourseStore, InstanceStore


@pytest.fixture
def course_service(course_store: CourseStore) -> CourseService:
    return CourseService(course_store)


@pytest.fixture
def instance_service(instance_store: InstanceStore) -> InstanceService:
    return InstanceService(instance_store)


@pytest.fixture
def app(course_service: CourseService, instance_service: InstanceService) -> FastAPI:
    """Create a test FastAPI app with in-memory services."""
    app = FastAPI()

    def override_course_service() -> Generator[CourseService, None, None]:
        yield course_service

    def override_instance_service() -> Generator[InstanceService, None, None]:
        yield instance_service

    app.dependency_overrides[get_course_service] = override_course_service
    app.dependency_overrides[get_instance_service] = override_instance_service

    add_exception_handlers(app)
    app.include_router(courses.router, prefix=API_PREFIX)
    app.include_router(instances.router, prefix=API_PREFIX)

    return app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
