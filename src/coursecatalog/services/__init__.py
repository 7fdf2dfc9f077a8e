"""Services - validation and orchestration on top of the Store."""

from coursecatalog.services.course_service import CourseService
from coursecatalog.services.exceptions import (
    ConflictError,
    DependencyConflictError,
    DuplicateCourseError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from coursecatalog.services.instance_service import InstanceService

__all__ = [
    "ConflictError",
    "CourseService",
    "DependencyConflictError",
    "DuplicateCourseError",
    "InstanceService",
    "NotFoundError",
    "ServiceError",
    "ValidationError",
]
