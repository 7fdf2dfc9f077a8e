"""Store - Persistent storage for courses and course instances."""

from coursecatalog.store.courses import CourseStore
from coursecatalog.store.database import Database
from coursecatalog.store.exceptions import (
    CourseExistsError,
    CourseHasDependentsError,
    CourseNotFoundError,
    InstanceExistsError,
    InstanceNotFoundError,
    PrerequisiteNotFoundError,
    StoreError,
)
from coursecatalog.store.instances import InstanceStore
from coursecatalog.store.models import Course, CourseInstance, Semester

__all__ = [
    "Course",
    "CourseExistsError",
    "CourseHasDependentsError",
    "CourseInstance",
    "CourseNotFoundError",
    "CourseStore",
    "Database",
    "InstanceExistsError",
    "InstanceNotFoundError",
    "InstanceStore",
    "PrerequisiteNotFoundError",
    "Semester",
    "StoreError",
]
