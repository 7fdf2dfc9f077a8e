"""Pydantic models for REST API."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


class CamelModel(BaseModel):
    """Base model using camelCase names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Course models


class PrerequisiteRef(CamelModel):
    """Reference to an existing course by its courseId."""

    course_id: str | None = None


class CourseCreate(CamelModel):
    """Request model for creating a course.

    Required fields are checked by the service so that missing values are
    reported as 400 with a readable message.
    """

    course_id: str | None = Field(default=None, max_length=50)
    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    prerequisites: list[PrerequisiteRef] = Field(default_factory=list)


class CourseSummary(CamelModel):
    """Short form of a course, used for prerequisite lists."""

    id: int
    course_id: str
    title: str


class CourseResponse(CamelModel):
    """Response model for a course."""

    id: int
    course_id: str
    title: str
    description: str | None
    prerequisites: list[CourseSummary]
    created_at: datetime


def course_to_response(course: Any) -> CourseResponse:
    """Convert a Course model to CourseResponse."""
    return CourseResponse(
        id=course.id,
        course_id=course.course_id,
        title=course.title,
        description=course.description,
        prerequisites=[
            CourseSummary(id=p.id, course_id=p.course_id, title=p.title)
            for p in course.prerequisites
        ],
        created_at=course.created_at,
    )


# Instance models


class InstanceCreate(CamelModel):
    """Request model for creating a course instance."""

    course_id: str | None = None
    year: int | None = None
    semester: int | None = None
    instructor: str | None = Field(default=None, max_length=255)


class InstanceResponse(CamelModel):
    """Response model for a course instance."""

    id: int
    course_id: str
    year: int
    semester: int
    semester_name: str
    instructor: str
    course_title: str
    course_description: str | None
    created_at: datetime


def instance_to_response(instance: Any) -> InstanceResponse:
    """Convert a CourseInstance model to InstanceResponse."""
    return InstanceResponse(
        id=instance.id,
        course_id=instance.course_id,
        year=instance.year,
        semester=instance.semester,
        semester_name=instance.semester_name,
        instructor=instance.instructor,
        course_title=instance.course_title,
        course_description=instance.course_description,
        created_at=instance.created_at,
    )
