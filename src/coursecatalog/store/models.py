"""SQLAlchemy models for the Store."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import IntEnum
from typing import Any

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    TypeDecorator,
    UniqueConstraint,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)

MIN_YEAR = 2000
MAX_YEAR = 2100


class Semester(IntEnum):
    """Semester numbers with their display names."""

    WINTER = 1
    FALL = 2

    @property
    def display_name(self) -> str:
        """Human-readable semester name, e.g. 'Winter'."""
        return self.name.capitalize()


class UTCDateTime(TypeDecorator):
    """DateTime stored as naive UTC and loaded back as timezone-aware UTC."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(UTC).replace(tzinfo=None)
        return value

    def process_result_value(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


course_prerequisites = Table(
    "course_prerequisites",
    Base.metadata,
    Column(
        "course_id",
        Integer,
        ForeignKey("courses.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "prerequisite_id",
        Integer,
        ForeignKey("courses.id", ondelete="RESTRICT"),
        primary_key=True,
    ),
)


class Course(Base):
    """Course model - a catalogue entry with its prerequisites."""

    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    course_id: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    # Relationships
    prerequisites: Mapped[list[Course]] = relationship(
        "Course",
        secondary=course_prerequisites,
        primaryjoin=lambda: Course.id == course_prerequisites.c.course_id,
        secondaryjoin=lambda: Course.id == course_prerequisites.c.prerequisite_id,
        order_by=lambda: Course.course_id,
        lazy="selectin",
        join_depth=1,
    )
    instances: Mapped[list[CourseInstance]] = relationship(
        "CourseInstance", back_populates="course", cascade="all, delete-orphan"
    )

    def __init__(
        self,
        course_id: str,
        title: str,
        description: str | None = None,
        prerequisites: list[Course] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.course_id = course_id
        self.title = title
        self.description = description
        self.prerequisites = list(prerequisites) if prerequisites else []
        self.created_at = datetime.now(UTC)

    @property
    def prerequisite_ids(self) -> list[str]:
        """Business keys of this course's prerequisites."""
        return [p.course_id for p in self.prerequisites]

    def __repr__(self) -> str:
        return f"<Course(id={self.id!r}, course_id={self.course_id!r}, title={self.title!r})>"


class CourseInstance(Base):
    """CourseInstance model - one delivery of a course in a given term."""

    __tablename__ = "course_instances"
    __table_args__ = (
        UniqueConstraint("year", "semester", "course_id", name="uq_instance_term_course"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    course_pk: Mapped[int] = mapped_column(
        Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False
    )
    course_id: Mapped[str] = mapped_column(String(50), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    semester: Mapped[int] = mapped_column(Integer, nullable=False)
    instructor: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    # Relationships
    course: Mapped[Course] = relationship("Course", back_populates="instances", lazy="joined")

    def __init__(
        self,
        course: Course,
        year: int,
        semester: int,
        instructor: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.course = course
        self.course_id = course.course_id
        self.year = year
        self.semester = semester
        self.instructor = instructor
        self.created_at = datetime.now(UTC)

    @property
    def semester_name(self) -> str:
        """Display name of the semester, e.g. 'Fall'."""
        try:
            return Semester(self.semester).display_name
        except ValueError:
            return f"Semester {self.semester}"

    @property
    def course_title(self) -> str:
        return self.course.title

    @property
    def course_description(self) -> str | None:
        return self.course.description

    def __repr__(self) -> str:
        return (
            f"<CourseInstance(id={self.id!r}, course_id={self.course_id!r}, "
            f"year={self.year!r}, semester={self.semester!r})>"
        )
