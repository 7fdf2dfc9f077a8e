"""InstanceStore - persistence for course instances."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session  # noqa: TC002

from coursecatalog.store.database import Database
from coursecatalog.store.exceptions import (
    CourseNotFoundError,
    InstanceExistsError,
    InstanceNotFoundError,
)
from coursecatalog.store.models import Course, CourseInstance


class InstanceStore:
    """CRUD operations for CourseInstances, keyed by (year, semester, course_id)."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def create_instance(
        self,
        course_id: str,
        year: int,
        semester: int,
        instructor: str,
    ) -> CourseInstance:
        """Create a new course instance.

        Args:
            course_id: Business key of the course being delivered
            year: Calendar year
            semester: Semester number
            instructor: Instructor name

        Returns:
            Created CourseInstance bound to its Course

        Raises:
            CourseNotFoundError: If no course has the given course_id
            InstanceExistsError: If the course already runs in this term
        """
        try:
            with self._db.transaction() as session:
                stmt = select(Course).where(Course.course_id == course_id)
                course = session.execute(stmt).scalar_one_or_none()
                if course is None:
                    raise CourseNotFoundError(f"Course not found: {course_id}")

                if self._find(session, year, semester, course_id) is not None:
                    raise InstanceExistsError(
                        f"Course instance already exists for {course_id} in {year}/{semester}"
                    )

                instance = CourseInstance(
                    course=course,
                    year=year,
                    semester=semester,
                    instructor=instructor,
                )
                session.add(instance)
                session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e):
                raise InstanceExistsError(
                    f"Course instance already exists for {course_id} in {year}/{semester}"
                ) from e
            raise
        return instance

    def get_instance(self, year: int, semester: int, course_id: str) -> CourseInstance:
        """Get the instance of a course in a term.

        Raises:
            InstanceNotFoundError: If no such instance exists
        """
        session = self._db.get_session()
        try:
            instance = self._find(session, year, semester, course_id)
            if instance is None:
                raise InstanceNotFoundError(
                    f"No instance of {course_id} in {year}/{semester}"
                )
            return instance
        finally:
            session.close()

    def list_instances(
        self,
        year: int | None = None,
        semester: int | None = None,
    ) -> list[CourseInstance]:
        """List instances with optional term filters.

        Returns:
            Instances ordered by year, semester and course_id
        """
        session = self._db.get_session()
        try:
            stmt = select(CourseInstance)

            if year is not None:
                stmt = stmt.where(CourseInstance.year == year)
            if semester is not None:
                stmt = stmt.where(CourseInstance.semester == semester)

            stmt = stmt.order_by(
                CourseInstance.year, CourseInstance.semester, CourseInstance.course_id
            )
            return list(session.execute(stmt).scalars().all())
        finally:
            session.close()

    def delete_instance(self, year: int, semester: int, course_id: str) -> None:
        """Delete the instance of a course in a term.

        Raises:
            InstanceNotFoundError: If no such instance exists
        """
        with self._db.transaction() as session:
            instance = self._find(session, year, semester, course_id)
            if instance is None:
                raise InstanceNotFoundError(
                    f"No instance of {course_id} in {year}/{semester}"
                )
            session.delete(instance)

    @staticmethod
    def _find(
        session: Session, year: int, semester: int, course_id: str
    ) -> CourseInstance | None:
        stmt = select(CourseInstance).where(
            CourseInstance.year == year,
            CourseInstance.semester == semester,
            CourseInstance.course_id == course_id,
        )
        return session.execute(stmt).scalar_one_or_none()
