"""CourseStore - persistence for courses and their prerequisites."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session  # noqa: TC002

from coursecatalog.store.database import Database
from coursecatalog.store.exceptions import (
    CourseExistsError,
    CourseHasDependentsError,
    CourseNotFoundError,
    PrerequisiteNotFoundError,
)
from coursecatalog.store.models import Course, course_prerequisites


class CourseStore:
    """CRUD operations for Courses.

    Every check-then-write sequence runs inside a single transaction.
    """

    def __init__(self, db: Database) -> None:
        """Initialize the store on top of a shared Database.

        Args:
            db: Database connection manager
        """
        self._db = db

    def create_course(
        self,
        course_id: str,
        title: str,
        description: str | None = None,
        prerequisite_ids: Iterable[str] = (),
    ) -> Course:
        """Create a course together with its prerequisite set.

        Args:
            course_id: Business key, e.g. "CS 209"
            title: Course title
            description: Optional free text
            prerequisite_ids: Business keys of existing courses

        Returns:
            The persisted Course with its generated ID

        Raises:
            CourseExistsError: If a course with the same course_id exists
            PrerequisiteNotFoundError: If any prerequisite does not exist
        """
        wanted = set(prerequisite_ids)
        try:
            with self._db.transaction() as session:
                stmt = select(Course).where(Course.course_id == course_id)
                if session.execute(stmt).scalar_one_or_none() is not None:
                    raise CourseExistsError(f"Course with courseId '{course_id}' already exists")

                prerequisites: list[Course] = []
                if wanted:
                    stmt = select(Course).where(Course.course_id.in_(sorted(wanted)))
                    prerequisites = list(session.execute(stmt).scalars().all())
                    if len(prerequisites) != len(wanted):
                        found = {p.course_id for p in prerequisites}
                        missing = sorted(wanted - found)
                        raise PrerequisiteNotFoundError(
                            f"Prerequisites do not exist: {', '.join(missing)}", missing
                        )

                course = Course(
                    course_id=course_id,
                    title=title,
                    description=description,
                    prerequisites=prerequisites,
                )
                session.add(course)
                session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "courses.course_id" in str(e):
                raise CourseExistsError(
                    f"Course with courseId '{course_id}' already exists"
                ) from e
            raise
        return course

    def get_course(self, id: int) -> Course:
        """Get course by surrogate ID.

        Raises:
            CourseNotFoundError: If course doesn't exist
        """
        session = self._db.get_session()
        try:
            course = session.get(Course, id)
            if course is None:
                raise CourseNotFoundError(f"Course with id '{id}' not found")
            return course
        finally:
            session.close()

    def get_course_by_code(self, course_id: str) -> Course:
        """Get course by business key.

        Raises:
            CourseNotFoundError: If course doesn't exist
        """
        session = self._db.get_session()
        try:
            stmt = select(Course).where(Course.course_id == course_id)
            course = session.execute(stmt).scalar_one_or_none()
            if course is None:
                raise CourseNotFoundError(f"Course not found: {course_id}")
            return course
        finally:
            session.close()

    def find_courses_by_codes(self, course_ids: Iterable[str]) -> list[Course]:
        """Return the courses whose business key is in course_ids.

        Unknown keys are silently skipped.
        """
        session = self._db.get_session()
        try:
            stmt = select(Course).where(Course.course_id.in_(sorted(set(course_ids))))
            stmt = stmt.order_by(Course.course_id)
            return list(session.execute(stmt).scalars().all())
        finally:
            session.close()

    def list_courses(self) -> list[Course]:
        """List all courses with prerequisites loaded, ordered by ID."""
        session = self._db.get_session()
        try:
            stmt = select(Course).order_by(Course.id)
            return list(session.execute(stmt).scalars().all())
        finally:
            session.close()

    def list_dependents(self, id: int) -> list[Course]:
        """List courses that have the given course as a direct prerequisite."""
        session = self._db.get_session()
        try:
            return self._dependents(session, id)
        finally:
            session.close()

    def delete_course(self, id: int) -> None:
        """Delete a course and its instances.

        The dependency check and the delete share one transaction, and the
        schema restricts deleting a course that is still a prerequisite.

        Raises:
            CourseNotFoundError: If course doesn't exist
            CourseHasDependentsError: If other courses list it as a prerequisite
        """
        try:
            with self._db.transaction() as session:
                course = session.get(Course, id)
                if course is None:
                    raise CourseNotFoundError(f"Course with id '{id}' not found")

                dependents = [c.course_id for c in self._dependents(session, id)]
                if dependents:
                    raise _has_dependents(dependents)

                # Instances go with the course via the delete-orphan cascade
                session.delete(course)
        except IntegrityError as e:
            # Dependent committed between the check and the delete
            if "FOREIGN KEY constraint failed" not in str(e):
                raise
            dependents = [c.course_id for c in self.list_dependents(id)]
            if not dependents:
                raise
            raise _has_dependents(dependents) from e

    @staticmethod
    def _dependents(session: Session, id: int) -> list[Course]:
        stmt = (
            select(Course)
            .join(course_prerequisites, Course.id == course_prerequisites.c.course_id)
            .where(course_prerequisites.c.prerequisite_id == id)
            .order_by(Course.course_id)
        )
        return list(session.execute(stmt).scalars().all())


def _has_dependents(dependents: list[str]) -> CourseHasDependentsError:
    return CourseHasDependentsError(
        "Cannot delete course as it is a prerequisite for other courses: "
        + ", ".join(dependents),
        dependents,
    )
