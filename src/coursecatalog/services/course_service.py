"""CourseService - course creation, lookup and deletion rules."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from coursecatalog.services.exceptions import (
    DependencyConflictError,
    DuplicateCourseError,
    NotFoundError,
    ValidationError,
)
from coursecatalog.store import (
    CourseExistsError,
    CourseHasDependentsError,
    CourseNotFoundError,
    PrerequisiteNotFoundError,
)

if TYPE_CHECKING:
    from coursecatalog.store import Course, CourseStore

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class CourseService:
    """Validates course requests and delegates persistence to the CourseStore.

    Prerequisites are checked for direct existence only: chains and cycles
    are not inspected.
    """

    def __init__(self, course_store: CourseStore) -> None:
        self.course_store = course_store

    def create_course(
        self,
        course_id: str | None,
        title: str | None,
        description: str | None = None,
        prerequisite_ids: Iterable[str] | None = None,
    ) -> Course:
        """Create a course with its full prerequisite set.

        Args:
            course_id: Business key, required
            title: Course title, required
            description: Optional description
            prerequisite_ids: Business keys of prerequisite courses

        Returns:
            The persisted Course.

        Raises:
            ValidationError: Missing fields or unknown prerequisites.
            DuplicateCourseError: course_id is already taken.
        """
        if _is_blank(course_id) or _is_blank(title):
            logger.warning("Rejected course: missing courseId or title")
            raise ValidationError("Course ID and title are required")

        prereqs = list(dict.fromkeys(prerequisite_ids or ()))
        if any(_is_blank(p) for p in prereqs):
            raise ValidationError("Prerequisite courseId must not be empty")

        try:
            course = self.course_store.create_course(
                course_id=course_id,  # type: ignore[arg-type]
                title=title,  # type: ignore[arg-type]
                description=description,
                prerequisite_ids=prereqs,
            )
        except CourseExistsError as e:
            logger.warning("Course %s already exists", course_id)
            raise DuplicateCourseError(str(e)) from e
        except PrerequisiteNotFoundError as e:
            logger.warning("Course %s lists unknown prerequisites: %s", course_id, e.missing)
            raise ValidationError(
                f"One or more prerequisites do not exist: {', '.join(e.missing)}"
            ) from e

        logger.info("Created course %s (id=%s)", course.course_id, course.id)
        return course

    def list_courses(self) -> Sequence[Course]:
        """Return every course with its prerequisites."""
        return self.course_store.list_courses()

    def get_course(self, id: int) -> Course:
        """Return the course with the given surrogate ID.

        Raises:
            NotFoundError: No such course.
        """
        try:
            return self.course_store.get_course(id)
        except CourseNotFoundError as e:
            raise NotFoundError(str(e)) from e

    def delete_course(self, id: int) -> None:
        """Delete a course and its instances unless other courses depend on it.

        Raises:
            NotFoundError: No such course.
            DependencyConflictError: The course is a prerequisite elsewhere.
        """
        try:
            self.course_store.delete_course(id)
        except CourseNotFoundError as e:
            raise NotFoundError(str(e)) from e
        except CourseHasDependentsError as e:
            logger.warning("Course id=%s is still required by %s", id, e.dependents)
            raise DependencyConflictError(str(e), e.dependents) from e

        logger.info("Deleted course id=%s", id)
