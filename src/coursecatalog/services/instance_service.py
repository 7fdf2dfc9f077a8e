"""InstanceService - scheduling course deliveries per term."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from coursecatalog.services.exceptions import NotFoundError, ValidationError
from coursecatalog.store import (
    CourseNotFoundError,
    InstanceExistsError,
    InstanceNotFoundError,
    Semester,
)
from coursecatalog.store.models import MAX_YEAR, MIN_YEAR

if TYPE_CHECKING:
    from coursecatalog.store import CourseInstance, InstanceStore

logger = logging.getLogger(__name__)


def validate_term(year: int, semester: int) -> None:
    """Check that year and semester are inside the supported ranges.

    Raises:
        ValidationError: If either value is out of range.
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(
            f"Year must be in YYYY format between {MIN_YEAR} and {MAX_YEAR}"
        )
    if semester not in {s.value for s in Semester}:
        raise ValidationError("Semester must be either 1 or 2")


class InstanceService:
    """Validates instance requests and delegates persistence to the InstanceStore."""

    def __init__(self, instance_store: InstanceStore) -> None:
        self.instance_store = instance_store

    def create_instance(
        self,
        course_id: str | None,
        year: int | None,
        semester: int | None,
        instructor: str | None,
    ) -> CourseInstance:
        """Schedule a course for a term.

        Raises:
            ValidationError: Missing fields, out-of-range term, unknown
                course, or a duplicate instance.
        """
        if (
            course_id is None
            or not course_id.strip()
            or year is None
            or semester is None
            or instructor is None
            or not instructor.strip()
        ):
            logger.warning("Rejected instance: missing required fields")
            raise ValidationError("Course ID, year, semester, and instructor are required")

        validate_term(year, semester)

        try:
            instance = self.instance_store.create_instance(
                course_id=course_id,
                year=year,
                semester=semester,
                instructor=instructor,
            )
        except CourseNotFoundError as e:
            logger.warning("Rejected instance: unknown course %s", course_id)
            raise ValidationError(f"Course not found: {course_id}") from e
        except InstanceExistsError as e:
            logger.warning("Rejected instance: %s", e)
            raise ValidationError(
                "Course instance already exists for this year and semester"
            ) from e

        logger.info("Created instance %s %s/%s", course_id, year, semester)
        return instance

    def list_instances(self) -> Sequence[CourseInstance]:
        """Return every scheduled instance."""
        return self.instance_store.list_instances()

    def list_instances_by_term(self, year: int, semester: int) -> Sequence[CourseInstance]:
        """Return the instances running in the given term.

        Raises:
            ValidationError: Year or semester out of range.
        """
        validate_term(year, semester)
        return self.instance_store.list_instances(year=year, semester=semester)

    def get_instance(self, year: int, semester: int, course_id: str) -> CourseInstance:
        """Return one instance.

        Raises:
            ValidationError: Year or semester out of range.
            NotFoundError: No such instance.
        """
        validate_term(year, semester)
        try:
            return self.instance_store.get_instance(year, semester, course_id)
        except InstanceNotFoundError as e:
            raise NotFoundError(str(e)) from e

    def delete_instance(self, year: int, semester: int, course_id: str) -> None:
        """Delete one instance. Instances have no dependents.

        Raises:
            ValidationError: Year or semester out of range.
            NotFoundError: No such instance.
        """
        validate_term(year, semester)
        try:
            self.instance_store.delete_instance(year, semester, course_id)
        except InstanceNotFoundError as e:
            raise NotFoundError(str(e)) from e

        logger.info("Deleted instance %s %s/%s", course_id, year, semester)
