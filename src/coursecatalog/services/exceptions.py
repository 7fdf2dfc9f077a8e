"""Exceptions raised by the service layer."""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for service errors."""

    pass


class ValidationError(ServiceError):
    """Malformed or semantically invalid input."""

    pass


class NotFoundError(ServiceError):
    """Referenced entity does not exist."""

    pass


class ConflictError(ServiceError):
    """Operation would violate a relational invariant."""

    pass


class DuplicateCourseError(ConflictError):
    """A course with the same courseId already exists."""

    pass


class DependencyConflictError(ConflictError):
    """Course is still a prerequisite of other courses."""

    def __init__(self, message: str, dependents: list[str]) -> None:
        super().__init__(message)
        self.dependents = dependents
