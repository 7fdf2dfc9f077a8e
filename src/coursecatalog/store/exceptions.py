"""Custom exceptions for the Store."""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for Store errors."""


class CourseNotFoundError(StoreError):
    """Course with given ID or code does not exist."""


class CourseExistsError(StoreError):
    """Course with given code already exists."""


class CourseHasDependentsError(StoreError):
    """Cannot delete a course that other courses list as a prerequisite."""

    def __init__(self, message: str, dependents: list[str]) -> None:
        super().__init__(message)
        self.dependents = dependents


class PrerequisiteNotFoundError(StoreError):
    """One or more requested prerequisites do not exist."""

    def __init__(self, message: str, missing: list[str]) -> None:
        super().__init__(message)
        self.missing = missing


class InstanceNotFoundError(StoreError):
    """No course instance for the given year, semester and course."""


class InstanceExistsError(StoreError):
    """Course instance for this term already exists."""
