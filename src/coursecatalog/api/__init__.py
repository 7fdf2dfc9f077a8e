"""REST API for Course Catalog."""

from coursecatalog.api.app import create_app
from coursecatalog.api.models import (
    APIResponse,
    CourseCreate,
    CourseResponse,
    InstanceCreate,
    InstanceResponse,
)

__all__ = [
    "APIResponse",
    "CourseCreate",
    "CourseResponse",
    "InstanceCreate",
    "InstanceResponse",
    "create_app",
]
