"""Course endpoints."""

from fastapi import APIRouter, Request, Response, status

from coursecatalog.api.dependencies import CourseServiceDep
from coursecatalog.api.models import (
    APIResponse,
    CourseCreate,
    CourseResponse,
    course_to_response,
)

router = APIRouter(prefix="/courses", tags=["Course Management"])


@router.get("", response_model=APIResponse[list[CourseResponse]])
def list_courses(service: CourseServiceDep) -> APIResponse[list[CourseResponse]]:
    """List all courses with their prerequisites."""
    courses = service.list_courses()
    return APIResponse(data=[course_to_response(c) for c in courses])


@router.post(
    "",
    response_model=APIResponse[CourseResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Missing fields, duplicate courseId or unknown prerequisite"}},
)
def create_course(
    course: CourseCreate,
    service: CourseServiceDep,
    request: Request,
    response: Response,
) -> APIResponse[CourseResponse]:
    """Create a course. Prerequisites must already exist."""
    created = service.create_course(
        course_id=course.course_id,
        title=course.title,
        description=course.description,
        prerequisite_ids=[p.course_id for p in course.prerequisites],
    )
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{created.id}"
    return APIResponse(data=course_to_response(created))


@router.get(
    "/{id}",
    response_model=APIResponse[CourseResponse],
    responses={404: {"description": "Course not found"}},
)
def get_course(id: int, service: CourseServiceDep) -> APIResponse[CourseResponse]:
    """Get a course by ID, including prerequisites."""
    course = service.get_course(id)
    return APIResponse(data=course_to_response(course))


@router.delete(
    "/{id}",
    response_model=APIResponse[None],
    responses={
        404: {"description": "Course not found"},
        409: {"description": "Course is a prerequisite for other courses"},
    },
)
def delete_course(id: int, service: CourseServiceDep) -> APIResponse[None]:
    """Delete a course and its instances if no other course depends on it."""
    service.delete_course(id)
    return APIResponse(data=None)
