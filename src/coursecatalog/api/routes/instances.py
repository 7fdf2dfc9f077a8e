"""Course instance endpoints."""

from fastapi import APIRouter, Request, Response, status

from coursecatalog.api.dependencies import InstanceServiceDep
from coursecatalog.api.models import (
    APIResponse,
    InstanceCreate,
    InstanceResponse,
    instance_to_response,
)

router = APIRouter(prefix="/instances", tags=["Course Instance Management"])


@router.get("", response_model=APIResponse[list[InstanceResponse]])
def list_instances(service: InstanceServiceDep) -> APIResponse[list[InstanceResponse]]:
    """List every course instance."""
    instances = service.list_instances()
    return APIResponse(data=[instance_to_response(i) for i in instances])


@router.post(
    "",
    response_model=APIResponse[InstanceResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid instance, unknown course or duplicate"}},
)
def create_instance(
    instance: InstanceCreate,
    service: InstanceServiceDep,
    request: Request,
    response: Response,
) -> APIResponse[InstanceResponse]:
    """Schedule a course delivery for a year and semester."""
    created = service.create_instance(
        course_id=instance.course_id,
        year=instance.year,
        semester=instance.semester,
        instructor=instance.instructor,
    )
    response.headers["Location"] = (
        f"{request.url.path.rstrip('/')}/{created.year}/{created.semester}/{created.course_id}"
    )
    return APIResponse(data=instance_to_response(created))


@router.get(
    "/{year}/{semester}",
    response_model=APIResponse[list[InstanceResponse]],
    responses={400: {"description": "Invalid year or semester"}},
)
def list_instances_by_term(
    year: int, semester: int, service: InstanceServiceDep
) -> APIResponse[list[InstanceResponse]]:
    """List course instances for a year and semester."""
    instances = service.list_instances_by_term(year, semester)
    return APIResponse(data=[instance_to_response(i) for i in instances])


@router.get(
    "/{year}/{semester}/{course_id}",
    response_model=APIResponse[InstanceResponse],
    responses={
        400: {"description": "Invalid year or semester"},
        404: {"description": "Instance not found"},
    },
)
def get_instance(
    year: int, semester: int, course_id: str, service: InstanceServiceDep
) -> APIResponse[InstanceResponse]:
    """Get one course instance."""
    instance = service.get_instance(year, semester, course_id)
    return APIResponse(data=instance_to_response(instance))


@router.delete(
    "/{year}/{semester}/{course_id}",
    response_model=APIResponse[None],
    responses={
        400: {"description": "Invalid year or semester"},
        404: {"description": "Instance not found"},
    },
)
def delete_instance(
    year: int, semester: int, course_id: str, service: InstanceServiceDep
) -> APIResponse[None]:
    """Delete one course instance."""
    service.delete_instance(year, semester, course_id)
    return APIResponse(data=None)
