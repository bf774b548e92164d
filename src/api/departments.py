"""API endpoints for departments."""

from typing import Annotated, List, Union

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from src.api.params import MAX_ID
from src.database.database import get_db
from src.schemas.dept import DeptRequest, DeptResponse
from src.services.dept_service import DeptService


DeptNo = Annotated[int, Path(ge=0, le=MAX_ID, description="Department number")]


# =============================================================================
# Dependency Injection
# =============================================================================

def get_dept_service(
    session: Annotated[Session, Depends(get_db)],
) -> DeptService:
    """Get department service instance."""
    return DeptService(session)


# =============================================================================
# Router Setup
# =============================================================================

dept_router = APIRouter(prefix="/dept", tags=["Departments"])


@dept_router.get(
    "",
    response_model=List[DeptResponse],
    summary="List Departments",
    description="Get every department ordered by deptno. Returns 204 when there are none.",
    responses={204: {"description": "No departments"}},
)
def list_depts(
    service: Annotated[DeptService, Depends(get_dept_service)],
) -> Union[List[dict], Response]:
    depts = service.list_depts()
    if not depts:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return depts


@dept_router.get(
    "/{deptno}",
    response_model=DeptResponse,
    summary="Get Department",
)
def get_dept(
    deptno: DeptNo,
    service: Annotated[DeptService, Depends(get_dept_service)],
) -> dict:
    return service.get_dept(deptno)


@dept_router.post(
    "",
    response_model=DeptResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Department",
    description="Create a department. The deptno is assigned by the server.",
)
def create_dept(
    body: DeptRequest,
    service: Annotated[DeptService, Depends(get_dept_service)],
) -> dict:
    return service.create_dept(body.model_dump())


@dept_router.patch(
    "/{deptno}",
    response_model=DeptResponse,
    summary="Replace Department",
    description="Replace the name and location of a department.",
)
def update_dept(
    deptno: DeptNo,
    body: DeptRequest,
    service: Annotated[DeptService, Depends(get_dept_service)],
) -> dict:
    return service.update_dept(deptno, body.model_dump())


@dept_router.delete(
    "/{deptno}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Department",
    description="Delete a department. Fails with 422 while employees belong to it.",
)
def delete_dept(
    deptno: DeptNo,
    service: Annotated[DeptService, Depends(get_dept_service)],
) -> Response:
    service.delete_dept(deptno)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
