"""API endpoints for employees."""

from typing import Annotated, List, Union

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from src.api.params import MAX_ID
from src.database.database import get_db
from src.schemas.emp import EmpRequest, EmpResponse
from src.services.emp_service import EmpService


EmpNo = Annotated[int, Path(ge=0, le=MAX_ID, description="Employee number")]


# =============================================================================
# Dependency Injection
# =============================================================================

def get_emp_service(
    session: Annotated[Session, Depends(get_db)],
) -> EmpService:
    """Get employee service instance."""
    return EmpService(session)


# =============================================================================
# Router Setup
# =============================================================================

# mgr and comm are left out of responses when unset
emp_router = APIRouter(prefix="/emp", tags=["Employees"])


@emp_router.get(
    "",
    response_model=List[EmpResponse],
    response_model_exclude_none=True,
    summary="List Employees",
    description="Get every employee ordered by empno. Returns 204 when there are none.",
    responses={204: {"description": "No employees"}},
)
def list_emps(
    service: Annotated[EmpService, Depends(get_emp_service)],
) -> Union[List[dict], Response]:
    emps = service.list_emps()
    if not emps:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return emps


@emp_router.get(
    "/{empno}",
    response_model=EmpResponse,
    response_model_exclude_none=True,
    summary="Get Employee",
)
def get_emp(
    empno: EmpNo,
    service: Annotated[EmpService, Depends(get_emp_service)],
) -> dict:
    return service.get_emp(empno)


@emp_router.post(
    "",
    response_model=EmpResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create Employee",
    description=(
        "Create an employee. The department and, when given, the manager "
        "must already exist. The empno is assigned by the server."
    ),
)
def create_emp(
    body: EmpRequest,
    service: Annotated[EmpService, Depends(get_emp_service)],
) -> dict:
    return service.create_emp(body.model_dump())


@emp_router.patch(
    "/{empno}",
    response_model=EmpResponse,
    response_model_exclude_none=True,
    summary="Replace Employee",
    description="Replace every field of an employee except its empno.",
)
def update_emp(
    empno: EmpNo,
    body: EmpRequest,
    service: Annotated[EmpService, Depends(get_emp_service)],
) -> dict:
    return service.update_emp(empno, body.model_dump())


@emp_router.delete(
    "/{empno}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Employee",
    description="Delete an employee. Fails with 422 while it manages other employees.",
)
def delete_emp(
    empno: EmpNo,
    service: Annotated[EmpService, Depends(get_emp_service)],
) -> Response:
    service.delete_emp(empno)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
