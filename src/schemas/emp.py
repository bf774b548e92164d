"""Pydantic models and validation rules for employee records."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.api.params import MAX_ID
from src.services.schema_validator import (
    SchemaValidator,
    length,
    required,
    scale,
    value_range,
)


# NUMERIC(7,2) bounds for sal and comm
MIN_AMOUNT = Decimal("0.01")
MAX_AMOUNT = Decimal("99999.99")
AMOUNT_PLACES = 2


class EmpRequest(BaseModel):
    """
    Request body for creating or replacing an employee.

    ``empno`` is assigned by the server and ignored if sent.
    """

    ename: str = Field(..., description="Employee name (1-10 characters)")
    job: str = Field(..., description="Job title (1-9 characters)")
    mgr: Optional[int] = Field(
        default=None, ge=0, le=MAX_ID, description="Manager's empno"
    )
    hiredate: date = Field(..., description="Date of hire")
    sal: Decimal = Field(..., description="Salary (0.01 - 99999.99)")
    comm: Optional[Decimal] = Field(default=None, description="Commission (0.01 - 99999.99)")
    deptno: int = Field(
        ..., ge=0, le=MAX_ID, description="Department the employee belongs to"
    )


class EmpResponse(BaseModel):
    """Employee data for API responses."""

    model_config = ConfigDict(from_attributes=True)

    empno: int
    ename: str
    job: str
    mgr: Optional[int] = None
    hiredate: date
    sal: Decimal
    comm: Optional[Decimal] = None
    deptno: int


EMP_RULES = (
    required("ename"),
    length("ename", 1, 10),
    required("job"),
    length("job", 1, 9),
    required("hiredate"),
    required("sal"),
    value_range("sal", MIN_AMOUNT, MAX_AMOUNT),
    scale("sal", AMOUNT_PLACES),
    value_range("comm", MIN_AMOUNT, MAX_AMOUNT),
    scale("comm", AMOUNT_PLACES),
    required("deptno"),
)

EMP_VALIDATOR = SchemaValidator(EMP_RULES)
