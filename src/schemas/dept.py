"""Pydantic models and validation rules for department records."""

from pydantic import BaseModel, ConfigDict, Field

from src.services.schema_validator import SchemaValidator, length, required


class DeptRequest(BaseModel):
    """
    Request body for creating or replacing a department.

    Only shape and types are enforced here; field constraints live in
    DEPT_VALIDATOR so every violation is reported together. ``deptno`` is
    assigned by the server and ignored if sent.
    """

    dname: str = Field(..., description="Department name (1-14 characters)")
    loc: str = Field(..., description="Location (1-13 characters)")


class DeptResponse(BaseModel):
    """Department data for API responses."""

    model_config = ConfigDict(from_attributes=True)

    deptno: int
    dname: str
    loc: str


DEPT_RULES = (
    required("dname"),
    length("dname", 1, 14),
    required("loc"),
    length("loc", 1, 13),
)

DEPT_VALIDATOR = SchemaValidator(DEPT_RULES)
