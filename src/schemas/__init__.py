"""Pydantic schemas for API request/response validation."""

from src.schemas.dept import DeptRequest, DeptResponse
from src.schemas.emp import EmpRequest, EmpResponse
from src.schemas.validation_probe import ProbeQuery, ProbeRecord

__all__ = [
    # Department schemas
    "DeptRequest",
    "DeptResponse",
    # Employee schemas
    "EmpRequest",
    "EmpResponse",
    # Validation probe schemas
    "ProbeQuery",
    "ProbeRecord",
]
