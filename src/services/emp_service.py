"""Employee service: validation, integrity checks and persistence."""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.orm import Session

from src.data.emp_repository import EmpRepository
from src.schemas.emp import AMOUNT_PLACES, EMP_VALIDATOR
from src.services.integrity_guard import IntegrityGuard
from src.utils.errors import (
    NotFoundError,
    create_cannot_delete_error,
    create_not_exists_error,
)


logger = logging.getLogger(__name__)

# Fields a client may set; empno is always server-assigned
EMP_FIELDS = ("ename", "job", "mgr", "hiredate", "sal", "comm", "deptno")

AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_PLACES)


class EmpService:
    """
    Service layer for employee CRUD.

    Writes check that the department exists and, when a manager is given,
    that the manager exists. Deletes refuse employees that still manage
    someone.
    """

    def __init__(self, session: Session):
        """Initialize service with database session."""
        self.session = session
        self.repository = EmpRepository(session)
        self.guard = IntegrityGuard(session)

    # =========================================================================
    # Read Operations
    # =========================================================================

    def list_emps(self) -> List[Dict[str, Any]]:
        """Get every employee ordered by empno."""
        return [emp.to_dict() for emp in self.repository.find_all()]

    def get_emp(self, empno: int) -> Dict[str, Any]:
        """Get an employee; raises NotFoundError if it doesn't exist."""
        emp = self.repository.find_by_id(empno)
        if emp is None:
            raise NotFoundError()
        return emp.to_dict()

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create_emp(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Create an employee; the empno is assigned by the store."""
        values = _mutable_fields(data)
        EMP_VALIDATOR.ensure_valid(values)
        self._validate_references(values["deptno"], values["mgr"])

        emp = self.repository.insert(_normalize_amounts(values))
        self.repository.commit()
        logger.info("Created emp %s in dept %s", emp.empno, emp.deptno)
        return emp.to_dict()

    def update_emp(self, empno: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Replace every mutable field of an existing employee."""
        values = _mutable_fields(data)
        EMP_VALIDATOR.ensure_valid(values)
        self._validate_references(values["deptno"], values["mgr"])

        emp = self.repository.update(empno, _normalize_amounts(values))
        if emp is None:
            raise NotFoundError()

        self.repository.commit()
        logger.info("Updated emp %s", empno)
        return emp.to_dict()

    def delete_emp(self, empno: int) -> None:
        """Delete an employee that no other employee reports to."""
        if not self.guard.employee_exists(empno):
            raise NotFoundError()

        if self.guard.is_referenced_as_manager(empno):
            logger.info("Rejected delete of emp %s: still manages other employees", empno)
            raise create_cannot_delete_error("empno", empno)

        if self.repository.delete_by_id(empno) == 0:
            raise NotFoundError()

        self.repository.commit()
        logger.info("Deleted emp %s", empno)

    # =========================================================================
    # Validation Helpers
    # =========================================================================

    def _validate_references(self, deptno: int, mgr: Optional[int]) -> None:
        """Validate the department and manager references exist."""
        if not self.guard.department_exists(deptno):
            logger.info("Rejected emp write: dept %s does not exist", deptno)
            raise create_not_exists_error("deptno", deptno)

        if mgr is not None and not self.guard.employee_exists(mgr):
            logger.info("Rejected emp write: manager %s does not exist", mgr)
            raise create_not_exists_error("mgr(empno)", mgr)


def _mutable_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {name: data.get(name) for name in EMP_FIELDS}


def _normalize_amounts(values: Dict[str, Any]) -> Dict[str, Any]:
    """Store sal and comm with exactly two decimal places."""
    normalized = dict(values)
    for name in ("sal", "comm"):
        amount = normalized[name]
        if amount is not None:
            if not isinstance(amount, Decimal):
                amount = Decimal(str(amount))
            normalized[name] = amount.quantize(AMOUNT_QUANTUM)
    return normalized
