"""Department service: validation, integrity checks and persistence."""

import logging
from typing import Any, Dict, List, Mapping

from sqlalchemy.orm import Session

from src.data.dept_repository import DeptRepository
from src.schemas.dept import DEPT_VALIDATOR
from src.services.integrity_guard import IntegrityGuard
from src.utils.errors import NotFoundError, create_cannot_delete_error


logger = logging.getLogger(__name__)

# Fields a client may set; deptno is always server-assigned
DEPT_FIELDS = ("dname", "loc")


class DeptService:
    """
    Service layer for department CRUD.

    Every write validates the record, runs its integrity checks and only
    then calls the store, committing before it returns. The first failure
    ends the operation.
    """

    def __init__(self, session: Session):
        """Initialize service with database session."""
        self.session = session
        self.repository = DeptRepository(session)
        self.guard = IntegrityGuard(session)

    # =========================================================================
    # Read Operations
    # =========================================================================

    def list_depts(self) -> List[Dict[str, Any]]:
        """Get every department ordered by deptno."""
        return [dept.to_dict() for dept in self.repository.find_all()]

    def get_dept(self, deptno: int) -> Dict[str, Any]:
        """Get a department; raises NotFoundError if it doesn't exist."""
        dept = self.repository.find_by_id(deptno)
        if dept is None:
            raise NotFoundError()
        return dept.to_dict()

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create_dept(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Create a department; the deptno is assigned by the store."""
        values = _mutable_fields(data)
        DEPT_VALIDATOR.ensure_valid(values)

        dept = self.repository.insert(values)
        self.repository.commit()
        logger.info("Created dept %s", dept.deptno)
        return dept.to_dict()

    def update_dept(self, deptno: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Replace the name and location of an existing department."""
        values = _mutable_fields(data)
        DEPT_VALIDATOR.ensure_valid(values)

        dept = self.repository.update(deptno, values)
        if dept is None:
            raise NotFoundError()

        self.repository.commit()
        logger.info("Updated dept %s", deptno)
        return dept.to_dict()

    def delete_dept(self, deptno: int) -> None:
        """
        Delete a department that no employee belongs to.

        A missing department is NotFound even if stale employee rows still
        point at it, so repeating a delete never turns into a 422.
        """
        if not self.guard.department_exists(deptno):
            raise NotFoundError()

        if self.guard.has_dependent_employees(deptno):
            logger.info("Rejected delete of dept %s: employees still assigned", deptno)
            raise create_cannot_delete_error("deptno", deptno)

        if self.repository.delete_by_id(deptno) == 0:
            raise NotFoundError()

        self.repository.commit()
        logger.info("Deleted dept %s", deptno)


def _mutable_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {name: data.get(name) for name in DEPT_FIELDS}
