"""Referential integrity checks enforced by the application."""

from sqlalchemy.orm import Session

from src.data.dept_repository import DeptRepository
from src.data.emp_repository import EmpRepository


class IntegrityGuard:
    """
    Read-only existence checks guarding every write.

    The storage engine only constrains ``emp.deptno``; these checks cover
    both relationships for every backend and run before the write is issued,
    so a rejected request never reaches the store.
    """

    def __init__(self, session: Session):
        """Initialize guard with database session."""
        self.depts = DeptRepository(session)
        self.emps = EmpRepository(session)

    def department_exists(self, deptno: int) -> bool:
        """Check that a department with ``deptno`` exists."""
        return self.depts.find_by_id(deptno) is not None

    def employee_exists(self, empno: int) -> bool:
        """Check that an employee with ``empno`` exists."""
        return self.emps.find_by_id(empno) is not None

    def has_dependent_employees(self, deptno: int) -> bool:
        """Check whether any employee belongs to department ``deptno``."""
        return len(self.emps.find_by_deptno(deptno, limit=1)) > 0

    def is_referenced_as_manager(self, empno: int) -> bool:
        """Check whether any other employee reports to ``empno``."""
        return len(self.emps.find_subordinates(empno, limit=1)) > 0
