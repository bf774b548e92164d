"""Emp repository for data access operations."""

from typing import Optional, Sequence

from src.data.repository import Repository
from src.models.emp import Emp


class EmpRepository(Repository[Emp]):
    """Store primitives for the ``emp`` table."""

    model = Emp

    def find_by_deptno(self, deptno: int, limit: Optional[int] = None) -> Sequence[Emp]:
        """Get employees assigned to a department."""
        return self.find_where(Emp.deptno == deptno, limit=limit)

    def find_subordinates(self, empno: int, limit: Optional[int] = None) -> Sequence[Emp]:
        """
        Get employees whose manager is ``empno``.

        An employee recorded as its own manager is not its own subordinate.
        """
        return self.find_where(Emp.mgr == empno, Emp.empno != empno, limit=limit)
