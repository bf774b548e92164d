"""SQLAlchemy Emp model."""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import Base


class Emp(Base):
    """
    Employee belonging to a department.

    ``deptno`` is a real foreign key (restricted on update and delete).
    ``mgr`` points at another employee but carries no database constraint;
    the integrity guard checks it before every write.
    """

    __tablename__ = "emp"

    empno: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ename: Mapped[str] = mapped_column(String(10), nullable=False)
    job: Mapped[str] = mapped_column(String(9), nullable=False)
    mgr: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    hiredate: Mapped[date] = mapped_column(Date, nullable=False)
    sal: Mapped[Decimal] = mapped_column(Numeric(7, 2), nullable=False)
    comm: Mapped[Optional[Decimal]] = mapped_column(Numeric(7, 2), nullable=True)
    deptno: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("dept.deptno", ondelete="RESTRICT", onupdate="RESTRICT"),
        nullable=False,
        index=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary."""
        return {
            "empno": self.empno,
            "ename": self.ename,
            "job": self.job,
            "mgr": self.mgr,
            "hiredate": self.hiredate,
            "sal": self.sal,
            "comm": self.comm,
            "deptno": self.deptno,
        }

    def __repr__(self) -> str:
        return f"<Emp(empno={self.empno}, ename='{self.ename}', deptno={self.deptno})>"
