"""SQLAlchemy Dept model."""

from typing import Any, Dict

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import Base


class Dept(Base):
    """Department; parent of every employee row."""

    __tablename__ = "dept"

    deptno: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    dname: Mapped[str] = mapped_column(String(14), nullable=False)
    loc: Mapped[str] = mapped_column(String(13), nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary."""
        return {
            "deptno": self.deptno,
            "dname": self.dname,
            "loc": self.loc,
        }

    def __repr__(self) -> str:
        return f"<Dept(deptno={self.deptno}, dname='{self.dname}')>"
