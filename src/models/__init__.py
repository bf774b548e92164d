"""Models package for the department/employee store."""

from src.models.base import Base
from src.models.dept import Dept
from src.models.emp import Emp

__all__ = [
    "Base",
    "Dept",
    "Emp",
]
