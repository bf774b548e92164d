"""Dept repository for data access operations."""

from src.data.repository import Repository
from src.models.dept import Dept


class DeptRepository(Repository[Dept]):
    """Store primitives for the ``dept`` table."""

    model = Dept
