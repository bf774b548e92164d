"""Generic repository providing the store primitives for one model."""

import logging
from typing import Any, ClassVar, Dict, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from src.models.base import Base
from src.utils.errors import StoreFailureError


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def describe_store_error(exc: SQLAlchemyError) -> str:
    """
    Summarize a storage error for clients.

    The driver message carries SQL text and column names, so only the
    category of failure is exposed.
    """
    if isinstance(exc, IntegrityError):
        return "integrity constraint violated"
    if isinstance(exc, PoolTimeoutError):
        return "storage timed out"
    if isinstance(exc, OperationalError):
        return "storage unavailable"
    return "storage operation failed"


def store_failure(exc: SQLAlchemyError) -> StoreFailureError:
    """Log a storage error and convert it into a StoreFailureError."""
    logger.error("Store operation failed: %s", exc)
    return StoreFailureError(describe_store_error(exc))


class Repository(Generic[ModelT]):
    """
    CRUD and filtered-query primitives over a single table.

    Every SQLAlchemy error is raised as StoreFailureError; retry policy,
    if any, belongs to the caller.
    """

    model: ClassVar[Type[Base]]

    def __init__(self, session: Session):
        """Initialize repository with database session."""
        self.session = session

    @property
    def primary_key(self) -> Any:
        return self.model.__mapper__.primary_key[0]

    # =========================================================================
    # Read Operations
    # =========================================================================

    def find_by_id(self, id_: int) -> Optional[ModelT]:
        """Get a row by primary key, or None."""
        try:
            return self.session.get(self.model, id_)
        except SQLAlchemyError as e:
            raise store_failure(e)

    def find_all(self, *order_by: Any) -> Sequence[ModelT]:
        """Get every row, ordered by primary key unless told otherwise."""
        stmt = select(self.model).order_by(*(order_by or (self.primary_key,)))
        try:
            return self.session.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise store_failure(e)

    def find_where(
        self,
        *criteria: ColumnElement[bool],
        limit: Optional[int] = None,
    ) -> Sequence[ModelT]:
        """Get rows matching every criterion, ordered by primary key."""
        stmt = select(self.model).where(*criteria).order_by(self.primary_key)
        if limit is not None:
            stmt = stmt.limit(limit)
        try:
            return self.session.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise store_failure(e)

    # =========================================================================
    # Write Operations
    # =========================================================================

    def insert(self, values: Dict[str, Any]) -> ModelT:
        """Insert a row; the primary key is assigned by the database."""
        instance = self.model(**values)
        try:
            self.session.add(instance)
            self.session.flush()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise store_failure(e)
        return instance

    def update(self, id_: int, patch: Dict[str, Any]) -> Optional[ModelT]:
        """Overwrite fields of an existing row; None if the row is missing."""
        instance = self.find_by_id(id_)
        if instance is None:
            return None

        for field_name, value in patch.items():
            setattr(instance, field_name, value)

        try:
            self.session.flush()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise store_failure(e)
        return instance

    def delete_by_id(self, id_: int) -> int:
        """Delete a row by primary key and return the number of rows removed."""
        stmt = delete(self.model).where(self.primary_key == id_)
        try:
            result = self.session.execute(stmt)
            self.session.flush()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise store_failure(e)
        return result.rowcount

    def commit(self) -> None:
        """Commit the session's transaction."""
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise store_failure(e)
