"""Shared fixtures: an in-memory database and an app bound to it."""

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from src.database.database import (
    DatabaseConfig,
    dispose_engine,
    get_engine,
    get_session_factory,
    init_db,
)
from src.main import create_app
from src.models.dept import Dept
from src.models.emp import Emp


@pytest.fixture
def engine():
    """Create a fresh in-memory database with the full schema."""
    dispose_engine()
    init_db(DatabaseConfig(url="sqlite://"))
    yield get_engine()
    dispose_engine()


@pytest.fixture
def session(engine):
    """Create database session."""
    session = get_session_factory()()
    yield session
    session.close()


@pytest.fixture
def app(engine):
    """Create test application."""
    return create_app()


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def org(session):
    """
    Seed a small organization.

    SALES holds KING and SMITH (who reports to KING); OPS is empty.
    """
    sales = Dept(dname="SALES", loc="NYC")
    ops = Dept(dname="OPS", loc="BOSTON")
    session.add_all([sales, ops])
    session.flush()

    king = Emp(
        ename="KING",
        job="PRESIDENT",
        hiredate=date(2019, 11, 17),
        sal=Decimal("5000.00"),
        deptno=sales.deptno,
    )
    session.add(king)
    session.flush()

    smith = Emp(
        ename="SMITH",
        job="CLERK",
        mgr=king.empno,
        hiredate=date(2020, 12, 17),
        sal=Decimal("800.00"),
        deptno=sales.deptno,
    )
    session.add(smith)
    session.flush()

    return {"sales": sales, "ops": ops, "king": king, "smith": smith}
