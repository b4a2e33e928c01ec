"""
Shared test fixtures for the employee records API.
"""
import os
from decimal import Decimal

# Point the app at SQLite before any app module is imported.
os.environ["SQLALCHEMY_DATABASE_URL"] = "sqlite://"
os.environ.setdefault("DETAILED_ERRORS", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from employee_api.database import Base, get_db
from employee_api.main import app
from employee_api.models import Employee


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    yield session
    session.close()


@pytest.fixture
def client(db_engine):
    """TestClient whose requests each get a session on the in-memory database."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_employees(db_session):
    """Two employees already in the table."""
    employees = [
        Employee(name="Ada Lovelace", position="Engineer", salary=Decimal("120000.00")),
        Employee(name="Grace Hopper", position="Admiral", salary=Decimal("150000.50")),
    ]
    db_session.add_all(employees)
    db_session.commit()
    for employee in employees:
        db_session.refresh(employee)
    return employees
