import os

os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["TIMEZONE"] = "UTC"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from workforce import models  # noqa: F401
from workforce.database import Base, enable_sqlite_foreign_keys, get_db
from workforce.enums import Role
from workforce.main import app
from workforce.repository import Repository
from workforce.schemas.employee import EmployeeCreate
from workforce.services.employee_service import EmployeeService
from workforce.utils.auth import IdentityClaims, create_access_token

DEFAULT_PASSWORD = "secret123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def repository(db):
    return Repository(db)


@pytest.fixture
def make_employee(repository):
    counter = {"n": 0}

    def factory(role=Role.EMPLOYEE, email=None, password=DEFAULT_PASSWORD, department="Engineering", **overrides):
        counter["n"] += 1
        data = {
            "email": email or f"person{counter['n']}@example.com",
            "password": password,
            "first_name": "Test",
            "last_name": f"Person{counter['n']}",
            "department": department,
            "position": "Engineer",
            "role": role,
        }
        data.update(overrides)
        return EmployeeService(repository).create_employee(EmployeeCreate(**data))

    return factory


@pytest.fixture
def admin(make_employee):
    return make_employee(role=Role.ADMIN, email="admin@example.com", department="Administration")


@pytest.fixture
def employee(make_employee):
    return make_employee(role=Role.EMPLOYEE, email="alice@example.com")


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def token_for(employee) -> str:
    return create_access_token(
        IdentityClaims(employee_id=employee.id, email=employee.email, role=employee.role)
    )


def auth_headers(employee) -> dict:
    return {"Authorization": f"Bearer {token_for(employee)}"}


@pytest.fixture
def headers_for():
    return auth_headers
