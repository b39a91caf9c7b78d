"""
Shared fixtures.

Every test gets its own SQLite file under ``tmp_path``.
"""

import pytest
from fastapi.testclient import TestClient

from employee_api.app.core.config import Settings
from employee_api.app.core.db import Database
from employee_api.app.main import create_app
from employee_api.app.repositories import SQLiteEmployeeRepository
from employee_api.app.services import EmployeeService


@pytest.fixture
def database(tmp_path):
    """Create a migrated database."""
    db = Database(str(tmp_path / "employees.db"))
    db.init_db()
    return db


@pytest.fixture
def repository(database):
    return SQLiteEmployeeRepository(database)


@pytest.fixture
def service(repository, database):
    return EmployeeService(repository=repository, database=database)


@pytest.fixture
def client(tmp_path):
    """Create a test client; the context manager runs the app lifespan."""
    app = create_app(Settings(database_url=str(tmp_path / "api.db")))
    with TestClient(app) as test_client:
        yield test_client
