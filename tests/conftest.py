"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Tests never touch a real database file unless they create one in tmp_path
    - Every db_manager fixture is a fresh in-memory SQLite database with the schema created

Design Decisions:
    - StaticPool + check_same_thread=False: one in-memory connection shared by the
      TestClient threadpool and the test body
"""

import os

import pytest
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FORMAT", "text")

from warehouse.infrastructure.database import DatabaseSessionManager  # noqa: E402
from warehouse.infrastructure.sql_repository import SqlWarehouseRepository  # noqa: E402
from warehouse.services.inventory import InventoryService  # noqa: E402


@pytest.fixture
def db_manager():
    manager = DatabaseSessionManager(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    manager.create_schema()
    yield manager
    manager.dispose()


@pytest.fixture
def repository(db_manager):
    return SqlWarehouseRepository(db_manager)


@pytest.fixture
def service(repository):
    return InventoryService(repository)
