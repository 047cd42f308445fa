"""Database session manager — error mapping, FK enforcement and health check."""

from datetime import date

import pytest
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError

from warehouse.core.errors import DatabaseError
from warehouse.infrastructure.database import DatabaseSessionManager, get_db_manager, init_db
import warehouse.infrastructure.database as db_module
from warehouse.models.box import BoxRecord
from warehouse.models.pallet import PalletRecord


def test_health_check_ok(db_manager):
    assert db_manager.health_check() is True


def test_foreign_key_violation_maps_to_database_error(db_manager):
    with pytest.raises(DatabaseError) as exc:
        with db_manager.session() as session:
            session.add(BoxRecord(
                id=1, width=1, height=1, depth=1, weight=1,
                expire_date=date(2024, 1, 1), pallet_id=999,
            ))
            session.commit()
    assert exc.value.operation == "commit"
    assert isinstance(exc.value.__cause__, IntegrityError)


def test_pallet_with_boxes_cannot_be_deleted(db_manager):
    with db_manager.session() as session:
        session.add(PalletRecord(id=1, width=1, height=1, depth=1))
        session.flush()
        session.add(BoxRecord(
            id=1, width=1, height=1, depth=1, weight=1,
            expire_date=date(2024, 1, 1), pallet_id=1,
        ))
        session.commit()

    with pytest.raises(DatabaseError):
        with db_manager.session() as session:
            session.execute(delete(PalletRecord).where(PalletRecord.id == 1))
            session.commit()


def test_non_database_errors_propagate_unchanged(db_manager):
    with pytest.raises(KeyError):
        with db_manager.session():
            raise KeyError("x")


def test_get_db_manager_requires_init(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(RuntimeError, match="not initialized"):
        get_db_manager()


def test_init_db_sets_singleton(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    manager = init_db("sqlite://")
    try:
        assert isinstance(manager, DatabaseSessionManager)
        assert get_db_manager() is manager
    finally:
        manager.dispose()
