"""HTTP API — status codes, response shapes and error envelopes.

Tests cover:
    - health and readiness probes
    - pallet/box creation (201) and request validation (400)
    - domain errors mapped to 400/404/409/503 with the error envelope; 500 hides details
    - both reports, including the null group for empty pallets
"""

import logging
from datetime import date

import pytest
from fastapi.testclient import TestClient

import warehouse.infrastructure.database as db_module
from warehouse.api.dependencies import get_inventory_service
from warehouse.core.errors import DatabaseError
from warehouse.main import app


@pytest.fixture
def client(service, db_manager, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", db_manager)
    app.dependency_overrides[get_inventory_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def _pallet(client, size=100) -> dict:
    response = client.post(
        "/api/v1/pallets", json={"width": size, "height": size, "depth": size},
    )
    assert response.status_code == 201
    return response.json()


def _box(client, width=10, **dates) -> dict:
    body = {"width": width, "height": 10, "depth": 10, "weight": 1000}
    body.update({k: v.isoformat() for k, v in dates.items()})
    response = client.post("/api/v1/boxes", json=body)
    assert response.status_code == 201
    return response.json()


# ─── Health ───────────────────────────────────────────────────────


def test_health(client):
    response = client.get("/api/v1/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_ready(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json()["checks"]["database"] == "healthy"


def test_not_ready_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json()["reason"] == "database_unavailable"


# ─── Creation ─────────────────────────────────────────────────────


def test_create_pallet(client):
    body = _pallet(client)
    assert body["weight"] == 30_000
    assert body["volume"] == 1_000_000
    assert body["expire_date"] is None
    assert body["box_ids"] == []


def test_create_box_derives_expire_date(client):
    body = _box(client, production_date=date(2024, 1, 1))
    assert body["expire_date"] == "2024-04-10"
    assert body["pallet_id"] is None
    assert body["volume"] == 1000


def test_create_pallet_rejects_non_positive(client):
    response = client.post(
        "/api/v1/pallets", json={"width": 0, "height": 10, "depth": 10},
    )
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "body.width"


def test_create_box_without_dates(client):
    response = client.post(
        "/api/v1/boxes", json={"width": 1, "height": 1, "depth": 1, "weight": 1},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "MISSING_DATES"


def test_create_box_expire_before_production(client):
    response = client.post("/api/v1/boxes", json={
        "width": 1, "height": 1, "depth": 1, "weight": 1,
        "production_date": "2024-02-01", "expire_date": "2024-01-01",
    })
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "EXPIRE_NOT_AFTER_PRODUCTION"


# ─── Placement ────────────────────────────────────────────────────


def test_place_and_remove_box(client):
    pallet = _pallet(client)
    box = _box(client, expire_date=date(2024, 1, 1))

    placed = client.post(f"/api/v1/pallets/{pallet['id']}/boxes/{box['id']}")
    assert placed.status_code == 200
    assert placed.json()["box_ids"] == [box["id"]]
    assert placed.json()["expire_date"] == "2024-01-01"
    assert placed.json()["weight"] == 31_000

    [listed] = client.get("/api/v1/boxes").json()
    assert listed["pallet_id"] == pallet["id"]

    removed = client.delete(f"/api/v1/pallets/{pallet['id']}/boxes/{box['id']}")
    assert removed.status_code == 200
    assert removed.json()["box_ids"] == []


def test_place_too_large_box_conflicts(client):
    pallet = _pallet(client)
    box = _box(client, width=150, expire_date=date(2024, 1, 1))

    response = client.post(f"/api/v1/pallets/{pallet['id']}/boxes/{box['id']}")

    assert response.status_code == 409
    error = response.json()["error"]
    assert error["code"] == "BOX_TOO_LARGE"
    assert error["category"] == "business_rule"
    assert error["context"]["box_id"] == box["id"]
    assert error["context"]["pallet_id"] == pallet["id"]


def test_place_box_twice_conflicts(client):
    pallet = _pallet(client)
    box = _box(client, expire_date=date(2024, 1, 1))
    client.post(f"/api/v1/pallets/{pallet['id']}/boxes/{box['id']}")

    response = client.post(f"/api/v1/pallets/{pallet['id']}/boxes/{box['id']}")
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "BOX_ALREADY_ON_PALLET"


def test_place_on_unknown_pallet(client):
    box = _box(client, expire_date=date(2024, 1, 1))
    response = client.post(f"/api/v1/pallets/999999999/boxes/{box['id']}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


# ─── Reports ──────────────────────────────────────────────────────


def test_expiration_groups(client):
    empty = _pallet(client)
    full = _pallet(client)
    box = _box(client, expire_date=date(2024, 1, 1))
    client.post(f"/api/v1/pallets/{full['id']}/boxes/{box['id']}")

    groups = client.get("/api/v1/reports/expiration-groups").json()

    assert [g["expire_date"] for g in groups] == ["2024-01-01", None]
    assert [p["id"] for p in groups[0]["pallets"]] == [full["id"]]
    assert [p["id"] for p in groups[1]["pallets"]] == [empty["id"]]


def test_longest_shelf_life(client):
    small = _pallet(client, size=100)
    large = _pallet(client, size=150)
    for pallet, expire in ((small, date(2024, 6, 1)), (large, date(2024, 5, 1))):
        box = _box(client, expire_date=expire)
        client.post(f"/api/v1/pallets/{pallet['id']}/boxes/{box['id']}")

    entries = client.get("/api/v1/reports/longest-shelf-life", params={"n": 2}).json()

    assert [e["pallet"]["id"] for e in entries] == [small["id"], large["id"]]
    assert entries[0]["latest_box_expire_date"] == "2024-06-01"


def test_longest_shelf_life_rejects_negative_n(client):
    response = client.get("/api/v1/reports/longest-shelf-life", params={"n": -1})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


# ─── Error envelope ───────────────────────────────────────────────


class _UnavailableService:
    def list_pallets(self):
        raise DatabaseError("connection refused", "execute")


def test_database_error_is_503():
    app.dependency_overrides[get_inventory_service] = _UnavailableService
    try:
        response = TestClient(app).get("/api/v1/pallets")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 503
    error = response.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["context"]["operation"] == "execute"


def test_unexpected_error_hides_details():
    def broken():
        raise RuntimeError("dsn=postgresql://admin:secret@db")

    app.dependency_overrides[get_inventory_service] = broken
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/api/v1/pallets")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in response.text


def test_conflict_logs_entity_ids(client, caplog):
    pallet = _pallet(client)
    box = _box(client, width=150, expire_date=date(2024, 1, 1))

    with caplog.at_level(logging.WARNING, logger="warehouse.api.error_handlers"):
        client.post(f"/api/v1/pallets/{pallet['id']}/boxes/{box['id']}")

    [record] = [r for r in caplog.records if r.name == "warehouse.api.error_handlers"]
    assert record.error_code == "BOX_TOO_LARGE"
    assert record.box_id == box["id"]
    assert record.pallet_id == pallet["id"]
