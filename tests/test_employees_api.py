"""
Tests for the employee HTTP endpoints.
"""

import sqlite3

from employee_api.app.core.exceptions import RecordStoreError


ADA = {"firstName": "Ada", "lastName": "Lovelace", "email": "ada@x.com"}


def create(client, payload=None):
    response = client.post("/api/employees", json=payload or ADA)
    assert response.status_code == 201
    return response.json()


def test_list_empty(client):
    response = client.get("/api/employees")
    assert response.status_code == 200
    assert response.json() == []


def test_create_returns_camel_case_record(client):
    data = create(client)
    assert data["id"] > 0
    assert data["firstName"] == "Ada"
    assert data["lastName"] == "Lovelace"
    assert data["email"] == "ada@x.com"


def test_create_accepts_snake_case_fields(client):
    data = create(client, {"first_name": "Grace", "last_name": "Hopper", "email": "grace@x.com"})
    assert data["firstName"] == "Grace"


def test_create_discards_client_id(client):
    existing = create(client)
    data = create(client, {**ADA, "id": existing["id"]})

    assert data["id"] != existing["id"]
    assert len(client.get("/api/employees").json()) == 2


def test_create_with_unknown_client_id_gets_store_id(client):
    data = create(client, {**ADA, "id": 500})
    assert data["id"] != 500
    assert client.get("/api/employees/500").status_code == 404


def test_create_missing_field_is_rejected(client):
    response = client.post("/api/employees", json={"firstName": "Ada"})
    assert response.status_code == 422


def test_get_missing_returns_not_found(client):
    response = client.get("/api/employees/12")
    assert response.status_code == 404
    assert response.json() == {"detail": "Employee id not found - 12"}


def test_update_existing(client):
    created = create(client)
    response = client.put("/api/employees", json={**created, "lastName": "King"})

    assert response.status_code == 200
    assert response.json() == {**created, "lastName": "King"}
    assert client.get(f"/api/employees/{created['id']}").json()["lastName"] == "King"


def test_update_missing_returns_not_found(client):
    response = client.put("/api/employees", json={**ADA, "id": 77})
    assert response.status_code == 404
    assert response.json()["detail"] == "Employee id not found - 77"
    assert client.get("/api/employees").json() == []


def test_delete_missing_returns_not_found_and_keeps_store(client):
    created = create(client)
    response = client.delete(f"/api/employees/{created['id'] + 1}")

    assert response.status_code == 404
    assert client.get("/api/employees").json() == [created]


def test_full_lifecycle(client):
    created = create(client)
    employee_id = created["id"]
    assert created == {**ADA, "id": employee_id}

    listing = client.get("/api/employees").json()
    assert listing == [created]

    updated = client.put("/api/employees", json={**created, "email": "ada@lovelace.org"})
    assert updated.status_code == 200

    fetched = client.get(f"/api/employees/{employee_id}")
    assert fetched.status_code == 200
    assert fetched.json()["email"] == "ada@lovelace.org"

    deleted = client.delete(f"/api/employees/{employee_id}")
    assert deleted.status_code == 200
    assert deleted.json() == f"Deleted employee id - {employee_id}"

    assert client.get(f"/api/employees/{employee_id}").status_code == 404


def test_store_failure_returns_generic_error(client):
    def broken_find_all():
        raise RecordStoreError("disk I/O error")

    client.app.state.employee_repository.find_all = broken_find_all
    response = client.get("/api/employees")

    assert response.status_code == 500
    assert response.json() == {"detail": "Record store error"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "connected"}


def test_health_reports_unreachable_store(client, monkeypatch):
    def refuse(*args, **kwargs):
        raise sqlite3.OperationalError("unable to open database file")

    monkeypatch.setattr(sqlite3, "connect", refuse)
    response = client.get("/health")
    assert response.status_code == 503


def test_id_beyond_integer_range_is_not_found(client):
    huge = 2 ** 63
    created = create(client)

    assert client.get(f"/api/employees/{huge}").status_code == 404

    response = client.delete(f"/api/employees/{huge}")
    assert response.status_code == 404
    assert response.json() == {"detail": f"Employee id not found - {huge}"}

    response = client.put("/api/employees", json={**ADA, "id": huge})
    assert response.status_code == 404
    assert response.json() == {"detail": f"Employee id not found - {huge}"}

    assert client.get("/api/employees").json() == [created]
